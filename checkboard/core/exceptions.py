class CheckboardError(Exception):
    """Base error for the check engine"""


class ValidatorContractError(CheckboardError, ValueError):
    """
    The caller broke the validator input contract.

    Raised for configuration defects (a check without id or details_url,
    duplicate project ids), never for missing evidence.
    """


class UnknownCheckError(CheckboardError, LookupError):
    """No validator is registered for the requested check type"""

    def __init__(self, check_type: str):
        super().__init__(f"No validator registered for check ({check_type})")
        self.check_type = check_type
