# Text for rationales, alerts and tasks.
#
# Each check owns its phrasing. Functions here only format strings from a
# resolved status and the offending identifiers; they never inspect records.
from typing import Sequence

NO_TRAINING_FOUND = "No Software Design Training found"
TRAINING_OUT_OF_DATE = "Software Design Training is out of date"
TRAINING_UP_TO_DATE = "Software Design Training is up to date"
TRAINING_DATE_UNKNOWN = "Software Design Training date is unknown"
CREATE_TRAINING = "Create a Software Design Training"
UPDATE_TRAINING = "Update Software Design Training"

MFA_ENABLED = "The organization(s) have 2FA enabled"
NO_ORGANIZATIONS_FOUND = "No organizations found for the project"
REGISTER_ORGANIZATIONS = "Add the GitHub organization(s) of the project"


def _names(offenders: Sequence[str]) -> str:
    return ", ".join(offenders)


def mfa_disabled(offenders: Sequence[str]) -> str:
    return f"The organization(s) ({_names(offenders)}) do not have 2FA enabled"


def mfa_unknown(offenders: Sequence[str]) -> str:
    return f"The organization(s) ({_names(offenders)}) have 2FA status unknown"


def enable_mfa(offenders: Sequence[str]) -> str:
    return f"Enable 2FA for the organization(s) ({_names(offenders)})"


def check_details(details_url: str) -> str:
    return f"Check the details on {details_url}"
