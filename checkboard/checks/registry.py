import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Union

from checkboard.checks.validators import (
    BaseValidator,
    CheckInput,
    GithubOrgMFAValidator,
    SoftwareDesignTrainingValidator,
)
from checkboard.core.config import Settings
from checkboard.core.constants import CheckType
from checkboard.core.exceptions import UnknownCheckError
from checkboard.schemas.results import CheckAnalysis

logger = logging.getLogger(__name__)


class CheckRegistry:
    """Explicit mapping from check type to the validator that evaluates it"""

    def __init__(self, validators: Optional[Iterable[BaseValidator]] = None):
        self._validators: Dict[CheckType, BaseValidator] = {}
        for validator in validators or ():
            self.register(validator)

    def register(self, validator: BaseValidator) -> None:
        self._validators[validator.check_type] = validator
        logger.debug(f"Registered validator: {validator.check_type.value}")

    def available(self) -> List[CheckType]:
        return sorted(self._validators, key=lambda check_type: check_type.value)

    def get(self, check_type: Union[CheckType, str]) -> BaseValidator:
        try:
            key = CheckType(check_type)
        except ValueError:
            raise UnknownCheckError(str(check_type)) from None

        validator = self._validators.get(key)
        if validator is None:
            raise UnknownCheckError(key.value)
        return validator

    def run(
        self,
        check_type: Union[CheckType, str],
        records: Iterable[Any],
        check: CheckInput,
        projects: Iterable[Any],
    ) -> CheckAnalysis:
        """Evaluate one check with the validator registered for it"""
        validator = self.get(check_type)
        analysis = validator.validate(records, check, projects)

        failed = len(analysis.alerts)
        logger.info(
            f"Check evaluated: {validator.check_type.value}, projects={len(analysis.results)}, failed={failed}",
            extra={"check_type": validator.check_type.value},
        )
        return analysis


def build_registry(settings: Settings, reference_time: datetime) -> CheckRegistry:
    """
    Build the default registry from settings.

    ``reference_time`` is the "now" for recency checks; the caller owns the
    clock.
    """
    return CheckRegistry(
        [
            GithubOrgMFAValidator(no_evidence_status=settings.MFA_NO_EVIDENCE_STATUS),
            SoftwareDesignTrainingValidator(
                reference_time=reference_time,
                validity=timedelta(days=settings.TRAINING_VALIDITY_DAYS),
            ),
        ]
    )
