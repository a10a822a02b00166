"""
Check validators.

A validator turns the raw signal records of one check into a verdict for
every project, plus an alert and a task for each failing project:

    (records, check, projects) -> CheckAnalysis(alerts, results, tasks)

Validators are pure. They read no clock, settings or storage; time and
policy knobs are constructor arguments.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Mapping, Tuple, Union

from pydantic import ValidationError

from checkboard.checks import messages
from checkboard.checks.aggregator import build_analysis
from checkboard.checks.grouping import coerce_projects, group_by_project
from checkboard.checks.priorities import severity_from_priority_group
from checkboard.checks.resolvers import (
    NO_EVIDENCE,
    TRAINING_EXPIRED,
    Resolution,
    resolve_org_mfa,
    resolve_training_recency,
)
from checkboard.core.constants import CheckStatus, CheckType
from checkboard.core.exceptions import ValidatorContractError
from checkboard.schemas.project import ComplianceCheck
from checkboard.schemas.results import CheckAnalysis

logger = logging.getLogger(__name__)

CheckInput = Union[ComplianceCheck, Mapping[str, Any]]


def coerce_check(check: CheckInput) -> ComplianceCheck:
    if isinstance(check, ComplianceCheck):
        return check
    try:
        return ComplianceCheck.model_validate(check)
    except ValidationError as exc:
        raise ValidatorContractError(f"Invalid check metadata: {exc}") from exc


class BaseValidator(ABC):
    """Abstract base class for all check validators"""

    check_type: CheckType

    def validate(
        self,
        records: Iterable[Any],
        check: CheckInput,
        projects: Iterable[Any],
    ) -> CheckAnalysis:
        """Evaluate every project against the check"""
        compliance_check = coerce_check(check)
        project_list = coerce_projects(projects)
        grouped = group_by_project(records, project_list)
        severity = severity_from_priority_group(compliance_check.default_priority_group)

        analysis = build_analysis(
            grouped,
            compliance_check,
            severity,
            resolve=self.resolve,
            failure_text=self.failure_text,
        )
        logger.debug(
            f"{self.check_type.value}: {len(analysis.results)} result(s), {len(analysis.alerts)} failing",
            extra={"check_type": self.check_type.value, "compliance_check_id": compliance_check.id},
        )
        return analysis

    @abstractmethod
    def resolve(self, records: List[Any]) -> Resolution:
        """Reduce one project's records to a status"""

    @abstractmethod
    def failure_text(self, resolution: Resolution) -> Tuple[str, str]:
        """Alert title and task title for a failed resolution"""


class GithubOrgMFAValidator(BaseValidator):
    """Every GitHub organization of a project must require 2FA"""

    check_type = CheckType.GITHUB_ORG_MFA

    def __init__(self, no_evidence_status: CheckStatus = CheckStatus.UNKNOWN):
        self.no_evidence_status = CheckStatus(no_evidence_status)

    def resolve(self, records: List[Any]) -> Resolution:
        return resolve_org_mfa(records, no_evidence_status=self.no_evidence_status)

    def failure_text(self, resolution: Resolution) -> Tuple[str, str]:
        if resolution.reason == NO_EVIDENCE:
            return messages.NO_ORGANIZATIONS_FOUND, messages.REGISTER_ORGANIZATIONS
        return resolution.rationale, messages.enable_mfa(resolution.offenders)


class SoftwareDesignTrainingValidator(BaseValidator):
    """A project must hold a software design training within the validity horizon"""

    check_type = CheckType.SOFTWARE_DESIGN_TRAINING

    def __init__(self, reference_time: datetime, validity: timedelta = timedelta(days=365)):
        if validity <= timedelta(0):
            raise ValueError("validity must be a positive duration")
        self.reference_time = reference_time
        self.validity = validity

    def resolve(self, records: List[Any]) -> Resolution:
        return resolve_training_recency(records, self.reference_time, self.validity)

    def failure_text(self, resolution: Resolution) -> Tuple[str, str]:
        if resolution.reason == TRAINING_EXPIRED:
            return messages.TRAINING_OUT_OF_DATE, messages.UPDATE_TRAINING
        return messages.NO_TRAINING_FOUND, messages.CREATE_TRAINING


def github_org_mfa(
    organizations: Iterable[Any],
    check: CheckInput,
    projects: Iterable[Any],
    no_evidence_status: CheckStatus = CheckStatus.UNKNOWN,
) -> CheckAnalysis:
    return GithubOrgMFAValidator(no_evidence_status).validate(organizations, check, projects)


def software_design_training(
    trainings: Iterable[Any],
    check: CheckInput,
    projects: Iterable[Any],
    reference_time: datetime,
    validity: timedelta = timedelta(days=365),
) -> CheckAnalysis:
    return SoftwareDesignTrainingValidator(reference_time, validity).validate(trainings, check, projects)
