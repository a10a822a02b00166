"""
Status resolution per check type.

A resolver reduces the records of a single project into one tri-state
status plus the rationale for it. Resolvers never raise on evidence:
missing or malformed fields degrade to the least informative status that
is still truthful.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Sequence, Tuple

from checkboard.checks import messages
from checkboard.checks.grouping import read_field
from checkboard.core.constants import CheckStatus
from checkboard.schemas.signals import normalize_flag


@dataclass(frozen=True)
class Resolution:
    status: CheckStatus
    rationale: str
    # Identifiers behind a failed/unknown status, first-encountered order
    offenders: Tuple[str, ...] = ()
    # Check-specific reason code, used to pick alert/task phrasing
    reason: Optional[str] = None


# Reason codes
NO_EVIDENCE = "no_evidence"
MFA_DISABLED = "mfa_disabled"
MFA_UNKNOWN = "mfa_unknown"
TRAINING_MISSING = "training_missing"
TRAINING_EXPIRED = "training_expired"
TRAINING_UNDATED = "training_undated"


def resolve_org_mfa(
    records: Sequence[Any],
    no_evidence_status: CheckStatus = CheckStatus.UNKNOWN,
) -> Resolution:
    """
    Reduce a project's organizations to one MFA status.

    Each organization is compliant (flag is true or 1), violating
    (false or 0) or indeterminate (anything else). One violating organization
    fails the whole project; otherwise one indeterminate organization makes
    it unknown.
    """
    if not records:
        return _org_mfa_without_evidence(CheckStatus(no_evidence_status))

    violating = []
    indeterminate = []
    for position, record in enumerate(records):
        flag = normalize_flag(read_field(record, "two_factor_requirement_enabled"))
        if flag is True:
            continue
        name = _org_name(record, position)
        if flag is False:
            violating.append(name)
        else:
            indeterminate.append(name)

    if violating:
        return Resolution(
            status=CheckStatus.FAILED,
            rationale=messages.mfa_disabled(violating),
            offenders=tuple(violating),
            reason=MFA_DISABLED,
        )
    if indeterminate:
        return Resolution(
            status=CheckStatus.UNKNOWN,
            rationale=messages.mfa_unknown(indeterminate),
            offenders=tuple(indeterminate),
            reason=MFA_UNKNOWN,
        )
    return Resolution(status=CheckStatus.PASSED, rationale=messages.MFA_ENABLED)


def _org_mfa_without_evidence(status: CheckStatus) -> Resolution:
    if status == CheckStatus.PASSED:
        return Resolution(status=status, rationale=messages.MFA_ENABLED)
    return Resolution(status=status, rationale=messages.NO_ORGANIZATIONS_FOUND, reason=NO_EVIDENCE)


def _org_name(record: Any, position: int) -> str:
    login = read_field(record, "login")
    if login is None or str(login).strip() == "":
        return f"#{position + 1}"
    return str(login)


def resolve_training_recency(
    records: Sequence[Any],
    reference_time: datetime,
    validity: timedelta,
) -> Resolution:
    """
    Decide whether a project's software design training is current.

    The latest dated record is the basis. It is out of date when it is
    older than ``validity`` at ``reference_time``.
    """
    if not records:
        return Resolution(
            status=CheckStatus.FAILED,
            rationale=messages.NO_TRAINING_FOUND,
            reason=TRAINING_MISSING,
        )

    dates = [parse_timestamp(read_field(record, "training_date")) for record in records]
    dates = [value for value in dates if value is not None]
    if not dates:
        return Resolution(
            status=CheckStatus.UNKNOWN,
            rationale=messages.TRAINING_DATE_UNKNOWN,
            reason=TRAINING_UNDATED,
        )

    latest = max(dates)
    if as_utc(reference_time) - latest > validity:
        return Resolution(
            status=CheckStatus.FAILED,
            rationale=messages.TRAINING_OUT_OF_DATE,
            reason=TRAINING_EXPIRED,
        )
    return Resolution(status=CheckStatus.PASSED, rationale=messages.TRAINING_UP_TO_DATE)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a training date from a datetime, a date or an ISO 8601 string.

    Returns None for anything that is not a recognisable date.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None
