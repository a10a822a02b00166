import re

from checkboard.core.constants import SeverityLevel

_PRIORITY_GROUP = re.compile(r"^\s*([PR])(\d+)\s*$", re.IGNORECASE)


def severity_from_priority_group(priority_group: str) -> str:
    """
    Translate a check's default priority group into a severity label.

    Priority groups follow the checklist convention: ``P<n>`` for mandatory
    controls (lower is more urgent) and ``R<n>`` for recommendations.

    Mapping:
        - P0-P1: critical
        - P2-P4: high
        - P5-P7: medium
        - P8-P10: low
        - higher P groups and every R group: info

    A label that already names a severity (e.g. "critical") is returned
    as-is. Unrecognised labels are propagated unchanged.

    Examples:
        - "P1" -> "critical"
        - "P6" -> "medium"
        - "R2" -> "info"
    """
    label = priority_group.strip()
    if label.lower() in {level.value for level in SeverityLevel}:
        return label.lower()

    match = _PRIORITY_GROUP.match(label)
    if not match:
        return priority_group

    kind, number = match.group(1).upper(), int(match.group(2))
    if kind == "R":
        return SeverityLevel.INFO.value

    if number <= 1:
        return SeverityLevel.CRITICAL.value
    elif number <= 4:
        return SeverityLevel.HIGH.value
    elif number <= 7:
        return SeverityLevel.MEDIUM.value
    elif number <= 10:
        return SeverityLevel.LOW.value
    else:
        return SeverityLevel.INFO.value
