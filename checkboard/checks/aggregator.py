from typing import Any, Callable, Dict, List, Tuple

from checkboard.checks import messages
from checkboard.checks.resolvers import Resolution
from checkboard.core.constants import CheckStatus
from checkboard.schemas.project import ComplianceCheck, ProjectId
from checkboard.schemas.results import Alert, CheckAnalysis, ComplianceResult, Task

# (alert title, task title) for a failed resolution
FailureText = Callable[[Resolution], Tuple[str, str]]


def build_analysis(
    grouped: Dict[ProjectId, List[Any]],
    check: ComplianceCheck,
    severity: str,
    resolve: Callable[[List[Any]], Resolution],
    failure_text: FailureText,
) -> CheckAnalysis:
    """
    Turn grouped records into results, alerts and tasks.

    Exactly one result per project key. Alerts and tasks are only emitted
    for failed projects, one of each. Projects are resolved independently.
    """
    results: List[ComplianceResult] = []
    alerts: List[Alert] = []
    tasks: List[Task] = []
    description = messages.check_details(check.details_url)

    for project_id, records in grouped.items():
        resolution = resolve(records)
        results.append(
            ComplianceResult(
                project_id=project_id,
                compliance_check_id=check.id,
                severity=severity,
                status=resolution.status,
                rationale=resolution.rationale,
            )
        )

        if resolution.status != CheckStatus.FAILED:
            continue

        alert_title, task_title = failure_text(resolution)
        alerts.append(
            Alert(
                project_id=project_id,
                compliance_check_id=check.id,
                severity=severity,
                title=alert_title,
                description=description,
            )
        )
        tasks.append(
            Task(
                project_id=project_id,
                compliance_check_id=check.id,
                severity=severity,
                title=task_title,
                description=description,
            )
        )

    return CheckAnalysis(alerts=alerts, results=results, tasks=tasks)
