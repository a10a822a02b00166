"""
Checkboard Check Validator Engine

Evaluates per-project signal records (GitHub organization settings,
training records, ...) against a compliance check and produces one result
per project, plus an alert and a remediation task for every failure.

Core components:
- grouping: partitions signal records by owning project
- resolvers: per check type, reduces a project's records to passed/failed/unknown
- aggregator: builds results, alerts and tasks from resolved statuses
- validators: one validator per check type, composing the above
- registry: explicit check type -> validator mapping

Usage:
    from checkboard.checks import github_org_mfa

    analysis = github_org_mfa(organizations, check, projects)

    for alert in analysis.alerts:
        print(alert.project_id, alert.title)
"""

from .registry import CheckRegistry, build_registry
from .validators import (
    BaseValidator,
    GithubOrgMFAValidator,
    SoftwareDesignTrainingValidator,
    github_org_mfa,
    software_design_training,
)

__all__ = [
    "BaseValidator",
    "CheckRegistry",
    "GithubOrgMFAValidator",
    "SoftwareDesignTrainingValidator",
    "build_registry",
    "github_org_mfa",
    "software_design_training",
]
