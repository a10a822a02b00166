# checkboard/schemas/results.py
from typing import List

from pydantic import BaseModel, ConfigDict

from checkboard.core.constants import CheckStatus
from checkboard.schemas.project import CheckId, ProjectId


class ComplianceResult(BaseModel):
    model_config = ConfigDict(use_enum_values=True, frozen=True)

    project_id: ProjectId
    compliance_check_id: CheckId
    severity: str
    status: CheckStatus
    rationale: str


class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_id: ProjectId
    compliance_check_id: CheckId
    severity: str
    title: str
    description: str


class Task(BaseModel):
    """Remediation item paired one-to-one with an Alert"""
    model_config = ConfigDict(frozen=True)

    project_id: ProjectId
    compliance_check_id: CheckId
    severity: str
    title: str
    description: str


class CheckAnalysis(BaseModel):
    """Everything one validator call produces for one check"""
    alerts: List[Alert] = []
    results: List[ComplianceResult] = []
    tasks: List[Task] = []
