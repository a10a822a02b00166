# checkboard/schemas/signals.py
"""
Signal records as produced by the data layer.

Validators also accept the raw row mappings directly. Evidence fields are
optional on purpose: a missing flag or date is a finding, not a bad row.
"""
from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from checkboard.schemas.project import ProjectId


def normalize_flag(value: Any) -> Optional[bool]:
    """
    Read a boolean security flag the same way for rows and models.

    Booleans and 0/1 integers (tinyint columns) are a verdict; anything
    else, strings included, is indeterminate.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    return None


class SignalRecord(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    project_id: ProjectId


class GithubOrganization(SignalRecord):
    login: Optional[str] = None
    two_factor_requirement_enabled: Optional[bool] = None

    @field_validator("two_factor_requirement_enabled", mode="before")
    @classmethod
    def tri_state_flag(cls, v: Any) -> Optional[bool]:
        return normalize_flag(v)


class SoftwareDesignTraining(SignalRecord):
    training_date: Optional[Union[datetime, date, str]] = None
