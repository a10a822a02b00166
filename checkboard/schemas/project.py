# checkboard/schemas/project.py
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

# Strict so that ids match exactly: True is not project 1
ProjectId = Union[StrictInt, StrictStr]
CheckId = Union[int, str]


class Project(BaseModel):
    """A project as stored by the data layer; only the id matters here"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: ProjectId


class ComplianceCheck(BaseModel):
    """
    Check metadata as configured in the catalog.

    Extra catalog columns (code_name, title, ...) are ignored.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: CheckId
    default_priority_group: str = Field(min_length=1)
    details_url: str = Field(min_length=1)

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: CheckId) -> CheckId:
        if isinstance(v, str) and not v.strip():
            raise ValueError("check id must not be blank")
        return v

    @field_validator("default_priority_group", "details_url")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()
