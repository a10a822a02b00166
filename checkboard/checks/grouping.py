from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence

from pydantic import ValidationError

from checkboard.core.exceptions import ValidatorContractError
from checkboard.schemas.project import Project, ProjectId


def read_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a raw row mapping or a model instance"""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def coerce_projects(projects: Iterable[Any]) -> List[Project]:
    """
    Normalize the authoritative project list.

    Raises ValidatorContractError for entries without an id and for
    duplicate ids: both mean the caller passed a broken project list.
    """
    normalized: List[Project] = []
    seen = set()
    for entry in projects:
        try:
            project = entry if isinstance(entry, Project) else Project.model_validate(
                entry if isinstance(entry, Mapping) else {"id": read_field(entry, "id")}
            )
        except ValidationError as exc:
            raise ValidatorContractError(f"Invalid project entry ({entry!r}): {exc}") from exc

        if project.id in seen:
            raise ValidatorContractError(f"Duplicate project id ({project.id}) in project list")
        seen.add(project.id)
        normalized.append(project)

    return normalized


def group_by_project(records: Iterable[Any], projects: Sequence[Project]) -> Dict[ProjectId, List[Any]]:
    """
    Partition signal records by owning project.

    Every project gets a key, in project-list order, even with no records.
    Records pointing at a project outside the list are dropped. Records keep
    their input order within each project.
    """
    grouped: Dict[ProjectId, List[Any]] = {project.id: [] for project in projects}

    for record in records:
        project_id = read_field(record, "project_id")
        bucket = grouped.get(project_id) if _hashable(project_id) else None
        if bucket is not None:
            bucket.append(record)

    return grouped


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
