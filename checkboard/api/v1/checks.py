# checkboard/api/v1/checks.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status

from checkboard.api.dependencies import get_settings
from checkboard.checks.registry import build_registry
from checkboard.core.config import Settings
from checkboard.core.exceptions import UnknownCheckError, ValidatorContractError
from checkboard.schemas.evaluation import EvaluationRequest
from checkboard.schemas.results import CheckAnalysis

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def list_checks(settings: Settings = Depends(get_settings)):
    """List the check types this service can evaluate"""
    registry = build_registry(settings, datetime.now(timezone.utc))
    return {"checks": [check_type.value for check_type in registry.available()]}


@router.post("/{check_type}/evaluate", response_model=CheckAnalysis)
async def evaluate_check(
    check_type: str,
    payload: EvaluationRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Evaluate one check over the given projects.

    Nothing is stored: the caller persists results, alerts and tasks.
    ``reference_time`` defaults to the current UTC time.
    """
    reference_time = payload.reference_time or datetime.now(timezone.utc)
    registry = build_registry(settings, reference_time)

    try:
        return registry.run(check_type, payload.records, payload.check, payload.projects)
    except UnknownCheckError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidatorContractError as e:
        logger.warning(f"Rejected evaluation request for {check_type}: {e}")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
