# checkboard/schemas/evaluation.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class EvaluationRequest(BaseModel):
    """
    Raw inputs for one check evaluation.

    Rows are passed through untouched so the validator, not the HTTP
    layer, decides how lenient to be with evidence fields.
    """
    records: List[Dict[str, Any]] = []
    check: Dict[str, Any]
    projects: List[Dict[str, Any]]
    reference_time: Optional[datetime] = None
