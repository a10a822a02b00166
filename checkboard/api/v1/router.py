from fastapi import APIRouter
from checkboard.api.v1 import checks

api_router = APIRouter()

api_router.include_router(checks.router, prefix="/checks", tags=["checks"])
