# checkboard/main.py
from fastapi import FastAPI

from checkboard.core.config import settings
from checkboard.core.logging import setup_logging
from checkboard.api.v1.router import api_router

logger = setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

# Include routers
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
    }
