import shutil

from fastapi import APIRouter, Depends

from jqlens.core.config import Settings, get_settings
from jqlens.schemas.analyze import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.get("/api/health", response_model=HealthResponse)
@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "healthy",
        "service": settings.app_name,
        "environment": settings.app_env,
        "jq_available": shutil.which(settings.jq_binary) is not None,
    }
