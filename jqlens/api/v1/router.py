from fastapi import APIRouter

from jqlens.api.v1.endpoints.analyze import router as analyze_router
from jqlens.api.v1.endpoints.health import router as health_router
from jqlens.api.v1.endpoints.pages import router as pages_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(analyze_router)
api_router.include_router(pages_router)
