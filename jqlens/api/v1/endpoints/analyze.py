from fastapi import APIRouter, Depends, Request

from jqlens.api.dependencies import get_analyze_service, get_catalog
from jqlens.queries.catalog import QueryCatalog
from jqlens.schemas.analyze import AnalyzeResponse, QueryCatalogResponse, QueryPresetItem
from jqlens.services.analyze_service import AnalyzeService

router = APIRouter(tags=["analyze"])


@router.get("/api/queries", response_model=QueryCatalogResponse)
@router.get("/api/v1/queries", response_model=QueryCatalogResponse)
async def list_queries(catalog: QueryCatalog = Depends(get_catalog)) -> dict:
    return {
        "default": catalog.default.label,
        "queries": [QueryPresetItem(label=preset.label, expression=preset.expression) for preset in catalog],
    }


# Handled failures are reported in the body with a 200, like the HTML form.
@router.post("/api/analyze", response_model=AnalyzeResponse)
@router.post("/api/v1/analyze", response_model=AnalyzeResponse)
async def analyze_json(request: Request, service: AnalyzeService = Depends(get_analyze_service)) -> dict:
    async with request.form() as form:
        query = form.get("query")
        outcome = await service.analyze(form, query if isinstance(query, str) else None)
    return {
        "success": outcome.success,
        "result": outcome.value if outcome.success else None,
        "error": outcome.error,
        "expression": outcome.expression,
    }
