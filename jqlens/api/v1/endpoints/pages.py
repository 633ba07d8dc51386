from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from jqlens.api.dependencies import get_analyze_service, get_catalog
from jqlens.core.config import Settings, get_settings
from jqlens.queries.catalog import QueryCatalog
from jqlens.services.analyze_service import AnalysisOutcome, AnalyzeService

router = APIRouter(tags=["pages"])


@lru_cache
def _templates_for(directory: str) -> Jinja2Templates:
    return Jinja2Templates(directory=directory)


def get_templates(settings: Settings = Depends(get_settings)) -> Jinja2Templates:
    return _templates_for(settings.templates_dir)


def render_index(
    request: Request,
    templates: Jinja2Templates,
    catalog: QueryCatalog,
    outcome: AnalysisOutcome,
    query: str | None = None,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "result": outcome.result,
            "error": outcome.error,
            "queries": catalog.as_dict(),
            "default_label": catalog.default.label,
            "query": query or "",
            "expression": outcome.expression,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    catalog: QueryCatalog = Depends(get_catalog),
) -> HTMLResponse:
    return render_index(request, templates, catalog, AnalysisOutcome())


@router.post("/analyze", response_class=HTMLResponse)
async def analyze(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    catalog: QueryCatalog = Depends(get_catalog),
    service: AnalyzeService = Depends(get_analyze_service),
) -> HTMLResponse:
    async with request.form() as form:
        query = form.get("query")
        query = query if isinstance(query, str) else None
        outcome = await service.analyze(form, query)
    return render_index(request, templates, catalog, outcome, query=query)
