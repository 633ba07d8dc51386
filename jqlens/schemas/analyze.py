from typing import Any

from pydantic import BaseModel


class QueryPresetItem(BaseModel):
    label: str
    expression: str


class QueryCatalogResponse(BaseModel):
    default: str
    queries: list[QueryPresetItem]


class AnalyzeResponse(BaseModel):
    success: bool
    result: Any = None
    error: str | None = None
    expression: str | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
    environment: str
    jq_available: bool
