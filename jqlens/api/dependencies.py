from functools import lru_cache

from fastapi import Depends

from jqlens.core.config import Settings, get_settings
from jqlens.queries.catalog import PRESET_QUERIES, QueryCatalog
from jqlens.services.analyze_service import AnalyzeService
from jqlens.services.executor import JqCliEngine, QueryEngine, QueryExecutor
from jqlens.services.intake import UploadIntake
from jqlens.storage.temp_store import TempFileStore


@lru_cache
def _get_store_instance(upload_dir: str) -> TempFileStore:
    return TempFileStore(upload_dir)


def get_store(settings: Settings = Depends(get_settings)) -> TempFileStore:
    return _get_store_instance(settings.upload_dir)


def get_catalog() -> QueryCatalog:
    return PRESET_QUERIES


def get_engine(settings: Settings = Depends(get_settings)) -> QueryEngine:
    return JqCliEngine(binary=settings.jq_binary, timeout=settings.jq_timeout_seconds)


def get_analyze_service(
    settings: Settings = Depends(get_settings),
    store: TempFileStore = Depends(get_store),
    catalog: QueryCatalog = Depends(get_catalog),
    engine: QueryEngine = Depends(get_engine),
) -> AnalyzeService:
    return AnalyzeService(
        store=store,
        intake=UploadIntake(store, field_name=settings.upload_field),
        catalog=catalog,
        executor=QueryExecutor(engine),
    )
