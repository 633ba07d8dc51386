import logging
from dataclasses import dataclass
from typing import Any

from starlette.datastructures import FormData

from jqlens.core.errors import JqLensError
from jqlens.queries.catalog import QueryCatalog
from jqlens.services.executor import QueryExecutor
from jqlens.services.intake import UploadIntake
from jqlens.storage.temp_store import TempFileStore

logger = logging.getLogger("jqlens.analyze")


@dataclass(frozen=True)
class AnalysisOutcome:
    result: str | None = None
    error: str | None = None
    value: Any = None
    expression: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class AnalyzeService:
    def __init__(
        self,
        store: TempFileStore,
        intake: UploadIntake,
        catalog: QueryCatalog,
        executor: QueryExecutor,
    ):
        self.store = store
        self.intake = intake
        self.catalog = catalog
        self.executor = executor

    async def analyze(self, form: FormData, expression: str | None = None) -> AnalysisOutcome:
        try:
            document = await self.intake.accept(form)
        except JqLensError as exc:
            return AnalysisOutcome(error=exc.message)

        effective = self.catalog.resolve(expression)
        async with self.store.hold(document.path):
            try:
                result = await self.executor.execute(effective, document.path)
            except JqLensError as exc:
                return AnalysisOutcome(error=exc.message, expression=effective)

        logger.info("Analyzed %s with %r", document.original_name, effective)
        return AnalysisOutcome(
            result=result.pretty(),
            value=result.value,
            expression=effective,
        )
