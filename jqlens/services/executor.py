import asyncio
import json
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from jqlens.core.errors import EngineError, EvaluationFailed

logger = logging.getLogger("jqlens.executor")


class QueryEngine(Protocol):
    def evaluate(self, expression: str, file_path: Path) -> Any: ...


class JqCliEngine:
    """Evaluate expressions with the ``jq`` executable reading a JSON file."""

    def __init__(self, binary: str = "jq", timeout: float | None = None):
        self.binary = binary
        self.timeout = timeout

    def evaluate(self, expression: str, file_path: Path) -> Any:
        try:
            completed = subprocess.run(
                [self.binary, "--compact-output", expression, str(file_path)],
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise EngineError(f"jq executable not found: {self.binary}") from exc
        except subprocess.TimeoutExpired as exc:
            raise EngineError(f"jq did not finish within {self.timeout} seconds") from exc
        except OSError as exc:
            raise EngineError(f"Could not run jq: {exc}") from exc
        except ValueError as exc:
            # NUL bytes in the expression, or output that is not UTF-8
            raise EngineError(f"Could not run jq: {exc}") from exc

        if completed.returncode != 0:
            message = completed.stderr.strip() or f"jq exited with status {completed.returncode}"
            raise EngineError(message)
        return self._decode(completed.stdout)

    @staticmethod
    def _decode(stdout: str) -> Any:
        # --compact-output puts every emitted value on its own line
        values = []
        for line in stdout.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                values.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise EngineError(f"jq produced invalid JSON output: {exc}") from exc

        if not values:
            return None
        if len(values) == 1:
            return values[0]
        return values


@dataclass(frozen=True)
class QueryResult:
    expression: str
    value: Any

    def pretty(self) -> str:
        return json.dumps(self.value, indent=2, ensure_ascii=False)


class QueryExecutor:
    def __init__(self, engine: QueryEngine):
        self.engine = engine

    async def execute(self, expression: str, file_path: Path) -> QueryResult:
        try:
            value = await asyncio.to_thread(self.engine.evaluate, expression, Path(file_path))
        except EngineError as exc:
            logger.warning("Query evaluation failed: %s", exc)
            raise EvaluationFailed(str(exc), expression=expression) from exc
        except Exception as exc:
            logger.exception("Query engine crashed")
            raise EvaluationFailed(str(exc) or type(exc).__name__, expression=expression) from exc
        logger.debug("Evaluated %r against %s", expression, file_path)
        return QueryResult(expression=expression, value=value)
