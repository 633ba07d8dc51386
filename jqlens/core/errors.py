class JqLensError(Exception):
    """Base class for failures rendered back to the user."""

    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class IntakeError(JqLensError):
    pass


class MissingFile(IntakeError):
    default_message = "Please upload a file"


class InvalidFileType(IntakeError):
    default_message = "Only .json files are allowed!"


class UnexpectedFile(IntakeError):
    default_message = "Unexpected field"


class EvaluationFailed(JqLensError):
    default_message = "Query evaluation failed"

    def __init__(self, message: str | None = None, expression: str | None = None):
        super().__init__(message)
        self.expression = expression


class EngineError(Exception):
    """Raised by query engines; the message is shown to the user verbatim."""
