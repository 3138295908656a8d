"""Errors raised by the QualityMax API client."""


class QualityMaxError(Exception):
    """Base error for failures talking to the QualityMax API."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class InvalidApiKeyError(QualityMaxError):
    """Raised when the API key is rejected by the validation endpoint."""


class TriggerError(QualityMaxError):
    """Raised when the service rejects or fails to start an execution."""


class NotFoundError(QualityMaxError):
    """Raised when an execution is unknown, expired or not yet completed."""


class StatusError(QualityMaxError):
    """Raised when the execution status cannot be retrieved."""


class ResultsError(QualityMaxError):
    """Raised when the execution results cannot be retrieved."""


class ProjectResolutionError(QualityMaxError):
    """Raised when the project to run cannot be determined."""


class ExecutionTimeoutError(QualityMaxError, TimeoutError):
    """Raised when an execution does not finish within the allotted time."""

    def __init__(self, execution_id: str, timeout: float) -> None:
        super().__init__(f"Execution timed out after {timeout:g} seconds")
        self.execution_id = execution_id
        self.timeout = timeout
