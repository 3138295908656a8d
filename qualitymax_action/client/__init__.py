"""QualityMax API client module."""

from qualitymax_action.client.client import QualityMaxClient
from qualitymax_action.client.config import ClientConfig
from qualitymax_action.client.errors import (
    ExecutionTimeoutError,
    InvalidApiKeyError,
    NotFoundError,
    ProjectResolutionError,
    QualityMaxError,
    ResultsError,
    StatusError,
    TriggerError,
)

__all__ = [
    "ClientConfig",
    "ExecutionTimeoutError",
    "InvalidApiKeyError",
    "NotFoundError",
    "ProjectResolutionError",
    "QualityMaxClient",
    "QualityMaxError",
    "ResultsError",
    "StatusError",
    "TriggerError",
]
