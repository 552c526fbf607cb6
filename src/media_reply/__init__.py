"""Turn a multimedia chat message into a single conversational reply with a generative model."""

from .core import (
    MediaKind,
    IncomingMessage,
    ProcessedContent,
    ProcessingFailure,
    AggregatedStatus,
    ResponseStatus,
    SuccessResponse,
    ErrorResponse,
)
from .providers import BaseMediaProvider, GoogleGenAIProvider

__all__ = [
    "MediaKind",
    "IncomingMessage",
    "ProcessedContent",
    "ProcessingFailure",
    "AggregatedStatus",
    "ResponseStatus",
    "SuccessResponse",
    "ErrorResponse",
    "BaseMediaProvider",
    "GoogleGenAIProvider",
]
