"""Core data models shared by the media pipeline."""

from .base import MediaKind, TextContent, MediaContent, MessageContent, MediaProfile, GenerationParams
from .input import IncomingMessage, MediaItem
from .output import (
    ProcessedContent,
    ProcessingFailure,
    ProcessingResult,
    AggregatedStatus,
    ResponseStatus,
    SuccessResponse,
    ErrorResponse,
    FinalResponse,
)

__all__ = [
    # Media kinds and request parts
    "MediaKind",
    "TextContent",
    "MediaContent",
    "MessageContent",
    "MediaProfile",
    "GenerationParams",
    # Input
    "IncomingMessage",
    "MediaItem",
    # Output
    "ProcessedContent",
    "ProcessingFailure",
    "ProcessingResult",
    "AggregatedStatus",
    "ResponseStatus",
    "SuccessResponse",
    "ErrorResponse",
    "FinalResponse",
]
