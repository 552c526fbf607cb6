from .result import ProcessedContent, ProcessingFailure, ProcessingResult
from .status import AggregatedStatus
from .response import ResponseStatus, TextResult, SuccessResponse, ErrorResponse, FinalResponse

__all__ = [
    "ProcessedContent",
    "ProcessingFailure",
    "ProcessingResult",
    "AggregatedStatus",
    "ResponseStatus",
    "TextResult",
    "SuccessResponse",
    "ErrorResponse",
    "FinalResponse",
]
