from enum import Enum
from pydantic import BaseModel, Field
from typing import Literal

class ResponseStatus(str, Enum):
    """
    Enumeration representing the outcome of the final response generation.

    Attributes:
        SUCCESS (str): A non-empty reply was produced.
        ERROR (str): No reply could be produced.
    """
    SUCCESS = "success"
    ERROR = "error"

class TextResult(BaseModel):
    """
    The text reply wrapped the way callers expect it.

    Attributes:
        content (str): The reply text.
    """
    content: str

class SuccessResponse(BaseModel):
    """
    The final reply of the pipeline.

    Attributes:
        status (Literal[ResponseStatus.SUCCESS]): Always 'success'.
        response (str): The reply text.
        results (dict[str, TextResult]): The reply again, under the 'text' key.
    """
    status: Literal[ResponseStatus.SUCCESS] = ResponseStatus.SUCCESS
    response: str
    results: dict[str, TextResult]

    @classmethod
    def from_text(cls, text: str) -> "SuccessResponse":
        return cls(response=text, results={"text": TextResult(content=text)})

class ErrorResponse(BaseModel):
    """
    Reports that the final reply could not be produced.

    Attributes:
        status (Literal[ResponseStatus.ERROR]): Always 'error'.
        message (str): A human-readable description of the failure.
        processed (bool): Always True; the message was handled even though it failed.
        error (str): The failure detail.
    """
    status: Literal[ResponseStatus.ERROR] = ResponseStatus.ERROR
    message: str
    processed: bool = Field(default=True)
    error: str

FinalResponse = SuccessResponse | ErrorResponse
