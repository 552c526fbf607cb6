from pydantic import BaseModel
from typing import Literal

class ProcessedContent(BaseModel):
    """
    The successful outcome of processing one media item.

    Attributes:
        content (str): The text the remote model produced for the item.
    """
    content: str

class ProcessingFailure(BaseModel):
    """
    The failed outcome of processing one media item.

    The underlying error is not kept; only a fixed message for the media kind is reported.

    Attributes:
        processed (Literal[False]): Always False.
        error (str): The fixed failure message of the media kind.
    """
    processed: Literal[False] = False
    error: str

ProcessingResult = ProcessedContent | ProcessingFailure
