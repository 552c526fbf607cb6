from pydantic import BaseModel
from typing import Literal
import os
from media_reply.core.base.media_kind import MediaKind
from media_reply.utilities.encoding import encode_file_base64

class TextContent(BaseModel):
    """
    Represents a plain text part of a request.

    Attributes:
        type (Literal["text"]): The content type, always 'text'.
        text (str): The actual text content.
    """
    type: Literal["text"] = "text"
    text: str

class MediaContent(BaseModel):
    """
    Represents an inline binary part of a request.

    Attributes:
        type (Literal["media"]): The content type, always 'media'.
        kind (MediaKind): The kind of media the payload holds.
        mime_type (str): The MIME type sent along with the payload.
        data_base64 (str): The base64-encoded file contents.
    """
    type: Literal["media"] = "media"
    kind: MediaKind
    mime_type: str
    data_base64: str # base64-encoded file

    @classmethod
    async def from_file(cls, file_path: str | os.PathLike[str], kind: MediaKind, mime_type: str) -> "MediaContent":
        """
        Create a MediaContent object from a local file.

        Args:
            file_path (str | os.PathLike[str]): The path to the media file.
            kind (MediaKind): The kind of media stored in the file.
            mime_type (str): The MIME type to tag the payload with.

        Returns:
            MediaContent: An instance containing the base64-encoded file.

        Raises:
            OSError: If the file cannot be read.
        """
        data_base64 = await encode_file_base64(file_path)
        return cls(kind=kind, mime_type=mime_type, data_base64=data_base64)

MessageContent = TextContent | MediaContent
