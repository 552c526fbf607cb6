import os
from pydantic import BaseModel, Field, field_validator
from media_reply.core.base.media_kind import MediaKind

class MediaItem(BaseModel):
    """
    A single media attachment to be processed.

    Attributes:
        kind (MediaKind): The kind of the attachment.
        path (str): The filesystem path of the attachment. Path-like objects are accepted.
    """
    kind: MediaKind
    path: str

    @field_validator("path", mode="before")
    @classmethod
    def _fspath(cls, value):
        return os.fspath(value) if isinstance(value, os.PathLike) else value

class IncomingMessage(BaseModel):
    """
    Represents everything a user sent in one conversational turn.

    Attributes:
        texts (list[str]): The user's text messages, in order.
        images (list[str]): Paths to image files. Path-like objects are accepted for every attachment list.
        audios (list[str]): Paths to audio files.
        videos (list[str]): Paths to video files.
        stickers (list[str]): Paths to sticker files.
        documents (list[str]): Paths to PDF documents.
        context_prompt (str): Free-text conversation history. Defaults to an empty string.
    """
    texts: list[str] = Field(default_factory=list, description="The user's text messages.")
    images: list[str] = Field(default_factory=list, description="Paths to image files.")
    audios: list[str] = Field(default_factory=list, description="Paths to audio files.")
    videos: list[str] = Field(default_factory=list, description="Paths to video files.")
    stickers: list[str] = Field(default_factory=list, description="Paths to sticker files.")
    documents: list[str] = Field(default_factory=list, description="Paths to PDF documents.")
    context_prompt: str = Field(default="", description="The conversation history, if any.")

    @field_validator("images", "audios", "videos", "stickers", "documents", mode="before")
    @classmethod
    def _fspaths(cls, value):
        if isinstance(value, (list, tuple)):
            return [os.fspath(path) if isinstance(path, os.PathLike) else path for path in value]
        return value

    def paths_for(self, kind: MediaKind) -> list[str]:
        """
        Get the attachment paths of one media kind.

        Args:
            kind (MediaKind): The media kind.

        Returns:
            list[str]: The paths, in the order they were given.
        """
        return {
            MediaKind.IMAGE: self.images,
            MediaKind.AUDIO: self.audios,
            MediaKind.VIDEO: self.videos,
            MediaKind.STICKER: self.stickers,
            MediaKind.DOCUMENT: self.documents,
        }[kind]

    def media_items(self) -> list[MediaItem]:
        """
        Flatten every attachment into a single list of units of work.

        Returns:
            list[MediaItem]: One item per path, grouped by kind in MediaKind order.
        """
        return [
            MediaItem(kind=kind, path=path)
            for kind in MediaKind
            for path in self.paths_for(kind)
        ]

    def __str__(self) -> str:
        return f"IncomingMessage(texts={len(self.texts)}, media={len(self.media_items())}, context_prompt={bool(self.context_prompt)})"

    def __repr__(self) -> str:
        return self.__str__()
