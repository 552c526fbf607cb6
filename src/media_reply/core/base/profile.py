from pydantic import BaseModel, ConfigDict, Field
from media_reply.core.base.media_kind import MediaKind
from media_reply import prompts

class MediaProfile(BaseModel):
    """
    How a single media kind is sent to the remote model and reported back.

    Attributes:
        kind (MediaKind): The media kind this profile describes.
        mime_type (str): The MIME type the encoded file is tagged with.
        instruction (str): The fixed instruction sent next to the file.
        media_first (bool): Whether the file part precedes the instruction part.
        temperature (float): The sampling temperature for the request.
        label (str): The word used to label this kind's results in the final prompt.
        error_message (str): The message reported when processing fails.
    """
    model_config = ConfigDict(frozen=True)

    kind: MediaKind
    mime_type: str
    instruction: str
    media_first: bool
    temperature: float
    label: str = Field(default="description")
    error_message: str

MEDIA_PROFILES: dict[MediaKind, MediaProfile] = {
    MediaKind.IMAGE: MediaProfile(
        kind=MediaKind.IMAGE,
        mime_type="image/jpeg",
        instruction=prompts.IMAGE_PROMPT,
        media_first=True,
        temperature=0.85,
        error_message="Error al procesar imagen"
    ),
    MediaKind.AUDIO: MediaProfile(
        kind=MediaKind.AUDIO,
        mime_type="audio/mp3",
        instruction=prompts.AUDIO_PROMPT,
        media_first=False,
        temperature=0.85,
        label="transcription",
        error_message="Error al procesar audio"
    ),
    MediaKind.VIDEO: MediaProfile(
        kind=MediaKind.VIDEO,
        mime_type="video/mp4",
        instruction=prompts.VIDEO_PROMPT,
        media_first=True,
        temperature=0.85,
        error_message="Error al procesar video"
    ),
    MediaKind.STICKER: MediaProfile(
        kind=MediaKind.STICKER,
        mime_type="image/jpeg",
        instruction=prompts.STICKER_PROMPT,
        media_first=True,
        temperature=1.0,
        error_message="Error al procesar sticker"
    ),
    MediaKind.DOCUMENT: MediaProfile(
        kind=MediaKind.DOCUMENT,
        mime_type="application/pdf",
        instruction=prompts.DOCUMENT_PROMPT,
        media_first=False,
        temperature=0.45,
        label="summary",
        error_message="Error al procesar documento"
    ),
}

def get_profile(kind: MediaKind) -> MediaProfile:
    """
    Look up the profile of a media kind.

    Args:
        kind (MediaKind): The media kind.

    Returns:
        MediaProfile: The profile registered for the kind.
    """
    return MEDIA_PROFILES[kind]
