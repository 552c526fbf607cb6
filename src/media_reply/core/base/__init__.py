from .media_kind import MediaKind
from .content import TextContent, MediaContent, MessageContent
from .profile import MediaProfile, MEDIA_PROFILES, get_profile
from .request import GenerationParams

__all__ = [
    "MediaKind",
    "TextContent",
    "MediaContent",
    "MessageContent",
    "MediaProfile",
    "MEDIA_PROFILES",
    "get_profile",
    "GenerationParams",
]
