from enum import Enum

class MediaKind(str, Enum):
    """
    Enumeration representing the kinds of media attachments a message can carry.

    The declaration order is the order in which kinds are dispatched and reported.

    Attributes:
        IMAGE (str): A photo or picture.
        AUDIO (str): A voice note or audio clip.
        VIDEO (str): A video clip.
        STICKER (str): A sticker, interpreted for its emotional intent.
        DOCUMENT (str): A PDF document.
    """
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    STICKER = "sticker"
    DOCUMENT = "document"

    @property
    def display_name(self) -> str:
        """Capitalized name used when labelling results in the final prompt."""
        return self.value.capitalize()
