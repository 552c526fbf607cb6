from .message import IncomingMessage, MediaItem

__all__ = ["IncomingMessage", "MediaItem"]
