from .base_provider import BaseMediaProvider

__all__ = ["BaseMediaProvider"]
