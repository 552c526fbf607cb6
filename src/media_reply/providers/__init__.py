"""
The `media_reply.providers` package contains the pipeline and its remote model backends.

It exposes the following providers:
- `BaseMediaProvider`: The pipeline itself; subclasses supply the call to the remote model.
- `GoogleGenAIProvider`: The pipeline backed by Google's Gemini API.
"""

from .base import BaseMediaProvider
from .google import GoogleGenAIProvider

__all__ = ["BaseMediaProvider", "GoogleGenAIProvider"]
