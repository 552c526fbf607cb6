from .google_genai_provider import GoogleGenAIProvider, DEFAULT_MODEL_ID

__all__ = ["GoogleGenAIProvider", "DEFAULT_MODEL_ID"]
