from google.genai import types, Client
from logging import getLogger
from media_reply.core.base.content import MessageContent, MediaContent, TextContent
from media_reply.core.base.request import GenerationParams
from media_reply.providers.base.base_provider import BaseMediaProvider
import os
import base64

logger = getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-2.5-flash-preview-04-17"

class GoogleGenAIProvider(BaseMediaProvider):
    """
    Media provider backed by Google's Gemini API.

    Attributes:
        client (Client): The GenAI client, shared by every request and never mutated.
    """
    def __init__(self, api_key: str | None = None, model_id: str = DEFAULT_MODEL_ID, timeout: float | None = None) -> None:
        """
        Initializes the GoogleGenAIProvider.

        Args:
            api_key (str | None): The Gemini API key. Falls back to the GOOGLE_API_KEY environment variable.
            model_id (str): The model used for every request.
            timeout (float | None): Optional per-request timeout, in seconds.

        Raises:
            ValueError: If no API key is available.
        """
        super().__init__(model_id=model_id)
        api_key = api_key or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            raise ValueError("Se requiere una API key de Gemini")
        http_options = None
        if timeout is not None:
            http_options = types.HttpOptions(timeout=int(timeout * 1000))
        self.client = Client(api_key=api_key, http_options=http_options)

    def generation_params_to_provider(self, params: GenerationParams) -> types.GenerateContentConfig:
        provider_params = {
            "system_instruction": params.system_prompt,
            "max_output_tokens": params.max_output_tokens,
            "temperature": params.temperature,
            **params.additional_params
        }
        return types.GenerateContentConfig.model_validate(provider_params)

    def convert_content_to_provider(self, content: MessageContent) -> types.Part:
        if isinstance(content, TextContent):
            return types.Part.from_text(text=content.text)
        elif isinstance(content, MediaContent):
            data = base64.b64decode(content.data_base64)
            return types.Part.from_bytes(data=data, mime_type=content.mime_type)
        else:
            raise ValueError(f"Unsupported content type: {type(content).__name__}")

    async def generate_content(self, contents: list[MessageContent], params: GenerationParams) -> str | None:
        response = await self.client.aio.models.generate_content(
            model=params.model_id,
            contents=[
                self.convert_content_to_provider(content)
                for content in contents
            ],
            config=self.generation_params_to_provider(params)
        )
        return response.text
