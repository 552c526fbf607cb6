import asyncio
from abc import ABC, abstractmethod
from logging import getLogger
from media_reply import prompts
from media_reply.core.base.content import MediaContent, MessageContent, TextContent
from media_reply.core.base.media_kind import MediaKind
from media_reply.core.base.profile import get_profile
from media_reply.core.base.request import GenerationParams
from media_reply.core.input.message import IncomingMessage, MediaItem
from media_reply.core.output.result import ProcessedContent, ProcessingFailure, ProcessingResult
from media_reply.core.output.status import AggregatedStatus
from media_reply.core.output.response import ErrorResponse, FinalResponse, SuccessResponse

logger = getLogger(__name__)

MAX_OUTPUT_TOKENS = 2048
FINAL_RESPONSE_BASE_TEMPERATURE = 0.9
FINAL_RESPONSE_TEMPERATURE_STEP = 0.01
FINAL_RESPONSE_MAX_ATTEMPTS = 5

EMPTY_RESPONSE_MESSAGE = "No se pudo generar una respuesta después de varios intentos"
EMPTY_RESPONSE_ERROR = "Respuesta vacía después de múltiples intentos"
FINAL_RESPONSE_ERROR = "Error al generar respuesta final"

class BaseMediaProvider(ABC):
    """
    A base class for all providers that turn a multimedia message into a single reply.

    The whole pipeline lives here: every media attachment is described by the remote model,
    the descriptions are aggregated, and a final reply is generated from them. Subclasses
    only implement `generate_content`, the single call to the remote model.

    Attributes:
        model_id (str): The identifier of the model used for every request.
    """
    model_id: str

    def __init__(self, model_id: str) -> None:
        """
        Initializes the BaseMediaProvider.

        Args:
            model_id (str): The identifier of the model used for every request.
        """
        self.model_id = model_id

    @abstractmethod
    async def generate_content(self, contents: list[MessageContent], params: GenerationParams) -> str | None:
        """
        Generate text from an ordered list of request parts.

        Args:
            contents (list[MessageContent]): The parts of the request, in order.
            params (GenerationParams): The generation parameters.

        Returns:
            str | None: The generated text, which may be empty or missing.
        """
        pass

    async def process_media(self, kind: MediaKind, path: str) -> ProcessingResult:
        """
        Describe one media file with the remote model.

        Any failure, whether reading the file or calling the model, is reported as a
        ProcessingFailure carrying the fixed message of the media kind.

        Args:
            kind (MediaKind): The kind of the file.
            path (str): The path of the file.

        Returns:
            ProcessingResult: The model's text, or the failure.
        """
        profile = get_profile(kind)
        try:
            media = await MediaContent.from_file(path, kind=kind, mime_type=profile.mime_type)
            instruction = TextContent(text=profile.instruction)
            contents: list[MessageContent] = [media, instruction] if profile.media_first else [instruction, media]
            text = await self.generate_content(
                contents,
                GenerationParams(
                    model_id=self.model_id,
                    max_output_tokens=MAX_OUTPUT_TOKENS,
                    temperature=profile.temperature
                )
            )
            return ProcessedContent(content=text or "")
        except Exception as e:
            logger.warning(f"Could not process {kind.value} {path}: {e!r}")
            return ProcessingFailure(error=profile.error_message)

    async def process_image(self, image_path: str) -> ProcessingResult:
        return await self.process_media(MediaKind.IMAGE, image_path)

    async def process_audio(self, audio_path: str) -> ProcessingResult:
        return await self.process_media(MediaKind.AUDIO, audio_path)

    async def process_video(self, video_path: str) -> ProcessingResult:
        return await self.process_media(MediaKind.VIDEO, video_path)

    async def process_sticker(self, sticker_path: str) -> ProcessingResult:
        return await self.process_media(MediaKind.STICKER, sticker_path)

    async def process_document(self, document_path: str) -> ProcessingResult:
        return await self.process_media(MediaKind.DOCUMENT, document_path)

    async def _process_item(self, item: MediaItem) -> tuple[MediaKind, ProcessingResult]:
        processor = {
            MediaKind.IMAGE: self.process_image,
            MediaKind.AUDIO: self.process_audio,
            MediaKind.VIDEO: self.process_video,
            MediaKind.STICKER: self.process_sticker,
            MediaKind.DOCUMENT: self.process_document,
        }[item.kind]
        return item.kind, await processor(item.path)

    async def process_message(self, message: IncomingMessage | None = None, **options) -> FinalResponse:
        """
        Process every attachment of a message concurrently and generate the final reply.

        Pass an IncomingMessage, its fields as keyword options
        (`texts`, `images`, `audios`, `videos`, `stickers`, `documents`, `context_prompt`), or both;
        options given next to a message replace the matching message fields.
        All attachments are dispatched at once and the reply is only generated after
        every one of them has settled. A failed attachment does not stop the others.

        Args:
            message (IncomingMessage | None): The message to process.
            **options: Message fields, applied over `message` when both are given.

        Returns:
            FinalResponse: The reply or a structured error.
        """
        if message is None:
            message = IncomingMessage(**options)
        elif options:
            message = IncomingMessage(**{**message.model_dump(), **options})
        items = message.media_items()
        logger.info(f"Processing message with {len(message.texts)} texts and {len(items)} media items")
        settled = await asyncio.gather(*(self._process_item(item) for item in items))
        status = AggregatedStatus.from_results(settled, message.texts)
        return await self.generate_final_response(status, message.context_prompt)

    def build_final_prompt(self, status: AggregatedStatus, context_prompt: str = "") -> str:
        """
        Compose the text sent to the model for the final reply.

        The prompt holds the fixed preamble, then the conversation history (if any), then the
        numbered user messages (if any), then one labelled block per successfully processed
        media item. Failed items produce no block but keep their position in the numbering.

        Args:
            status (AggregatedStatus): The aggregated results.
            context_prompt (str): The conversation history.

        Returns:
            str: The composed prompt.
        """
        parts = [prompts.FINAL_RESPONSE_PREAMBLE]
        if context_prompt:
            parts.append(f"\n\nConversation history:\n{context_prompt}")
        if status.messages:
            numbered = "\n".join(f"{i + 1}. {text}" for i, text in enumerate(status.messages))
            parts.append(f"\n\nUser's messages:\n{numbered}")
        for kind, items in status.results.items():
            label = get_profile(kind).label
            for i, item in enumerate(items):
                if isinstance(item, ProcessedContent) and item.content:
                    parts.append(f"\n\n{kind.display_name} {i + 1} {label}: {item.content}")
        return "".join(parts)

    async def generate_final_response(self, status: AggregatedStatus, context_prompt: str = "") -> FinalResponse:
        """
        Generate the conversational reply from the aggregated results.

        Blank replies are retried up to FINAL_RESPONSE_MAX_ATTEMPTS attempts in total, raising
        the temperature slightly on each one. An exception from the model ends the loop at once.

        Args:
            status (AggregatedStatus): The aggregated results.
            context_prompt (str): The conversation history.

        Returns:
            FinalResponse: A SuccessResponse with the reply, or an ErrorResponse.
        """
        contents: list[MessageContent] = [TextContent(text=self.build_final_prompt(status, context_prompt))]
        try:
            for attempt in range(FINAL_RESPONSE_MAX_ATTEMPTS):
                temperature = round(FINAL_RESPONSE_BASE_TEMPERATURE + attempt * FINAL_RESPONSE_TEMPERATURE_STEP, 2)
                logger.debug(f"Final response attempt {attempt + 1} with temperature {temperature}")
                text = await self.generate_content(
                    contents,
                    GenerationParams(
                        model_id=self.model_id,
                        system_prompt=prompts.ASSISTANT_SYSTEM_INSTRUCTION,
                        max_output_tokens=MAX_OUTPUT_TOKENS,
                        temperature=temperature
                    )
                )
                if text and text.strip():
                    logger.info(f"Final response generated after {attempt + 1} attempt(s)")
                    return SuccessResponse.from_text(text)
                logger.warning(f"Empty final response on attempt {attempt + 1}")
        except Exception as e:
            logger.error(f"Final response generation failed: {e!r}")
            return ErrorResponse(message=FINAL_RESPONSE_ERROR, error=str(e) or FINAL_RESPONSE_ERROR)

        return ErrorResponse(message=EMPTY_RESPONSE_MESSAGE, error=EMPTY_RESPONSE_ERROR)

__all__ = ["BaseMediaProvider"]
