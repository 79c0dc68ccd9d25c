"""OpenAI Whisper implementation of the InlineSpeechRecognizer interface."""

from collections.abc import Callable

import openai
from scribe_common import (
    AuthenticationError,
    OpenAIConfig,
    ProviderError,
    QuotaError,
    ValidationError,
    setup_logging,
)

from domain.language import language_tag_for_name
from domain.models import FlatRecognition, UploadRequest

from .clients import get_openai_client
from .interfaces import InlineSpeechRecognizer

logger = setup_logging()


class WhisperRecognizer(InlineSpeechRecognizer):
    """Transcribes uploaded bytes directly with OpenAI Whisper."""

    def __init__(
        self,
        config: OpenAIConfig,
        client_factory: Callable[[str], openai.OpenAI] = get_openai_client,
    ):
        self._config = config
        self._client_factory = client_factory

    def recognize_bytes(self, audio: UploadRequest) -> FlatRecognition:
        self._config.require_api_key()
        client = self._client_factory(self._config.api_key)

        logger.info(
            "Starting Whisper transcription",
            extra={
                "file_name": audio.file_name,
                "content_type": audio.content_type,
                "size": audio.size,
            },
        )

        try:
            transcription = client.audio.transcriptions.create(
                file=(audio.file_name, audio.data, audio.content_type),
                model=self._config.model,
                response_format="verbose_json",
                temperature=self._config.temperature,
            )
        except openai.AuthenticationError as e:
            logger.exception("Whisper authentication failed")
            raise AuthenticationError("Invalid OpenAI API key", e) from e
        except openai.RateLimitError as e:
            logger.exception("Whisper rate limited")
            raise QuotaError("Rate limit exceeded. Try again later.", e) from e
        except openai.BadRequestError as e:
            logger.exception("Whisper rejected the audio")
            raise ValidationError(f"Transcription failed: {e.message}", e) from e
        except openai.OpenAIError as e:
            logger.exception("Whisper transcription failed")
            raise ProviderError(f"Transcription failed: {e}", e) from e

        segments = getattr(transcription, "segments", None) or []
        recognition = FlatRecognition(
            text=transcription.text or "",
            duration=getattr(transcription, "duration", None),
            segment_count=len(segments) or 1,
            language=language_tag_for_name(getattr(transcription, "language", None)),
            model=self._config.model,
        )

        logger.info(
            "Whisper transcription completed",
            extra={
                "text_length": len(recognition.text),
                "duration": recognition.duration,
                "language": recognition.language,
            },
        )
        return recognition
