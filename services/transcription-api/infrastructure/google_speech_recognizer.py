"""Google Cloud Speech-to-Text implementation of the SpeechRecognizer interface."""

import concurrent.futures
import re
from collections.abc import Callable

from google.api_core import exceptions as gax_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import speech_v1p1beta1 as speech
from scribe_common import (
    AuthenticationError,
    AuthorizationError,
    ChannelConfigurationError,
    GoogleCloudConfig,
    NotFoundError,
    ProviderError,
    QuotaError,
    ScribeError,
    setup_logging,
)

from domain.models import (
    RecognitionConfig,
    RecognizedSegment,
    SegmentedRecognition,
    StoredObjectRef,
)

from .clients import get_speech_client
from .interfaces import SpeechRecognizer

logger = setup_logging()

_CHANNEL_ERROR = re.compile(r"channel|mono", re.IGNORECASE)

TIMEOUT_MESSAGE = "Request timeout: The audio file might be too long"


def map_google_error(error: gax_exceptions.GoogleAPICallError) -> ScribeError:
    """Translates a Google API failure into the service error taxonomy."""
    message = error.message or str(error)
    if isinstance(error, gax_exceptions.Unauthorized):
        return AuthenticationError(
            "Authentication failed. Check Google Cloud credentials.", error
        )
    if isinstance(error, gax_exceptions.Forbidden):
        return AuthorizationError(
            "Permission denied. Check service account permissions.", error
        )
    if isinstance(error, gax_exceptions.NotFound):
        return NotFoundError("Audio file not found in storage bucket.", error)
    if isinstance(error, gax_exceptions.TooManyRequests):
        return QuotaError(
            "Speech-to-Text quota exceeded. Try again later.", error
        )
    if isinstance(error, gax_exceptions.BadRequest):
        if _CHANNEL_ERROR.search(message):
            return ChannelConfigurationError(
                f"Unsupported audio channel configuration: {message}", error
            )
        return ProviderError(
            f"Invalid audio format or configuration: {message}", error
        )
    if isinstance(error, gax_exceptions.GatewayTimeout):
        return ProviderError(f"{TIMEOUT_MESSAGE} - {message}", error)
    return ProviderError(f"Speech-to-Text API error: {message}", error)


def build_request_config(config: RecognitionConfig) -> speech.RecognitionConfig:
    return speech.RecognitionConfig(
        encoding=speech.RecognitionConfig.AudioEncoding[config.encoding.value],
        sample_rate_hertz=config.sample_rate_hertz,
        language_code=config.language.language_code,
        alternative_language_codes=list(config.language.alternative_language_codes),
        audio_channel_count=config.audio_channel_count,
        enable_separate_recognition_per_channel=(
            config.enable_separate_recognition_per_channel
        ),
        enable_automatic_punctuation=config.enable_automatic_punctuation,
        enable_word_time_offsets=False,
        max_alternatives=1,
        model=config.model,
    )


class GoogleSpeechRecognizer(SpeechRecognizer):
    """Transcribes stored audio with Google's long-running recognition."""

    def __init__(
        self,
        config: GoogleCloudConfig,
        operation_timeout_s: float,
        client_factory: Callable[
            [GoogleCloudConfig], speech.SpeechClient
        ] = get_speech_client,
    ):
        self._config = config
        self._operation_timeout_s = operation_timeout_s
        self._client_factory = client_factory

    def recognize_uri(
        self, ref: StoredObjectRef, config: RecognitionConfig
    ) -> SegmentedRecognition:
        self._config.require_credentials()
        client = self._client_factory(self._config)
        request_config = build_request_config(config)
        audio = speech.RecognitionAudio(uri=ref.uri)

        logger.info(
            "Starting long-running recognition",
            extra={
                "uri": ref.uri,
                "encoding": config.encoding.value,
                "language_code": config.language.language_code,
                "alternative_language_codes": list(
                    config.language.alternative_language_codes
                ),
                "audio_channel_count": config.audio_channel_count,
            },
        )

        try:
            operation = client.long_running_recognize(
                config=request_config, audio=audio
            )
            response = operation.result(timeout=self._operation_timeout_s)
        except gax_exceptions.GoogleAPICallError as e:
            logger.exception(
                "Speech API error",
                extra={"uri": ref.uri, "code": getattr(e, "code", None)},
            )
            raise map_google_error(e) from e
        except auth_exceptions.GoogleAuthError as e:
            logger.exception("Speech API authentication failed", extra={"uri": ref.uri})
            raise AuthenticationError(
                "Authentication failed. Check Google Cloud credentials.", e
            ) from e
        except concurrent.futures.TimeoutError as e:
            logger.exception("Speech operation timed out", extra={"uri": ref.uri})
            raise ProviderError(TIMEOUT_MESSAGE, e) from e

        segments = [
            RecognizedSegment(
                transcript=result.alternatives[0].transcript,
                confidence=result.alternatives[0].confidence or None,
                language_code=result.language_code or None,
            )
            for result in response.results
            if result.alternatives
        ]

        logger.info(
            "Recognition completed",
            extra={"uri": ref.uri, "result_count": len(segments)},
        )
        return SegmentedRecognition(segments=segments)
