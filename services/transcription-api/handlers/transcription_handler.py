"""Handler for transcribing stored audio with the queued provider."""

from scribe_common import ChannelConfigurationError, ValidationError, setup_logging

from config import SpeechConfig
from domain import (
    LanguageMode,
    RecognitionConfig,
    SegmentedRecognition,
    StoredObjectRef,
    TranscriptBuilder,
    TranscriptionResult,
    resolve_encoding,
    resolve_language_config,
)
from infrastructure.interfaces import SpeechRecognizer

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates config resolution, recognition, and normalization."""

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        speech: SpeechConfig,
        transcript_builder: TranscriptBuilder,
    ):
        self._recognizer = recognizer
        self._speech = speech
        self._transcript_builder = transcript_builder

    def transcribe(
        self,
        gcs_uri: str | None,
        audio_format: str | None,
        language_mode: str | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes a stored audio object.

        Args:
            gcs_uri: URI returned by the upload step.
            audio_format: Declared format, e.g. ``mp3`` or ``wav``.
            language_mode: ``sinhala``, ``english`` or ``mixed`` (default).

        Returns:
            The normalized result. No detected speech is still a success.

        Raises:
            ValidationError: If the request is incomplete or malformed.
            ScribeError: Configuration or provider failures.
        """
        if not gcs_uri:
            raise ValidationError("GCS URI required")
        ref = StoredObjectRef.parse(gcs_uri)
        if not audio_format or not audio_format.strip():
            raise ValidationError("Audio format required")
        mode = LanguageMode.parse(language_mode)

        config = RecognitionConfig(
            encoding=resolve_encoding(audio_format),
            sample_rate_hertz=self._speech.sample_rate_hertz,
            language=resolve_language_config(mode),
            model=self._speech.model,
        )

        logger.info(
            "Transcribe request",
            extra={
                "uri": ref.uri,
                "audio_format": audio_format,
                "language_mode": mode.value,
            },
        )

        recognition = self._recognize(ref, config)
        result = self._transcript_builder.build(recognition, mode)

        logger.info(
            "Transcription completed",
            extra={
                "uri": ref.uri,
                "segment_count": result.segment_count,
                "total_words": result.total_words,
                "confidence": result.confidence,
            },
        )
        return result

    def _recognize(
        self, ref: StoredObjectRef, config: RecognitionConfig
    ) -> SegmentedRecognition:
        """Submits once; a rejected channel layout is retried once as mono."""
        try:
            return self._recognizer.recognize_uri(ref, config)
        except ChannelConfigurationError as e:
            logger.warning(
                "Channel configuration rejected, retrying as mono",
                extra={"uri": ref.uri, "error": e.message},
            )
            return self._recognizer.recognize_uri(ref, config.as_mono())
