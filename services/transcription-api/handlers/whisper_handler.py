"""Handler for transcribing uploads directly with the inline provider."""

from scribe_common import setup_logging

from config import UploadLimits
from domain import LanguageMode, TranscriptBuilder, TranscriptionResult, UploadRequest
from domain.validation import validate_audio_metadata, validate_audio_upload
from infrastructure.interfaces import InlineSpeechRecognizer

logger = setup_logging()


class WhisperHandler:
    """Validates an inline upload, transcribes it, and normalizes the output."""

    def __init__(
        self,
        recognizer: InlineSpeechRecognizer,
        limits: UploadLimits,
        transcript_builder: TranscriptBuilder,
    ):
        self._recognizer = recognizer
        self._limits = limits
        self._transcript_builder = transcript_builder

    def check_upload(self, content_type: str, size: int | None) -> None:
        validate_audio_metadata(
            content_type, size, self._limits.whisper_max_upload_bytes
        )

    def transcribe(
        self, request: UploadRequest, language_mode: str | None = None
    ) -> TranscriptionResult:
        mode = LanguageMode.parse(language_mode)
        validate_audio_upload(request, self._limits.whisper_max_upload_bytes)

        recognition = self._recognizer.recognize_bytes(request)
        result = self._transcript_builder.build(recognition, mode)

        logger.info(
            "Whisper result normalized",
            extra={
                "file_name": request.file_name,
                "total_words": result.total_words,
                "language": result.language,
            },
        )
        return result
