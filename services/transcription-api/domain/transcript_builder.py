"""Core business logic for normalizing provider output."""

from .language import (
    AUTO_DETECTED_LANGUAGE,
    SOURCE_LANGUAGE,
    classify_primary_language,
    contains_source_script,
    detect_languages,
    resolve_language_config,
)
from .models import (
    FlatRecognition,
    LanguageMode,
    RecognitionOutput,
    SegmentedRecognition,
    TranscriptionResult,
)

NO_SPEECH_MESSAGE = "No speech detected in audio file"


def count_words(text: str) -> int:
    return len(text.split())


class TranscriptBuilder:
    """Builds one TranscriptionResult shape from either provider output."""

    def build(
        self, recognition: RecognitionOutput, mode: LanguageMode
    ) -> TranscriptionResult:
        """
        Normalizes a provider output.

        Args:
            recognition: Segmented or flat output from a speech recognizer.
            mode: The language mode the request was made with.

        Returns:
            The normalized transcription result.
        """
        if isinstance(recognition, SegmentedRecognition):
            return self._from_segments(recognition, mode)
        return self._from_flat(recognition, mode)

    def _from_segments(
        self, recognition: SegmentedRecognition, mode: LanguageMode
    ) -> TranscriptionResult:
        language = resolve_language_config(mode).response_language
        parts: list[str] = []
        confidences: list[float] = []
        tags: list[str] = []

        for segment in recognition.segments:
            text = segment.transcript.strip()
            if not text:
                continue
            parts.append(text)
            confidences.append(segment.confidence or 0.0)
            if segment.language_code:
                tags.append(segment.language_code)

        if not parts:
            return TranscriptionResult(
                transcription="",
                confidence=0.0,
                language=language,
                segment_count=0,
                total_words=0,
                message=NO_SPEECH_MESSAGE,
            )

        transcription = " ".join(parts)
        result = TranscriptionResult(
            transcription=transcription,
            confidence=sum(confidences) / len(confidences),
            language=language,
            segment_count=len(parts),
            total_words=count_words(transcription),
        )
        return self._with_language_guess(result, mode, tags)

    def _from_flat(
        self, recognition: FlatRecognition, mode: LanguageMode
    ) -> TranscriptionResult:
        transcription = recognition.text.strip()
        language = (
            SOURCE_LANGUAGE
            if contains_source_script(transcription)
            else AUTO_DETECTED_LANGUAGE
        )
        result = TranscriptionResult(
            transcription=transcription,
            # The direct provider reports no confidence at all.
            confidence=None,
            language=language,
            segment_count=recognition.segment_count if transcription else 0,
            total_words=count_words(transcription),
            message=None if transcription else NO_SPEECH_MESSAGE,
            duration=recognition.duration,
            model=recognition.model,
        )
        if not transcription:
            return result
        reported = [recognition.language] if recognition.language else []
        return self._with_language_guess(result, mode, reported)

    def _with_language_guess(
        self, result: TranscriptionResult, mode: LanguageMode, tags: list[str]
    ) -> TranscriptionResult:
        if mode is not LanguageMode.MIXED:
            return result
        return result.model_copy(
            update={
                "detected_languages": detect_languages(result.transcription, tags),
                "primary_language": classify_primary_language(result.transcription),
            }
        )
