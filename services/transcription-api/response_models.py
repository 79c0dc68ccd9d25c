"""Response models for the transcription API."""

from pydantic import BaseModel, ConfigDict, Field

from domain import TranscriptionResult


class UploadResponse(BaseModel):
    """Response returned after the audio file is stored."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    gcs_uri: str = Field(alias="gcsUri")
    file_name: str = Field(alias="fileName")
    size: int
    type: str


class TranscriptionResponse(BaseModel):
    """Normalized result of a queued-provider transcription."""

    model_config = ConfigDict(populate_by_name=True)

    transcription: str
    confidence: float
    language: str
    segment_count: int = Field(alias="segmentCount")
    total_words: int = Field(alias="totalWords")
    detected_languages: list[str] | None = Field(default=None, alias="detectedLanguages")
    primary_language: str | None = Field(default=None, alias="primaryLanguage")
    message: str | None = None

    @classmethod
    def from_result(cls, result: TranscriptionResult) -> "TranscriptionResponse":
        return cls(
            transcription=result.transcription,
            confidence=result.confidence or 0.0,
            language=result.language,
            segment_count=result.segment_count,
            total_words=result.total_words,
            **_present(
                detected_languages=result.detected_languages,
                primary_language=result.primary_language,
                message=result.message,
            ),
        )


class WhisperTranscriptionResponse(BaseModel):
    """Normalized result of a direct-provider transcription.

    ``confidence`` is always null: the provider does not report one.
    """

    model_config = ConfigDict(populate_by_name=True)

    transcription: str
    confidence: float | None
    language: str
    total_words: int = Field(alias="totalWords")
    duration: float | None
    segments: int
    model: str
    detected_languages: list[str] | None = Field(default=None, alias="detectedLanguages")
    primary_language: str | None = Field(default=None, alias="primaryLanguage")
    message: str | None = None

    @classmethod
    def from_result(cls, result: TranscriptionResult) -> "WhisperTranscriptionResponse":
        return cls(
            transcription=result.transcription,
            confidence=result.confidence,
            language=result.language,
            total_words=result.total_words,
            duration=result.duration,
            segments=result.segment_count,
            model=result.model or "",
            **_present(
                detected_languages=result.detected_languages,
                primary_language=result.primary_language,
                message=result.message,
            ),
        )


def _present(**fields) -> dict:
    """Drops unset optional fields so they are omitted from the response."""
    return {name: value for name, value in fields.items() if value is not None}
