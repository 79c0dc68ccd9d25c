"""Domain models for the upload and transcription pipeline."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from scribe_common import ValidationError

GCS_SCHEME = "gs://"

_MIME_SUBTYPE_ALIASES = {
    "mpeg": "mp3",
    "x-wav": "wav",
    "vnd.wave": "wav",
    "x-m4a": "m4a",
    "x-flac": "flac",
}


class AudioFormat(str, Enum):
    """Declared container format of an uploaded audio file."""

    MP3 = "mp3"
    WAV = "wav"
    WAVE = "wave"
    MP4 = "mp4"
    M4A = "m4a"
    FLAC = "flac"
    OGG = "ogg"
    WEBM = "webm"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "AudioFormat":
        """
        Parses an extension, file name, or MIME type into a format.

        Never raises: anything unrecognized becomes ``UNKNOWN``.
        """
        token = (value or "").strip().lower()
        if "/" in token:
            token = token.rsplit("/", 1)[1]
            token = _MIME_SUBTYPE_ALIASES.get(token, token)
        elif "." in token:
            token = token.rsplit(".", 1)[1]
        try:
            return cls(token)
        except ValueError:
            return cls.UNKNOWN


class AudioEncoding(str, Enum):
    """Encodings understood by the queued speech provider."""

    LINEAR16 = "LINEAR16"
    MP3 = "MP3"
    FLAC = "FLAC"
    OGG_OPUS = "OGG_OPUS"
    WEBM_OPUS = "WEBM_OPUS"


class LanguageMode(str, Enum):
    """Which languages the speaker is expected to use."""

    SINHALA = "sinhala"
    ENGLISH = "english"
    MIXED = "mixed"

    @classmethod
    def parse(cls, value: str | None) -> "LanguageMode":
        """Parses a client-supplied mode; a missing value means ``MIXED``."""
        if not value:
            return cls.MIXED
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid language mode: {value}")


class LanguageConfig(BaseModel, frozen=True):
    """Provider language parameters for one language mode."""

    language_code: str
    alternative_language_codes: tuple[str, ...] = ()
    response_language: str


class RecognitionConfig(BaseModel, frozen=True):
    """Everything the queued provider needs besides the audio itself."""

    encoding: AudioEncoding
    sample_rate_hertz: int
    language: LanguageConfig
    audio_channel_count: int = 2
    enable_separate_recognition_per_channel: bool = False
    enable_automatic_punctuation: bool = True
    model: str = "default"

    def as_mono(self) -> "RecognitionConfig":
        """Returns a copy forced to a single channel without channel separation."""
        return self.model_copy(
            update={
                "audio_channel_count": 1,
                "enable_separate_recognition_per_channel": False,
            }
        )


class UploadRequest(BaseModel, frozen=True):
    """An incoming audio file, alive for a single HTTP request."""

    data: bytes
    file_name: str
    content_type: str
    size: int


class StoredObjectRef(BaseModel, frozen=True):
    """Reference to an immutable object written to the storage bucket."""

    bucket: str
    key: str
    attempts: int = 1

    @property
    def uri(self) -> str:
        return f"{GCS_SCHEME}{self.bucket}/{self.key}"

    @classmethod
    def parse(cls, uri: str) -> "StoredObjectRef":
        """
        Parses a ``gs://bucket/key`` URI.

        Raises:
            ValidationError: If the URI is not a complete Cloud Storage URI.
        """
        if not uri or not uri.startswith(GCS_SCHEME):
            raise ValidationError(f"Invalid GCS URI: {uri}")
        bucket, _, key = uri[len(GCS_SCHEME):].partition("/")
        if not bucket or not key:
            raise ValidationError(f"Invalid GCS URI: {uri}")
        return cls(bucket=bucket, key=key)


class RecognizedSegment(BaseModel, frozen=True):
    """Best alternative of one provider result."""

    transcript: str
    confidence: float | None = None
    language_code: str | None = None


class SegmentedRecognition(BaseModel, frozen=True):
    """Provider output made of ordered, individually scored segments."""

    kind: Literal["segmented"] = "segmented"
    segments: list[RecognizedSegment] = []


class FlatRecognition(BaseModel, frozen=True):
    """Provider output made of a single transcript without per-segment detail."""

    kind: Literal["flat"] = "flat"
    text: str
    duration: float | None = None
    segment_count: int = 0
    language: str | None = None
    model: str


RecognitionOutput = Annotated[
    Union[SegmentedRecognition, FlatRecognition], Field(discriminator="kind")
]


class TranscriptionResult(BaseModel, frozen=True):
    """Provider-independent transcription outcome."""

    transcription: str
    confidence: float | None
    language: str
    segment_count: int
    total_words: int
    detected_languages: list[str] | None = None
    primary_language: str | None = None
    message: str | None = None
    duration: float | None = None
    model: str | None = None
