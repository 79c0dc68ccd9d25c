"""Domain layer exports."""

from .audio_format import resolve_encoding
from .language import classify_primary_language, resolve_language_config
from .models import (
    AudioEncoding,
    AudioFormat,
    FlatRecognition,
    LanguageConfig,
    LanguageMode,
    RecognitionConfig,
    RecognitionOutput,
    RecognizedSegment,
    SegmentedRecognition,
    StoredObjectRef,
    TranscriptionResult,
    UploadRequest,
)
from .object_naming import build_object_name
from .transcript_builder import NO_SPEECH_MESSAGE, TranscriptBuilder

__all__ = [
    "AudioEncoding",
    "AudioFormat",
    "FlatRecognition",
    "LanguageConfig",
    "LanguageMode",
    "RecognitionConfig",
    "RecognitionOutput",
    "RecognizedSegment",
    "SegmentedRecognition",
    "StoredObjectRef",
    "TranscriptionResult",
    "UploadRequest",
    "TranscriptBuilder",
    "NO_SPEECH_MESSAGE",
    "build_object_name",
    "classify_primary_language",
    "resolve_encoding",
    "resolve_language_config",
]
