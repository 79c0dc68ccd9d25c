"""Handler layer exports."""

from .transcription_handler import TranscriptionHandler
from .upload_handler import UploadHandler
from .whisper_handler import WhisperHandler

__all__ = ["UploadHandler", "TranscriptionHandler", "WhisperHandler"]
