"""Infrastructure layer exports."""

from .gcs_storage import GcsStorage
from .google_speech_recognizer import GoogleSpeechRecognizer
from .whisper_recognizer import WhisperRecognizer

__all__ = ["GcsStorage", "GoogleSpeechRecognizer", "WhisperRecognizer"]
