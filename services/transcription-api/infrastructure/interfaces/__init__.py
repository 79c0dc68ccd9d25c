"""Infrastructure interface exports."""

from scribe_common.infrastructure import StorageClient

from .speech_recognizer import InlineSpeechRecognizer, SpeechRecognizer

__all__ = ["StorageClient", "SpeechRecognizer", "InlineSpeechRecognizer"]
