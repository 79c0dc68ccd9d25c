"""FastAPI dependency injection configuration.

Provider clients are not created here: the adapters build them lazily on
first use, so missing credentials surface as a per-request configuration
error instead of failing at import time.
"""

from typing import Annotated

from fastapi import Depends
from scribe_common.infrastructure import StorageClient

from config import AppConfig, load_config
from domain import TranscriptBuilder
from handlers import TranscriptionHandler, UploadHandler, WhisperHandler
from infrastructure import GcsStorage, GoogleSpeechRecognizer, WhisperRecognizer
from infrastructure.interfaces import InlineSpeechRecognizer, SpeechRecognizer

_config = load_config()


def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return _config


ConfigDep = Annotated[AppConfig, Depends(get_config)]


def get_storage(config: ConfigDep) -> StorageClient:
    """Returns the configured storage client."""
    return GcsStorage(config.google)


def get_speech_recognizer(config: ConfigDep) -> SpeechRecognizer:
    """Returns the queued speech recognizer."""
    return GoogleSpeechRecognizer(config.google, config.speech.operation_timeout_s)


def get_whisper_recognizer(config: ConfigDep) -> InlineSpeechRecognizer:
    """Returns the direct speech recognizer."""
    return WhisperRecognizer(config.openai)


def get_upload_handler(
    config: ConfigDep, storage: Annotated[StorageClient, Depends(get_storage)]
) -> UploadHandler:
    """Returns the configured upload handler."""
    return UploadHandler(storage, config.limits, config.storage_retry)


def get_transcription_handler(
    config: ConfigDep,
    recognizer: Annotated[SpeechRecognizer, Depends(get_speech_recognizer)],
) -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    return TranscriptionHandler(recognizer, config.speech, TranscriptBuilder())


def get_whisper_handler(
    config: ConfigDep,
    recognizer: Annotated[InlineSpeechRecognizer, Depends(get_whisper_recognizer)],
) -> WhisperHandler:
    """Returns the configured direct transcription handler."""
    return WhisperHandler(recognizer, config.limits, TranscriptBuilder())
