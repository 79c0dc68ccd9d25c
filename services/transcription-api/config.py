"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel
from scribe_common import GoogleCloudConfig, OpenAIConfig, normalize_private_key

MIB = 1024 * 1024


class UploadLimits(BaseModel, frozen=True):
    """Size ceilings for incoming audio, per provider path."""

    max_upload_bytes: int = 100 * MIB
    whisper_max_upload_bytes: int = 25 * MIB


class StorageRetryConfig(BaseModel, frozen=True):
    """Backoff schedule for object storage writes."""

    max_attempts: int = 3
    backoff_initial_s: float = 1.0
    backoff_max_s: float = 4.0


class SpeechConfig(BaseModel, frozen=True):
    """Google Speech-to-Text recognition settings."""

    sample_rate_hertz: int = 16000
    model: str = "default"
    operation_timeout_s: float = 1800.0


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    google: GoogleCloudConfig
    openai: OpenAIConfig
    limits: UploadLimits = UploadLimits()
    storage_retry: StorageRetryConfig = StorageRetryConfig()
    speech: SpeechConfig = SpeechConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        google=GoogleCloudConfig(
            project_id=os.getenv("GCP_PROJECT_ID", ""),
            client_email=os.getenv("GCS_CLIENT_EMAIL", ""),
            private_key=normalize_private_key(os.getenv("GCS_PRIVATE_KEY", "")),
            bucket_name=os.getenv("GCS_BUCKET_NAME", ""),
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
        ),
        limits=UploadLimits(
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", 100 * MIB)),
            whisper_max_upload_bytes=int(
                os.getenv("WHISPER_MAX_UPLOAD_BYTES", 25 * MIB)
            ),
        ),
        speech=SpeechConfig(
            sample_rate_hertz=int(os.getenv("SPEECH_SAMPLE_RATE_HERTZ", 16000)),
            model=os.getenv("SPEECH_MODEL", "default"),
            operation_timeout_s=float(os.getenv("SPEECH_OPERATION_TIMEOUT_S", 1800)),
        ),
    )
