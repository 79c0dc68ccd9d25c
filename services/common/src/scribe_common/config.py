"""Shared configuration models for cloud provider credentials."""

from pydantic import BaseModel

from scribe_common.exceptions import ConfigurationError


def normalize_private_key(raw: str) -> str:
    """
    Normalizes a service-account private key read from the environment.

    Keys are usually stored with literal ``\\n`` sequences and sometimes
    wrapped in quotes; both are undone here.
    """
    return raw.replace("\\n", "\n").replace('"', "").strip()


class GoogleCloudConfig(BaseModel, frozen=True):
    """Google Cloud service-account and storage configuration."""

    project_id: str
    client_email: str
    private_key: str
    bucket_name: str

    def require_credentials(self) -> None:
        """
        Ensures the service-account credentials are present.

        Raises:
            ConfigurationError: If any credential value is missing.
        """
        missing = [
            name
            for name, value in (
                ("GCP_PROJECT_ID", self.project_id),
                ("GCS_CLIENT_EMAIL", self.client_email),
                ("GCS_PRIVATE_KEY", self.private_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                "Server configuration error: Missing Google Cloud credentials "
                f"({', '.join(missing)})"
            )

    def require_bucket(self) -> None:
        """
        Ensures credentials and a bucket name are configured.

        Raises:
            ConfigurationError: If credentials or the bucket name are missing.
        """
        self.require_credentials()
        if not self.bucket_name:
            raise ConfigurationError(
                "Server configuration error: GCS_BUCKET_NAME is not set"
            )


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str
    model: str = "whisper-1"
    temperature: float = 0.2

    def require_api_key(self) -> None:
        """
        Raises:
            ConfigurationError: If the API key is missing.
        """
        if not self.api_key:
            raise ConfigurationError("OpenAI API key not configured")
