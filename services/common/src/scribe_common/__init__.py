from scribe_common.config import GoogleCloudConfig, OpenAIConfig, normalize_private_key
from scribe_common.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ChannelConfigurationError,
    ConfigurationError,
    NotFoundError,
    ProviderError,
    QuotaError,
    ScribeError,
    TransientIOError,
    ValidationError,
)
from scribe_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "GoogleCloudConfig",
    "OpenAIConfig",
    "normalize_private_key",
    "ScribeError",
    "ValidationError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "QuotaError",
    "TransientIOError",
    "ProviderError",
    "ChannelConfigurationError",
]
