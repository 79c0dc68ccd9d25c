"""Error taxonomy shared by the transcription services.

Every error carries a human-readable ``message`` that is safe to return to a
client, and optionally the underlying ``cause`` which is only ever logged.
"""


class ScribeError(Exception):
    """Base class for all expected service errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(ScribeError):
    """Raised when a request has a bad shape, size, or type."""


class ConfigurationError(ScribeError):
    """Raised when required credentials or settings are missing or malformed."""


class AuthenticationError(ScribeError):
    """Raised when a provider rejects our credentials."""


class AuthorizationError(ScribeError):
    """Raised when credentials are valid but lack the required permissions."""


class NotFoundError(ScribeError):
    """Raised when a referenced storage object does not exist."""


class QuotaError(ScribeError):
    """Raised when a provider rate-limits the request or a quota is exhausted."""


class TransientIOError(ScribeError):
    """Raised for storage or network failures that may succeed on retry."""


class ProviderError(ScribeError):
    """Raised for provider failures that do not map to a more specific error."""


class ChannelConfigurationError(ProviderError):
    """Raised when the provider rejects the requested audio channel layout."""
