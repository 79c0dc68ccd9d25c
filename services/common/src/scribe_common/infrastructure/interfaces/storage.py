"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload(self, object_name: str, data: bytes, content_type: str) -> str:
        """
        Writes a complete object to storage in a single request.

        Args:
            object_name: The destination key inside the bucket.
            data: The object payload.
            content_type: MIME type stored as object metadata.

        Returns:
            The canonical URI of the written object.

        Raises:
            ConfigurationError: If the bucket or credentials are not configured.
            AuthenticationError: If the storage provider rejects the credentials.
            TransientIOError: If the write fails for any other reason.
        """
