"""Google Cloud Storage implementation of the StorageClient interface."""

from collections.abc import Callable

from google.api_core import exceptions as gax_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage
from scribe_common import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GoogleCloudConfig,
    TransientIOError,
    setup_logging,
)
from scribe_common.infrastructure import StorageClient

from domain.models import StoredObjectRef

from .clients import get_storage_client

logger = setup_logging()


class GcsStorage(StorageClient):
    """Writes audio objects to a Google Cloud Storage bucket."""

    def __init__(
        self,
        config: GoogleCloudConfig,
        client_factory: Callable[[GoogleCloudConfig], storage.Client] = get_storage_client,
    ):
        self._config = config
        self._client_factory = client_factory

    def upload(self, object_name: str, data: bytes, content_type: str) -> str:
        self._config.require_bucket()
        client = self._client_factory(self._config)
        bucket_name = self._config.bucket_name

        try:
            blob = client.bucket(bucket_name).blob(object_name)
            blob.upload_from_string(data, content_type=content_type)
        except (auth_exceptions.GoogleAuthError, gax_exceptions.Unauthorized) as e:
            logger.exception(
                "GCS authentication failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise AuthenticationError(
                "Google Cloud authentication failed. "
                "Please verify your service account credentials.",
                e,
            ) from e
        except gax_exceptions.Forbidden as e:
            logger.exception(
                "GCS permission denied",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise AuthorizationError(
                "Permission denied writing to the storage bucket.", e
            ) from e
        except gax_exceptions.NotFound as e:
            logger.exception("GCS bucket not found", extra={"bucket_name": bucket_name})
            raise ConfigurationError(
                f"Server configuration error: bucket '{bucket_name}' not found", e
            ) from e
        except Exception as e:
            logger.exception(
                "GCS upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise TransientIOError("Could not write to Google Cloud Storage", e) from e

        uri = StoredObjectRef(bucket=bucket_name, key=object_name).uri
        logger.info(
            "File uploaded to GCS",
            extra={"uri": uri, "size": len(data), "content_type": content_type},
        )
        return uri
