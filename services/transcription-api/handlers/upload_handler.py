"""Handler for persisting uploaded audio to object storage."""

import time
from collections.abc import Callable

from scribe_common import TransientIOError, setup_logging
from scribe_common.infrastructure import StorageClient
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from config import StorageRetryConfig, UploadLimits
from domain import StoredObjectRef, UploadRequest, build_object_name
from domain.validation import validate_audio_metadata, validate_audio_upload

logger = setup_logging()


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Storage upload attempt failed, retrying",
        extra={
            "attempt": retry_state.attempt_number,
            "wait_s": retry_state.next_action.sleep if retry_state.next_action else None,
            "error": str(error),
        },
    )


class UploadHandler:
    """Validates an upload and writes it to storage with bounded retries."""

    def __init__(
        self,
        storage: StorageClient,
        limits: UploadLimits,
        retry: StorageRetryConfig,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._storage = storage
        self._limits = limits
        self._retry = retry
        self._sleep = sleep

    def check_upload(self, content_type: str, size: int | None) -> None:
        """Rejects an upload from its declared type and size, before it is read."""
        validate_audio_metadata(content_type, size, self._limits.max_upload_bytes)

    def upload(self, request: UploadRequest) -> StoredObjectRef:
        """
        Stores an uploaded audio file under a fresh, unique key.

        Only TransientIOError is retried. Every attempt reuses the same key,
        so a retried write replaces the object rather than adding another.

        Args:
            request: The incoming file.

        Returns:
            Reference to the stored object, with the number of attempts made.

        Raises:
            ValidationError: If the file type or size is not accepted.
            ConfigurationError: If storage is not configured.
            AuthenticationError: If the storage credentials are rejected.
            TransientIOError: If every attempt failed.
        """
        validate_audio_upload(request, self._limits.max_upload_bytes)

        object_name = build_object_name(request.file_name)
        logger.info(
            "Received upload request",
            extra={
                "file_name": request.file_name,
                "object_name": object_name,
                "content_type": request.content_type,
                "size": request.size,
            },
        )

        retrying = Retrying(
            stop=stop_after_attempt(self._retry.max_attempts),
            wait=wait_exponential(
                multiplier=self._retry.backoff_initial_s,
                min=self._retry.backoff_initial_s,
                max=self._retry.backoff_max_s,
            ),
            retry=retry_if_exception_type(TransientIOError),
            sleep=self._sleep,
            before_sleep=_log_retry,
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                uri = self._storage.upload(
                    object_name, request.data, request.content_type
                )

        ref = StoredObjectRef.parse(uri).model_copy(
            update={"attempts": attempt.retry_state.attempt_number}
        )
        logger.info("Upload stored", extra={"uri": ref.uri, "attempts": ref.attempts})
        return ref
