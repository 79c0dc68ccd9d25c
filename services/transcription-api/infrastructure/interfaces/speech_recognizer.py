"""Abstract interfaces for speech recognition providers."""

from abc import ABC, abstractmethod

from domain.models import (
    FlatRecognition,
    RecognitionConfig,
    SegmentedRecognition,
    StoredObjectRef,
    UploadRequest,
)


class SpeechRecognizer(ABC):
    """Provider that transcribes audio already written to object storage."""

    @abstractmethod
    def recognize_uri(
        self, ref: StoredObjectRef, config: RecognitionConfig
    ) -> SegmentedRecognition:
        """
        Runs a long-running recognition on a stored object and waits for it.

        Args:
            ref: The stored audio object.
            config: Encoding, language and channel parameters.

        Returns:
            The recognized segments in provider order.

        Raises:
            ConfigurationError: If provider credentials are not configured.
            ChannelConfigurationError: If the channel layout was rejected.
            ScribeError: Any other mapped provider failure.
        """


class InlineSpeechRecognizer(ABC):
    """Provider that transcribes raw audio bytes sent with the request."""

    @abstractmethod
    def recognize_bytes(self, audio: UploadRequest) -> FlatRecognition:
        """
        Transcribes an uploaded file in a single call.

        The provider detects the spoken language on its own.

        Raises:
            ConfigurationError: If the API key is not configured.
            ScribeError: Any other mapped provider failure.
        """
