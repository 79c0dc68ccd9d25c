"""Tests for the Google Speech-to-Text adapter."""

import concurrent.futures
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from google.api_core import exceptions as gax_exceptions
from google.cloud import speech_v1p1beta1 as speech
from scribe_common import (
    AuthenticationError,
    AuthorizationError,
    ChannelConfigurationError,
    ConfigurationError,
    NotFoundError,
    ProviderError,
    QuotaError,
)

from domain import (
    AudioEncoding,
    LanguageMode,
    RecognitionConfig,
    StoredObjectRef,
    resolve_language_config,
)
from infrastructure import GoogleSpeechRecognizer
from infrastructure.google_speech_recognizer import build_request_config, map_google_error

REF = StoredObjectRef(bucket="test-bucket", key="audio/1-abc-talk.mp3")


def make_config(**overrides) -> RecognitionConfig:
    fields = {
        "encoding": AudioEncoding.MP3,
        "sample_rate_hertz": 16000,
        "language": resolve_language_config(LanguageMode.MIXED),
    }
    fields.update(overrides)
    return RecognitionConfig(**fields)


def make_result(transcript: str, confidence: float = 0.0, language_code: str = ""):
    return SimpleNamespace(
        alternatives=[SimpleNamespace(transcript=transcript, confidence=confidence)],
        language_code=language_code,
    )


@pytest.fixture
def speech_client() -> Mock:
    return Mock()


@pytest.fixture
def recognizer(app_config, speech_client) -> GoogleSpeechRecognizer:
    return GoogleSpeechRecognizer(
        app_config.google, operation_timeout_s=60, client_factory=lambda _c: speech_client
    )


class TestBuildRequestConfig:
    """Tests for build_request_config."""

    def test_stereo_mixed_config(self):
        request = build_request_config(make_config())

        assert request.encoding == speech.RecognitionConfig.AudioEncoding.MP3
        assert request.sample_rate_hertz == 16000
        assert request.language_code == "si-LK"
        assert list(request.alternative_language_codes) == ["en-US"]
        assert request.audio_channel_count == 2
        assert request.enable_automatic_punctuation is True
        assert request.max_alternatives == 1

    def test_mono_config(self):
        request = build_request_config(make_config(encoding=AudioEncoding.LINEAR16).as_mono())

        assert request.encoding == speech.RecognitionConfig.AudioEncoding.LINEAR16
        assert request.audio_channel_count == 1
        assert request.enable_separate_recognition_per_channel is False


class TestMapGoogleError:
    """Tests for map_google_error."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (gax_exceptions.Unauthenticated("expired"), AuthenticationError),
            (gax_exceptions.PermissionDenied("denied"), AuthorizationError),
            (gax_exceptions.NotFound("no such object"), NotFoundError),
            (gax_exceptions.ResourceExhausted("quota"), QuotaError),
            (gax_exceptions.InvalidArgument("bad sample rate"), ProviderError),
            (gax_exceptions.DeadlineExceeded("slow"), ProviderError),
            (gax_exceptions.InternalServerError("boom"), ProviderError),
        ],
    )
    def test_error_classes(self, error, expected):
        mapped = map_google_error(error)

        assert type(mapped) is expected
        assert mapped.cause is error

    def test_channel_error_detected(self):
        error = gax_exceptions.InvalidArgument(
            "Must use single channel (mono) audio, but WAV header indicates 2 channels."
        )

        assert isinstance(map_google_error(error), ChannelConfigurationError)

    def test_invalid_argument_message_kept(self):
        mapped = map_google_error(gax_exceptions.InvalidArgument("bad sample rate"))

        assert mapped.message == "Invalid audio format or configuration: bad sample rate"


class TestRecognizeUri:
    """Tests for GoogleSpeechRecognizer.recognize_uri."""

    def test_results_converted_in_order(self, recognizer, speech_client):
        operation = speech_client.long_running_recognize.return_value
        operation.result.return_value = SimpleNamespace(
            results=[
                make_result("hello", 0.9, "en-us"),
                SimpleNamespace(alternatives=[], language_code=""),
                make_result("world", 0.0),
            ]
        )

        recognition = recognizer.recognize_uri(REF, make_config())

        assert [s.transcript for s in recognition.segments] == ["hello", "world"]
        assert recognition.segments[0].confidence == 0.9
        assert recognition.segments[0].language_code == "en-us"
        assert recognition.segments[1].confidence is None
        assert recognition.segments[1].language_code is None
        operation.result.assert_called_once_with(timeout=60)

    def test_audio_uses_stored_uri(self, recognizer, speech_client):
        speech_client.long_running_recognize.return_value.result.return_value = (
            SimpleNamespace(results=[])
        )

        recognizer.recognize_uri(REF, make_config())

        kwargs = speech_client.long_running_recognize.call_args.kwargs
        assert kwargs["audio"].uri == REF.uri
        assert kwargs["config"].language_code == "si-LK"

    def test_channel_rejection_raised(self, recognizer, speech_client):
        speech_client.long_running_recognize.side_effect = gax_exceptions.InvalidArgument(
            "audio_channel_count 2 does not match mono audio"
        )

        with pytest.raises(ChannelConfigurationError):
            recognizer.recognize_uri(REF, make_config())

    def test_operation_failure_mapped(self, recognizer, speech_client):
        operation = speech_client.long_running_recognize.return_value
        operation.result.side_effect = gax_exceptions.NotFound("object missing")

        with pytest.raises(NotFoundError):
            recognizer.recognize_uri(REF, make_config())

    def test_operation_timeout_mapped(self, recognizer, speech_client):
        operation = speech_client.long_running_recognize.return_value
        operation.result.side_effect = concurrent.futures.TimeoutError()

        with pytest.raises(ProviderError, match="Request timeout"):
            recognizer.recognize_uri(REF, make_config())

    def test_missing_credentials_fail_before_call(self, app_config):
        factory = Mock()
        recognizer = GoogleSpeechRecognizer(
            app_config.google.model_copy(update={"client_email": ""}), 60, factory
        )

        with pytest.raises(ConfigurationError):
            recognizer.recognize_uri(REF, make_config())

        factory.assert_not_called()
