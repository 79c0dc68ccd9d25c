"""Tests for the OpenAI Whisper adapter."""

from types import SimpleNamespace
from unittest.mock import Mock

import httpx
import openai
import pytest
from scribe_common import (
    AuthenticationError,
    ConfigurationError,
    OpenAIConfig,
    ProviderError,
    QuotaError,
)

from domain import UploadRequest
from infrastructure import WhisperRecognizer

TRANSCRIPTIONS_URL = "https://api.openai.com/v1/audio/transcriptions"


def api_response(status_code: int) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("POST", TRANSCRIPTIONS_URL))


def make_request() -> UploadRequest:
    return UploadRequest(data=b"abc", file_name="talk.mp3", content_type="audio/mpeg", size=3)


@pytest.fixture
def openai_client() -> Mock:
    return Mock()


@pytest.fixture
def recognizer(openai_client) -> WhisperRecognizer:
    return WhisperRecognizer(OpenAIConfig(api_key="sk-test"), lambda _key: openai_client)


class TestWhisperRecognizer:
    """Tests for WhisperRecognizer.recognize_bytes."""

    def test_verbose_response_converted(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.return_value = SimpleNamespace(
            text=" hello there ",
            duration=3.5,
            language="english",
            segments=[object(), object()],
        )

        recognition = recognizer.recognize_bytes(make_request())

        assert recognition.text == " hello there "
        assert recognition.duration == 3.5
        assert recognition.segment_count == 2
        assert recognition.language == "en-US"
        assert recognition.model == "whisper-1"
        openai_client.audio.transcriptions.create.assert_called_once_with(
            file=("talk.mp3", b"abc", "audio/mpeg"),
            model="whisper-1",
            response_format="verbose_json",
            temperature=0.2,
        )

    def test_missing_segments_count_as_one(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.return_value = SimpleNamespace(
            text="hello", segments=None
        )

        recognition = recognizer.recognize_bytes(make_request())

        assert recognition.segment_count == 1
        assert recognition.duration is None
        assert recognition.language is None

    def test_unsupported_language_dropped(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.return_value = SimpleNamespace(
            text="bonjour", language="french", segments=[object()]
        )

        assert recognizer.recognize_bytes(make_request()).language is None

    def test_missing_api_key(self):
        factory = Mock()
        recognizer = WhisperRecognizer(OpenAIConfig(api_key=""), factory)

        with pytest.raises(ConfigurationError, match="OpenAI API key not configured"):
            recognizer.recognize_bytes(make_request())

        factory.assert_not_called()

    def test_invalid_key(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.side_effect = openai.AuthenticationError(
            "Incorrect API key provided", response=api_response(401), body=None
        )

        with pytest.raises(AuthenticationError, match="Invalid OpenAI API key"):
            recognizer.recognize_bytes(make_request())

    def test_rate_limited(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.side_effect = openai.RateLimitError(
            "Rate limit reached", response=api_response(429), body=None
        )

        with pytest.raises(QuotaError, match="Rate limit exceeded. Try again later."):
            recognizer.recognize_bytes(make_request())

    def test_other_failures(self, recognizer, openai_client):
        openai_client.audio.transcriptions.create.side_effect = openai.InternalServerError(
            "upstream failure", response=api_response(500), body=None
        )

        with pytest.raises(ProviderError, match="Transcription failed"):
            recognizer.recognize_bytes(make_request())
