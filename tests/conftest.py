"""
Shared pytest fixtures for test suite.

This module provides common fixtures used across multiple test files,
reducing duplication and ensuring consistency.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

from scenario2050.api import create_app
from scenario2050.config import Settings
from scenario2050.normalizer import normalize_config

# Every variable the backends read; cleared so a developer's .env never leaks into tests
BACKEND_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "LLM_TEMPERATURE",
    "ELEVENLABS_API_KEY",
    "ELEVENLABS_VOICE_ID",
    "ELEVENLABS_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test without backend credentials unless it sets them."""
    with patch.dict(os.environ):
        for name in BACKEND_ENV_VARS:
            os.environ.pop(name, None)
        yield


# Configuration fixtures
@pytest.fixture
def default_config():
    """Normalized default scenario in English on the mock provider."""
    return normalize_config({})


@pytest.fixture
def sample_config():
    """A mid-range English scenario."""
    return normalize_config({
        "climateC": 2.4,
        "workforcePressure": 60,
        "financialRisk": 35,
        "socialCohesion": 70,
        "geopolitics": 40,
        "governanceInfo": 55,
        "techDiffusion": 65,
        "language": "en",
        "provider": "mock",
    })


@pytest.fixture
def german_config(sample_config):
    """The sample scenario in German."""
    return normalize_config({**sample_config.to_payload(), "language": "de"})


@pytest.fixture
def openai_settings():
    """Settings with only an OpenAI key."""
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def gemini_settings():
    """Settings with only a Gemini key."""
    return Settings(gemini_api_key="gemini-test")


@pytest.fixture
def speech_settings():
    """Settings with an ElevenLabs key."""
    return Settings(elevenlabs_api_key="xi-test")


# Flask fixtures
@pytest.fixture
def app():
    """Create a Flask app configured for testing."""
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    """Create a test client for the Flask app."""
    with app.test_client() as client:
        yield client


# ============================================================================
# Standardized Mocking Utilities
# ============================================================================
# Hosted backends are never called for real. OpenAI is mocked by injecting a
# client object, Gemini by patching the google.generativeai module, and
# ElevenLabs by passing a session whose post() returns a canned response.

def make_openai_completion(text):
    """Build an object shaped like an OpenAI chat completion."""
    completion = MagicMock()
    choice = MagicMock()
    choice.message.content = text
    completion.choices = [choice]
    return completion


def make_gemini_response(text, finish_reason="STOP"):
    """Build an object shaped like a Gemini generate_content response."""
    response = MagicMock()
    candidate = MagicMock()
    part = MagicMock()
    part.text = text
    candidate.content.parts = [part]
    candidate.finish_reason = finish_reason
    response.candidates = [candidate]
    return response


def make_http_response(status_code=200, content=b"", text=""):
    """Build an object shaped like a requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.content = content
    response.text = text
    return response


@pytest.fixture
def mock_openai_client():
    """
    Standardized fixture for mocking the OpenAI client.

    Usage:
        def test_something(mock_openai_client):
            provider = OpenAIProvider(api_key="sk-test", client=mock_openai_client)
    """
    client = MagicMock()
    client.chat.completions.create.return_value = make_openai_completion("Generated narrative")
    return client


@pytest.fixture
def mock_gemini_model():
    """
    Standardized fixture for mocking google.generativeai.

    Yields the mocked GenerativeModel instance; the module-level configure
    and GenerativeModel are patched for the duration of the test.
    """
    with patch('google.generativeai.configure') as mock_configure:
        with patch('google.generativeai.GenerativeModel') as mock_model_class:
            mock_model = MagicMock()
            mock_model.generate_content.return_value = make_gemini_response("Generated narrative")
            mock_model_class.return_value = mock_model
            mock_model._mock_configure = mock_configure
            mock_model._mock_model_class = mock_model_class
            yield mock_model


@pytest.fixture
def mock_session():
    """Session whose post() returns a successful MP3 response."""
    session = MagicMock()
    session.post.return_value = make_http_response(200, content=b"ID3fake-mp3-bytes")
    return session
