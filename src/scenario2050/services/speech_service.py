"""
Speech synthesis service.

Renders narrative text to MP3 audio through the ElevenLabs text-to-speech
REST API. Unlike narrative generation there is no fallback: a missing
credential, invalid input or a backend failure is reported to the caller
as an APIError.
"""

import base64
import re
import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..config import Settings
from ..models import AUDIO_MIME_TYPE, SpeechResult
from ..utils.errors import NotConfiguredError, UpstreamServiceError, ValidationError

logger = logging.getLogger(__name__)

MAX_TTS_CHARS = 1500
MIN_SENTENCE_OFFSET = 200
ELLIPSIS = "..."
MAX_ERROR_BODY_CHARS = 500

ELEVENLABS_TTS_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"
DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"
MULTILINGUAL_MODEL_ID = "eleven_multilingual_v2"
VOICE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
VOICE_SETTINGS = {
    "stability": 0.4,
    "similarity_boost": 0.8,
}


def truncate_for_speech(
    text: str,
    budget: int = MAX_TTS_CHARS,
    min_offset: int = MIN_SENTENCE_OFFSET,
) -> str:
    """
    Shorten text to the speech budget, preferring a sentence boundary.

    Text within the budget is returned unchanged. Longer text is cut to the
    budget and then back to its last period, provided that period sits at
    index ``min_offset`` or later. Without such a period the raw cut is
    kept and an ellipsis appended.

    Args:
        text: Text to shorten
        budget: Maximum number of characters sent to the backend
        min_offset: Earliest index a sentence-ending period may have

    Returns:
        The (possibly) truncated text
    """
    if len(text) <= budget:
        return text
    truncated = text[:budget]
    last_period = truncated.rfind(".")
    if last_period >= min_offset:
        return truncated[:last_period + 1]
    return truncated + ELLIPSIS


def select_voice_id(voice_id: Optional[str], settings: Settings) -> str:
    """Caller voice, else the configured default, else the built-in voice."""
    return voice_id or settings.elevenlabs_voice_id or DEFAULT_VOICE_ID


class SpeechSynthesizer:
    """Client for the ElevenLabs text-to-speech endpoint."""

    def __init__(
        self,
        api_key: str,
        default_voice_id: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize speech synthesizer.

        Args:
            api_key: ElevenLabs API key
            default_voice_id: Voice used when the caller does not pick one
            session: Object with a requests-compatible ``post`` method
                (defaults to the ``requests`` module)
            timeout: Optional transport timeout in seconds
        """
        self.api_key = api_key
        self.default_voice_id = default_voice_id or DEFAULT_VOICE_ID
        self.timeout = timeout
        self._session = session if session is not None else requests

    def build_payload(self, text: str, language: str) -> dict:
        payload = {
            "text": truncate_for_speech(text),
            "voice_settings": dict(VOICE_SETTINGS),
        }
        if language == "de":
            payload["model_id"] = MULTILINGUAL_MODEL_ID
        return payload

    def synthesize(
        self,
        text: str,
        language: str = "en",
        voice_id: Optional[str] = None,
    ) -> SpeechResult:
        """
        Synthesize speech for text.

        Args:
            text: Non-empty text; truncated to the speech budget before sending
            language: 'en' or 'de'; German selects the multilingual model
            voice_id: Voice identifier (uses the default voice if None)

        Returns:
            SpeechResult with base64-encoded MP3 audio

        Raises:
            UpstreamServiceError: If the backend is unreachable or answers
                with a non-success status
        """
        voice = voice_id or self.default_voice_id
        payload = self.build_payload(text, language)
        logger.info(
            f"Requesting speech: voice={voice}, language={language}, "
            f"chars={len(payload['text'])} (input {len(text)})"
        )

        try:
            response = self._session.post(
                ELEVENLABS_TTS_URL.format(voice_id=quote(voice, safe="")),
                headers={
                    "xi-api-key": self.api_key,
                    "Content-Type": "application/json",
                    "Accept": AUDIO_MIME_TYPE,
                },
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"ElevenLabs request failed: {e}")
            raise UpstreamServiceError(
                "elevenlabs", 502, message=f"TTS request failed: {e}"
            ) from e

        if not response.ok:
            body = (response.text or "")[:MAX_ERROR_BODY_CHARS]
            logger.warning(f"ElevenLabs returned HTTP {response.status_code}: {body}")
            raise UpstreamServiceError(
                "elevenlabs",
                response.status_code,
                message=body or "TTS request failed.",
                body=body,
            )

        audio = base64.b64encode(response.content).decode("ascii")
        return SpeechResult(audio_base64=audio, mime_type=AUDIO_MIME_TYPE)


def synthesize_speech(
    text: Any,
    language: Any = "en",
    voice_id: Any = None,
    settings: Optional[Settings] = None,
    session: Optional[Any] = None,
) -> SpeechResult:
    """
    Validate a speech request and synthesize it.

    Input is checked before the credential, and both before any network
    call.

    Args:
        text: Text to speak (required, non-blank string)
        language: 'en' or 'de'; anything else is treated as 'en'
        voice_id: Optional voice identifier string
        settings: Settings snapshot (read from the environment if None)
        session: Optional requests-compatible session

    Returns:
        SpeechResult with base64-encoded MP3 audio

    Raises:
        ValidationError: If text is missing/blank or voice_id is not a plain
            identifier string
        NotConfiguredError: If ELEVENLABS_API_KEY is not set
        UpstreamServiceError: If the backend call fails
    """
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Text is required.", details={"field": "text"})
    if voice_id is not None and not isinstance(voice_id, str):
        raise ValidationError("voiceId must be a string.", details={"field": "voiceId"})
    # The id becomes a URL path segment sent with the server's key
    if voice_id and not VOICE_ID_PATTERN.fullmatch(voice_id):
        raise ValidationError(
            "voiceId may only contain letters, digits, '-' and '_'.",
            details={"field": "voiceId"}
        )

    if settings is None:
        settings = Settings.from_env()
    if not settings.speech_configured:
        raise NotConfiguredError("TTS generation", "ELEVENLABS_API_KEY")

    if language not in ("en", "de"):
        language = "en"

    synthesizer = SpeechSynthesizer(
        api_key=settings.elevenlabs_api_key,
        default_voice_id=select_voice_id(None, settings),
        session=session,
        timeout=settings.elevenlabs_timeout,
    )
    return synthesizer.synthesize(text, language=language, voice_id=voice_id or None)
