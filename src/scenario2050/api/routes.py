"""
Flask route handlers for the scenario API.

Each handler is a single request/response exchange: settings are read from
the environment per request and nothing is shared between calls.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flask import Flask

from flask import current_app, jsonify, request

from scenario2050.axes import AXES, LANGUAGE_LABELS, LANGUAGES, PROVIDERS
from scenario2050.config import Settings
from scenario2050.normalizer import normalize_config
from scenario2050.services import NarrativeService, synthesize_speech
from scenario2050.share import apply_query_to_config, config_to_query, default_config
from scenario2050.utils.errors import ValidationError

logger = logging.getLogger(__name__)


def get_narrative_service() -> NarrativeService:
    """Get the narrative service registered on the current app."""
    return current_app.extensions["narrative_service"]


def register_routes(flask_app: 'Flask') -> None:
    """
    Register all application routes.

    Args:
        flask_app: Flask application instance
    """

    @flask_app.route('/api/health')
    def health():
        """
        Health check endpoint.

        Returns:
            JSON response with status "ok" indicating the service is running
        """
        return jsonify({"status": "ok"})

    @flask_app.route('/api/axes', methods=['GET'])
    def get_axes():
        """
        Get the axis table.

        Query Parameters:
            - language (str, optional): 'en' or 'de' to resolve strings to one
              language; omitted returns both

        Returns:
            JSON response with axes, languages and providers
        """
        language = request.args.get('language')
        if language is not None and language not in LANGUAGES:
            raise ValidationError(
                f"Unsupported language: {language}. Supported languages: {', '.join(LANGUAGES)}",
                details={"field": "language", "supported": list(LANGUAGES)}
            )
        return jsonify({
            "axes": [axis.to_dict(language) for axis in AXES],
            "languages": LANGUAGE_LABELS,
            "providers": list(PROVIDERS),
        })

    @flask_app.route('/api/defaults', methods=['GET'])
    def get_defaults():
        """
        Get the default scenario.

        The provider defaults to the first hosted backend with a configured
        key, otherwise to the mock.
        """
        settings = Settings.from_env()
        return jsonify({
            "config": default_config(settings).to_payload(),
            "availableProviders": settings.available_providers(),
        })

    @flask_app.route('/api/scenario', methods=['GET'])
    def get_scenario():
        """
        Resolve a share-link query string into a normalized scenario.

        Query parameters override the defaults; invalid values are ignored
        and out-of-range numbers are clamped.

        Returns:
            JSON response with the normalized config and its canonical query
        """
        config = apply_query_to_config(request.args, default_config())
        return jsonify({
            "config": config.to_payload(),
            "query": config_to_query(config),
        })

    @flask_app.route('/api/generate', methods=['POST'])
    def generate_narrative():
        """
        Generate a 2050 narrative from a raw scenario configuration.

        Request Body (JSON):
            Scenario configuration; every field is optional and normalized

        Returns:
            Always HTTP 200 with ``{"text": str}``, plus ``"warning"`` when
            the selected backend failed and the mock narrative was used
        """
        data = request.get_json(silent=True)
        config = normalize_config(data)
        result = get_narrative_service().generate(config)
        if result.fallback:
            logger.warning(f"Narrative served from fallback: {result.warning}")
        else:
            logger.info(f"Narrative generated by {result.provider} ({config.language})")
        return jsonify(result.to_response())

    @flask_app.route('/api/tts', methods=['POST'])
    def text_to_speech():
        """
        Synthesize speech for a narrative.

        Request Body (JSON):
            - text (str, required): Text to speak (truncated to 1500 characters)
            - language (str, optional): 'en' or 'de'
            - voiceId (str, optional): Voice identifier

        Returns:
            JSON response ``{"audioBase64": str, "mimeType": "audio/mpeg"}``

        Raises:
            ValidationError: If text is missing or blank (400)
            NotConfiguredError: If ELEVENLABS_API_KEY is not set (501)
            UpstreamServiceError: If the speech backend fails (backend status)
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError(
                "Request body must be a JSON object.",
                details={"field": "body"}
            )
        result = synthesize_speech(
            data.get('text'),
            language=data.get('language', 'en'),
            voice_id=data.get('voiceId'),
        )
        return jsonify(result.to_response())
