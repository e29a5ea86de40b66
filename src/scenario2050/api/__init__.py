"""
Flask application factory for the scenario API.
"""

import os
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS  # type: ignore[import-untyped]

from scenario2050.api.routes import register_routes
from scenario2050.services import NarrativeService
from scenario2050.utils.errors import register_error_handlers


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    narrative_service: Optional[NarrativeService] = None,
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Extra Flask config values (e.g. ``{"TESTING": True}``)
        narrative_service: Service used by /api/generate (a default
            NarrativeService reading the environment per request if None)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.json.ensure_ascii = False
    if config:
        app.config.update(config)

    CORS(app)
    app.extensions["narrative_service"] = narrative_service or NarrativeService()

    debug = app.config.get("DEBUG") or os.getenv('FLASK_ENV') == 'development'
    register_error_handlers(app, debug=bool(debug))
    register_routes(app)
    return app


__all__ = ["create_app", "register_routes"]
