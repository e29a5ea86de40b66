"""Flask web app for the 2050 scenario narrator."""

# Load environment variables from .env file before other imports
from dotenv import load_dotenv  # type: ignore[import-untyped]

load_dotenv()  # noqa: E402

import os  # noqa: E402
import logging  # noqa: E402
from scenario2050.api import create_app  # noqa: E402
from scenario2050.config import Settings  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO if os.getenv('FLASK_ENV') != 'development' else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = create_app()


def log_provider_setup():
    """
    Log which backends are configured.

    Missing keys are not an error: narratives fall back to the mock
    provider and speech synthesis reports itself as not configured.
    """
    settings = Settings.from_env()
    for provider in ("openai", "gemini"):
        if settings.provider_available(provider):
            logger.info(f"Narrative provider '{provider}' configured")
        else:
            logger.info(f"Narrative provider '{provider}' not configured; requests fall back to mock")
    if settings.speech_configured:
        logger.info("Speech synthesis configured")
    else:
        logger.info("ELEVENLABS_API_KEY not set; /api/tts will answer 501")


log_provider_setup()


if __name__ == '__main__':
    debug_mode = os.getenv('FLASK_ENV') == 'development'
    port = int(os.getenv('PORT', 5000))
    host = os.getenv('HOST', '0.0.0.0')

    app.run(debug=debug_mode, host=host, port=port)
