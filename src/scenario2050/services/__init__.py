"""
Service layer for the scenario application.

Services hold the request logic behind the HTTP routes and the CLI:
- narrative_service: provider dispatch with mock fallback
- speech_service: speech synthesis with text truncation
"""

from .narrative_service import NarrativeService, generate_narrative
from .speech_service import SpeechSynthesizer, synthesize_speech, truncate_for_speech

__all__ = [
    'NarrativeService',
    'generate_narrative',
    'SpeechSynthesizer',
    'synthesize_speech',
    'truncate_for_speech',
]
