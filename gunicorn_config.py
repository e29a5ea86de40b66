"""
Gunicorn configuration for production deployment.

Usage:
    gunicorn -c gunicorn_config.py app:app
"""

import os
import multiprocessing

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


def env_int(name: str, default: int, lower: int, upper: int) -> int:
    """Integer setting from the environment, rejected at startup if out of [lower, upper]."""
    raw = os.getenv(name, '').strip()
    if not raw:
        return default
    if not raw.lstrip('-').isdigit():
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    value = int(raw)
    if not lower <= value <= upper:
        raise ValueError(f"{name} must be between {lower} and {upper}, got {value}")
    return value


def env_choice(name: str, default: str, choices=None) -> str:
    """String setting from the environment, optionally one of a fixed set."""
    value = os.getenv(name, '').strip() or default
    if choices is not None and value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got '{value}'")
    return value


bind = env_choice('GUNICORN_BIND', f"0.0.0.0:{os.getenv('PORT', '5000')}")

# Each /api/generate or /api/tts request holds its worker for the whole
# upstream call but uses almost no CPU, so the default runs about two
# workers per core.
workers = env_int('GUNICORN_WORKERS', multiprocessing.cpu_count() * 2 + 1, 1, 64)
worker_class = 'sync'

# Neither the LLM SDK calls nor the ElevenLabs request (unless
# ELEVENLABS_TIMEOUT is set) carry their own deadline; this is the ceiling.
# A killed worker loses the request, so it sits well above a slow
# hosted-model response.
timeout = env_int('GUNICORN_TIMEOUT', 90, 10, 600)
graceful_timeout = 30
keepalive = 5

accesslog = env_choice('GUNICORN_ACCESS_LOG', '-')
errorlog = env_choice('GUNICORN_ERROR_LOG', '-')
loglevel = env_choice('GUNICORN_LOG_LEVEL', 'info', LOG_LEVELS)

proc_name = 'scenario2050'

# The app holds no per-process state beyond the imported axis tables, so
# loading it once before forking is safe.
preload_app = True
