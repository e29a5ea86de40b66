"""
Utility modules for the scenario service.

Modules:
- errors: Structured API errors and Flask error handlers
"""

from .errors import (
    APIError,
    ValidationError,
    NotFoundError,
    NotConfiguredError,
    UpstreamServiceError,
    register_error_handlers,
)

__all__ = [
    "APIError",
    "ValidationError",
    "NotFoundError",
    "NotConfiguredError",
    "UpstreamServiceError",
    "register_error_handlers",
]
