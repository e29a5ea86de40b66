"""
Error handling utilities for the scenario API.

Provides structured error responses and custom exception classes.
"""

import logging
import traceback
from typing import Optional, Dict, Any
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize API error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            status_code: HTTP status code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}


class ValidationError(APIError):
    """Raised when input validation fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class NotFoundError(APIError):
    """Raised when a resource is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            message=f"{resource_type} '{resource_id}' not found.",
            error_code="NOT_FOUND",
            status_code=404,
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class NotConfiguredError(APIError):
    """Raised when a feature needs a credential that is not configured."""

    def __init__(self, service: str, env_var: str):
        super().__init__(
            message=f"Missing {env_var} for {service}.",
            error_code="NOT_CONFIGURED",
            status_code=501,
            details={"service": service, "env_var": env_var}
        )


class UpstreamServiceError(APIError):
    """Raised when an external backend rejects a request or cannot be reached."""

    def __init__(
        self,
        service: str,
        status_code: int,
        message: Optional[str] = None,
        body: Optional[str] = None
    ):
        details: Dict[str, Any] = {"service": service, "status": status_code}
        if body:
            details["body"] = body
        super().__init__(
            message=message or f"Service '{service}' request failed.",
            error_code="UPSTREAM_ERROR",
            status_code=status_code,
            details=details
        )


def create_error_response(
    error: Exception,
    include_traceback: bool = False
) -> tuple:
    """
    Build the JSON error envelope for an exception.

    Client errors (4xx APIErrors) are logged as warnings. Anything else is
    logged with its traceback and, unless tracebacks are enabled, reported
    to the client as a generic internal error.

    Args:
        error: Exception instance
        include_traceback: Whether to include the traceback in the body

    Returns:
        Tuple of (json_response, status_code)
    """
    if isinstance(error, APIError):
        if error.status_code < 500:
            logger.warning(f"{request.method} {request.path} -> {error.status_code} {error.error_code}: {error.message}")
        else:
            logger.error(f"{request.method} {request.path} -> {error.status_code} {error.error_code}: {error.message}")
        body: Dict[str, Any] = {"error": error.message, "error_code": error.error_code}
        if error.details:
            body["details"] = error.details
        status_code = error.status_code
    else:
        logger.error(f"Unhandled {type(error).__name__} on {request.method} {request.path}: {error}", exc_info=True)
        message = str(error) if include_traceback else "An unexpected error occurred."
        body = {"error": message, "error_code": "INTERNAL_ERROR"}
        status_code = 500

    if include_traceback:
        body["traceback"] = traceback.format_exc()
    return jsonify(body), status_code


def register_error_handlers(app, debug: bool = False):
    """
    Register error handlers for the Flask app.

    Every error leaves the API as ``{"error", "error_code"[, "details"]}``.

    Args:
        app: Flask application instance
        debug: Whether to include tracebacks in error responses
    """
    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        return create_error_response(error, include_traceback=debug)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        """Routing errors (unknown path, wrong method, ...) in the same envelope."""
        if error.code == 404:
            api_error: APIError = NotFoundError("Endpoint", request.path)
        else:
            api_error = APIError(
                message=error.description or error.name,
                error_code=error.name.upper().replace(" ", "_"),
                status_code=error.code or 500,
            )
        return create_error_response(api_error, include_traceback=False)

    @app.errorhandler(Exception)
    def handle_generic_exception(error: Exception):
        return create_error_response(error, include_traceback=debug)
