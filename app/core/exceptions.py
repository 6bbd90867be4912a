"""
Application error taxonomy.

Services raise these with a message key plus named arguments; the HTTP layer
renders the key through the localization catalogs. Nothing outside this set
reaches the client.
"""
from typing import Any, Dict


class AppError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500
    error = "internal_error"

    def __init__(self, message_key: str, **params: Any):
        self.message_key = message_key
        self.params: Dict[str, Any] = params
        super().__init__(f"{message_key} {params}" if params else message_key)


class InvalidArgument(AppError):
    """Malformed or out-of-range input"""
    status_code = 400
    error = "invalid_argument"


class Unauthorized(AppError):
    """Missing, invalid or expired credentials"""
    status_code = 401
    error = "unauthorized"


class NotFound(AppError):
    """Aggregate, translation or language-specific translation absent"""
    status_code = 404
    error = "not_found"


class Conflict(AppError):
    """Duplicate slug, translation language or username"""
    status_code = 409
    error = "conflict"


class Internal(AppError):
    """Unexpected failure; details stay in the server log"""
    status_code = 500
    error = "internal_error"

    def __init__(self, message_key: str = "INTERNAL_ERROR", **params: Any):
        super().__init__(message_key, **params)
