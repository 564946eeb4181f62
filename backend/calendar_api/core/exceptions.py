"""
Custom exception classes for unified error handling.
"""

from fastapi import HTTPException


class AppBaseError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class EventNotFoundError(AppBaseError):
    """Raised when no calendar event exists for the requested id."""
    def __init__(self, event_id: int):
        super().__init__(
            message="Event not found",
            detail=f"No calendar event with id {event_id}.",
        )


class EventValidationError(AppBaseError):
    """Raised for malformed event payloads or query parameters."""
    def __init__(self, message: str = "Invalid request", detail: str | None = None):
        super().__init__(message=message, detail=detail)


class ConfigLoadError(AppBaseError):
    """Raised when the config options file cannot be read or parsed.

    Never reaches the client: the config service masks it with defaults.
    """
    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Error loading config options from '{path}'",
            detail=reason,
        )


# ── Utility: convert to HTTPException ────────────────────

def app_error_to_http(error: AppBaseError, status_code: int = 400) -> HTTPException:
    """Convert an AppBaseError to an HTTPException with consistent JSON body."""
    return HTTPException(
        status_code=status_code,
        detail={
            "error": error.message,
            "detail": error.detail,
            "type": type(error).__name__,
        },
    )
