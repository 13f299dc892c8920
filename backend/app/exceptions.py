"""
Promptopia Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error scenarios the API surfaces.
Why:   Each exception maps to one HTTP status and response shape, so routes
       never build error responses by hand.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the matching response.
Who:   Raised by services and the database connector; caught by global handlers.

Exception Hierarchy:
    PromptopiaError (base)
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── DatabaseError        → 500 Internal Server Error (JSON envelope)
    └── PromptFetchError     → 500 Internal Server Error (fixed plain-text body)
"""

from typing import Any, Dict, Optional


class PromptopiaError(Exception):
    """
    Base exception for all Promptopia application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PromptopiaError):
    """
    Raised when client input fails validation.

    When:    Malformed path parameters (e.g. a user id with illegal characters).
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "User id must be 1-64 characters of letters, digits, '_' or '-'",
            "details": {"field": "id"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(PromptopiaError):
    """
    Raised when the database cannot be reached or a query fails.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Driver errors, SQL and connection strings are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PromptFetchError(PromptopiaError):
    """
    Raised when listing a user's prompts fails for any reason.

    What:    Connection, query and serialization failures are flattened into
             this one kind; callers cannot (and need not) tell them apart.
    HTTP:    500 Internal Server Error, plain-text body FETCH_FAILED_MESSAGE
    """

    FETCH_FAILED_MESSAGE = "Failed to fetch prompts created by this user"

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=self.FETCH_FAILED_MESSAGE, context=context)
