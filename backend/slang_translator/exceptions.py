"""
Slang Translator Backend — Custom Exception Hierarchy
=======================================================

What:  Defines application-specific exceptions for the few error scenarios
       that cross a layer boundary.
Why:   The query and browse engines never raise; they degrade to empty results.
       Exceptions are reserved for the service boundary (bad request input,
       unknown term id) and for the document read inside the ingestor.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.

Exception Hierarchy:
    SlangTranslatorError (base)
    ├── ValidationError    → 400 Bad Request (client can fix)
    ├── NotFoundError      → 404 Not Found
    └── SourceReadError    → never reaches HTTP; the ingestor turns it into
                             a single ingestion error string

Note:
    A candidate record failing schema rules is NOT an exception. Those failures
    are collected as strings by the ingestor so a partially malformed document
    still yields every valid record.
"""

from typing import Any, Dict, Optional


class SlangTranslatorError(Exception):
    """
    Base exception for all Slang Translator application errors.

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


class ValidationError(SlangTranslatorError):
    """
    Raised when request parameters fail validation at the service boundary.

    When:    Blank search query, non-integer or non-positive page/limit.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Please enter a search term",
            "details": {"field": "q"}
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


class NotFoundError(SlangTranslatorError):
    """
    Raised when a requested term id does not exist in the catalog.

    When:    GET /api/term/{term_id} with an id no record carries.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class SourceReadError(SlangTranslatorError):
    """
    Raised when the source markdown document cannot be read.

    What:    Missing file, permission denied, directory instead of file,
             or bytes that are not valid UTF-8.
    When:    Inside the ingestor while loading the document at startup.

    Recovery:
        The ingestor catches this and reports it as its only error string.
        The process keeps serving with an empty catalog instead of crashing.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message=reason, context=ctx)
        self.path = path
        self.reason = reason
