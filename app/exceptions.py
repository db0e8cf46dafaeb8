# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure reaches the client as {"error": "<message>", "code": "..."};
# causes are logged server-side and never echoed back, except for upload
# failures where the media host's reason is appended to the message.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TheBenException(Exception):
    """
    Base exception for The Ben API.

    All custom exceptions inherit from this class.
    Provides structured error responses with optional suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "THEBEN_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result


# =============================================================================
# Document Exceptions
# =============================================================================

class InvalidIdentifierError(TheBenException):
    """Raised when a path identifier is not a valid document id."""

    def __init__(self, entity: str, value: str):
        super().__init__(
            message=f"Invalid {entity} ID",
            code="INVALID_ID",
            status_code=400,
            suggestion="Document ids are UUIDs as returned by the list endpoint",
            details={"entity": entity, "id": value}
        )


class DocumentNotFoundError(TheBenException):
    """Raised when a well-formed id matches no document."""

    def __init__(self, entity: str, document_id: str):
        super().__init__(
            message=f"{entity.capitalize()} not found",
            code="NOT_FOUND",
            status_code=404,
            details={"entity": entity, "id": document_id}
        )


class OperationFailedError(TheBenException):
    """Raised when the database rejects or fails an operation."""

    def __init__(self, message: str, error: str | None = None):
        super().__init__(
            message=message,
            code="OPERATION_FAILED",
            status_code=500,
            details={"error": error} if error else None
        )


# =============================================================================
# Video Source Exceptions
# =============================================================================

class VideoSourceRequiredError(TheBenException):
    """Raised when neither a usable YouTube reference nor a hosted file is given."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="VIDEO_SOURCE_REQUIRED",
            status_code=400,
            suggestion="Send videoId, a YouTube youtubeUrl, or a videoUrl from the upload endpoint"
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class NoFileUploadedError(TheBenException):
    """Raised when a multipart upload carries no file."""

    def __init__(self, field: str):
        super().__init__(
            message="No file uploaded",
            code="NO_FILE",
            status_code=400,
            suggestion=f"Send the file in the '{field}' form field",
            details={"field": field}
        )


class InvalidFileTypeError(TheBenException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message="Only image and video files are allowed!",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(TheBenException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class StorageUploadError(TheBenException):
    """Raised when file upload to storage fails."""

    def __init__(self, resource_type: str, error: str):
        super().__init__(
            message=f"Failed to upload {resource_type}: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def theben_exception_handler(
    request: Request,
    exc: TheBenException
) -> JSONResponse:
    """Convert TheBenException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body / parameter validation errors.

    Lists each offending field so the admin UI can highlight it.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
