"""
Uploads module exceptions.

Every upload failure carries the HTTP status it should be answered with.
"""

from typing import Any, Optional

from shared.exceptions import AppError


class UploadError(AppError):
    """Base exception for upload failures."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)
        self.status_code = status_code


class NoFileUploadedError(UploadError):
    """Raised when a multipart request carries no file part."""

    def __init__(self):
        super().__init__("No file uploaded", status_code=400, code="NO_FILE_UPLOADED")


class FileTooLargeError(UploadError):
    """Raised when the received bytes exceed the configured limit."""

    def __init__(self, limit: int):
        super().__init__(
            "File size exceeds the maximum limit",
            status_code=400,
            code="FILE_TOO_LARGE",
            details={"limit_bytes": limit},
        )


class UploadRelayError(UploadError):
    """Raised when forwarding the file to the image host fails."""

    def __init__(self, message: str, status_code: int = 500, code: str = "UPLOAD_RELAY_FAILED"):
        super().__init__(message, status_code=status_code, code=code)
