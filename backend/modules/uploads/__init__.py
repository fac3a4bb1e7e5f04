"""
Uploads module.

Relays client files to the ShareMyImage image host through a scratch
file that never outlives the request.

Public API:
- UploadService: Streams, size-checks and forwards an upload
- ImageHostClient / IImageHost: Image host client
- Upload exceptions: NoFileUploadedError, FileTooLargeError, UploadRelayError
"""

from .client import IImageHost, ImageHostClient
from .service import UploadService
from .models import ImageHostResponse, ResponseFormat, UploadOptions, UploadResponse
from .exceptions import (
    UploadError,
    NoFileUploadedError,
    FileTooLargeError,
    UploadRelayError,
)

__all__ = [
    "IImageHost",
    "ImageHostClient",
    "UploadService",
    "ImageHostResponse",
    "ResponseFormat",
    "UploadOptions",
    "UploadResponse",
    "UploadError",
    "NoFileUploadedError",
    "FileTooLargeError",
    "UploadRelayError",
]
