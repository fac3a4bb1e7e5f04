"""
Uploads module data models.

UploadOptions are forwarded verbatim to ShareMyImage; ImageHostResponse
mirrors the fields of its JSON reply that callers commonly read and
keeps everything else as extra fields.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ResponseFormat(str, Enum):
    """Reply format requested from the image host."""

    JSON = "json"
    REDIRECT = "redirect"
    TXT = "txt"


class UploadOptions(BaseModel):
    """Metadata sent along with the file."""

    title: Optional[str] = None
    description: Optional[str] = None
    album_id: Optional[str] = None
    category_id: Optional[int] = None
    width: Optional[int] = Field(None, ge=1)
    expiration: Optional[str] = None
    nsfw: Optional[int] = Field(None, ge=0, le=1)
    format: ResponseFormat = ResponseFormat.JSON

    def to_form_fields(self) -> dict[str, str]:
        """Non-empty options as multipart form fields."""
        fields = {}
        for key, value in self.model_dump(exclude_none=True).items():
            fields[key] = value.value if isinstance(value, Enum) else str(value)
        return fields


class ImageHostStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str = ""
    code: Optional[int] = None


class ImageHostImage(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    extension: Optional[str] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    mime: Optional[str] = None
    url: Optional[str] = None
    url_viewer: Optional[str] = None
    display_url: Optional[str] = None


class ImageHostResponse(BaseModel):
    """Reply from the ShareMyImage upload API."""

    model_config = ConfigDict(extra="allow")

    status_code: int
    status_txt: str = ""
    success: Optional[ImageHostStatus] = None
    error: Optional[ImageHostStatus] = None
    image: Optional[ImageHostImage] = None


class UploadResponse(BaseModel):
    """Response of POST /upload."""

    message: str
    response: dict[str, Any]
