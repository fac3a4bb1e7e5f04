"""
ShareMyImage API client.

Posts a file from disk to the image host and translates every failure
into UploadRelayError with the status the API should answer with.
"""

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError as PydanticValidationError

from shared.error_tracking import get_tracer

from .exceptions import UploadRelayError
from .models import ImageHostResponse, UploadOptions

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

API_KEY_PREFIX = "chv_"
DEFAULT_TIMEOUT_SECONDS = 120.0


@runtime_checkable
class IImageHost(Protocol):
    """Interface for the external image host."""

    async def upload(self, file_path: Path, options: UploadOptions) -> ImageHostResponse:
        """
        Upload a file.

        Raises:
            UploadRelayError: On any relay failure
        """
        ...


def mask_api_key(api_key: str) -> str:
    """Keep only the first and last four characters for logging."""
    if len(api_key) <= 8:
        return "****"
    return f"{api_key[:4]}****{api_key[-4:]}"


class ImageHostClient(IImageHost):
    """httpx implementation of IImageHost."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key) and self._api_key.startswith(API_KEY_PREFIX)

    async def upload(self, file_path: Path, options: UploadOptions) -> ImageHostResponse:
        if not self.is_configured:
            logger.error("SHAREMYIMAGE_API_KEY is missing or malformed")
            raise UploadRelayError(
                "API key configuration error. Please contact the administrator.",
                status_code=500,
                code="UPLOAD_NOT_CONFIGURED",
            )

        mime_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        logger.info(
            f"Uploading {file_path.name} ({mime_type}) to image host "
            f"with key {mask_api_key(self._api_key)}"
        )

        with tracer.start_as_current_span("sharemyimage.upload"):
            with file_path.open("rb") as source:
                response = await self._post(
                    files={"source": (file_path.name, source, mime_type)},
                    data=options.to_form_fields(),
                )
        return self._parse(response)

    async def _post(self, files: dict, data: dict[str, str]) -> httpx.Response:
        headers = {"X-API-Key": self._api_key}
        try:
            if self._client is not None:
                return await self._client.post(
                    self._api_url, files=files, data=data, headers=headers, timeout=self._timeout
                )
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.post(self._api_url, files=files, data=data, headers=headers)
        except httpx.TimeoutException as e:
            logger.warning(f"Image host timed out after {self._timeout}s: {e}")
            raise UploadRelayError(
                "Upload to image host timed out", status_code=504, code="UPLOAD_TIMEOUT"
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"No response from image host: {e}")
            raise UploadRelayError(
                "No response received from image host", status_code=500, code="UPLOAD_NO_RESPONSE"
            ) from e

    @staticmethod
    def _parse(response: httpx.Response) -> ImageHostResponse:
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            upstream = None
            if isinstance(body, dict):
                error = body.get("error")
                upstream = error.get("message") if isinstance(error, dict) else error
            raise UploadRelayError(
                f"Upload error: {upstream or response.reason_phrase}",
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise UploadRelayError("Upload error: image host returned an unreadable reply")

        try:
            result = ImageHostResponse.model_validate(body)
        except PydanticValidationError as e:
            logger.warning(f"Unreadable image host reply: {e}")
            raise UploadRelayError(
                "Upload error: image host returned an unreadable reply"
            ) from e

        if result.status_code != 200:
            raise UploadRelayError(
                f"Upload failed: {result.status_txt}",
                status_code=result.status_code,
            )
        return result
