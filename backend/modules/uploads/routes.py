"""
Upload API endpoint.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import FormData, UploadFile

from api.middleware.auth import get_current_user
from api.dependencies import get_upload_service
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .models import UploadOptions, UploadResponse
from .service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter()


def first_file(form: FormData) -> Optional[UploadFile]:
    """The first file part of the form, whatever its field name."""
    for _, value in form.multi_items():
        if isinstance(value, UploadFile):
            return value
    return None


def parse_options(form: FormData) -> UploadOptions:
    fields = {
        key: value
        for key, value in form.multi_items()
        if isinstance(value, str) and value != "" and key in UploadOptions.model_fields
    }
    try:
        return UploadOptions.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError(
            "Validation error",
            errors=[
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ],
        )


@router.post("", response_model=UploadResponse)
async def upload_file(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """
    Relay a file to ShareMyImage.

    Accepts multipart/form-data; the first file part is uploaded and the
    remaining text fields are passed along as image options.
    """
    async with request.form() as form:
        source = first_file(form)
        options = parse_options(form)
        logger.info(f"User {user.id} uploading {source.filename if source else 'nothing'}")
        result = await service.relay(source, options)

    return UploadResponse(
        message="File uploaded successfully",
        response=result.model_dump(exclude_none=True),
    )
