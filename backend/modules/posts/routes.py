"""
Post API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_post_service
from shared.models import AuthenticatedUser

from .models import CreatePostRequest, Post
from .service import IPostService

router = APIRouter()


@router.post("", response_model=Post, status_code=201)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """
    Create a post.

    The authenticated caller becomes the author.
    """
    return await service.create_post(user.id, request)
