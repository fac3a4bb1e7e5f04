"""
Post service implementation.
"""

import logging
from typing import Protocol, runtime_checkable

from modules.auth.repository import UserRepository

from .exceptions import AuthorNotFoundError
from .models import CreatePostRequest, Post
from .repository import PostRepository

logger = logging.getLogger(__name__)


@runtime_checkable
class IPostService(Protocol):
    """Interface for post operations."""

    async def create_post(self, author_id: str, request: CreatePostRequest) -> Post:
        """
        Create a post owned by author_id.

        Raises:
            AuthorNotFoundError: If the author no longer exists
        """
        ...


class PostService(IPostService):
    """Post service with Supabase backend."""

    def __init__(self, repository: PostRepository, users: UserRepository):
        self._posts = repository
        self._users = users

    async def create_post(self, author_id: str, request: CreatePostRequest) -> Post:
        # Tokens outlive account deletion, so the author may be gone.
        if self._users.get_by_id(author_id) is None:
            raise AuthorNotFoundError(author_id)

        post = self._posts.create({
            "title": request.title,
            "content": request.content,
            "author_id": author_id,
            "published": request.published,
        })
        logger.info(f"User {author_id} created post {post.id}")
        return post
