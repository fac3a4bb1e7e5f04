"""
Posts module.

Public API:
- IPostService: Interface for post operations
- Post, CreatePostRequest: Models
"""

from .models import CreatePostRequest, Post
from .service import IPostService
from .exceptions import AuthorNotFoundError

__all__ = [
    "IPostService",
    "CreatePostRequest",
    "Post",
    "AuthorNotFoundError",
]
