"""
Posts module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request to create a post. The author is the authenticated caller."""

    title: str = Field(..., min_length=5, max_length=255)
    content: str = Field(..., min_length=10)
    published: bool = Field(default=False)


class Post(BaseModel):
    """A post as stored in the database."""

    id: str = Field(..., description="Post ID (UUID)")
    title: str
    content: str
    author_id: str = Field(..., description="ID of the user who wrote the post")
    published: bool = False
    created_at: Optional[datetime] = None
