"""
Post repository for database access.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Post


class PostRepository(BaseRepository[Post]):
    """Repository for the `posts` table."""

    table_name = "posts"

    def create(self, data: dict[str, Any]) -> Post:
        result = self._table().insert(data).execute()
        return self._map_to_post(result.data[0])

    @staticmethod
    def _map_to_post(data: dict[str, Any]) -> Post:
        return Post(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            author_id=str(data["author_id"]),
            published=bool(data.get("published", False)),
            created_at=data.get("created_at"),
        )
