"""Tests for the post service and repository."""

import pytest
from unittest.mock import MagicMock

from modules.posts.exceptions import AuthorNotFoundError
from modules.posts.models import CreatePostRequest, Post
from modules.posts.repository import PostRepository
from modules.posts.service import IPostService, PostService

from tests.conftest import InMemoryUserRepository, make_user


def create_mock_post_data(**overrides) -> dict:
    data = {
        "id": "post-1",
        "title": "Hello world",
        "content": "First post content",
        "author_id": "test-user-123",
        "published": False,
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return data


class TestPostRepository:
    def test_create(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_post_data(published=True)
        ]

        post = PostRepository(mock_db).create({"title": "Hello world"})

        assert isinstance(post, Post)
        assert post.published is True
        mock_db.table.assert_called_once_with("posts")


class TestPostService:
    def test_implements_interface(self):
        assert isinstance(PostService(MagicMock(), MagicMock()), IPostService)

    @pytest.mark.asyncio
    async def test_creates_post_for_author(self):
        posts = MagicMock()
        posts.create.return_value = Post(**create_mock_post_data())
        users = InMemoryUserRepository([make_user()])
        service = PostService(posts, users)

        post = await service.create_post(
            "test-user-123",
            CreatePostRequest(title="Hello world", content="First post content"),
        )

        assert post.author_id == "test-user-123"
        posts.create.assert_called_once_with({
            "title": "Hello world",
            "content": "First post content",
            "author_id": "test-user-123",
            "published": False,
        })

    @pytest.mark.asyncio
    async def test_deleted_author(self):
        posts = MagicMock()
        service = PostService(posts, InMemoryUserRepository())

        with pytest.raises(AuthorNotFoundError):
            await service.create_post(
                "gone", CreatePostRequest(title="Hello world", content="First post content")
            )
        posts.create.assert_not_called()
