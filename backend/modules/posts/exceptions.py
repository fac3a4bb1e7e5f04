"""
Posts module exceptions.
"""

from shared.exceptions import NotFoundError


class AuthorNotFoundError(NotFoundError):
    """Raised when a post's author does not resolve to an existing user."""

    def __init__(self, author_id: str):
        super().__init__(
            "Author not found",
            code="AUTHOR_NOT_FOUND",
            details={"author_id": author_id},
        )
