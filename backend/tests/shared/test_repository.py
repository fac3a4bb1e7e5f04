"""Tests for shared/repository.py."""

from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_table_uses_table_name(self):
        """_table() should start a query on the subclass's table."""
        mock_db = MagicMock()

        class ThingRepository(BaseRepository[dict]):
            table_name = "things"

        ThingRepository(mock_db)._table()
        mock_db.table.assert_called_once_with("things")

    def test_first_returns_first_row(self):
        result = MagicMock()
        result.data = [{"id": "1"}, {"id": "2"}]
        assert BaseRepository._first(result) == {"id": "1"}

    def test_first_returns_none_when_empty(self):
        result = MagicMock()
        result.data = []
        assert BaseRepository._first(result) is None
