"""Tests for the account service interface."""

from unittest.mock import MagicMock, AsyncMock

from modules.auth.interfaces import IAccountService
from modules.auth.service import AccountService


class TestAccountInterface:
    def test_interface_methods_exist(self):
        """IAccountService should define every account operation."""
        methods = [
            "register",
            "authenticate",
            "get_all",
            "get_one",
            "update",
            "delete",
            "reset_password",
            "complete_password_reset",
            "verify_email",
        ]
        for method in methods:
            assert hasattr(IAccountService, method)
            assert callable(getattr(AccountService, method))

    def test_service_satisfies_protocol(self, codec, hasher):
        service = AccountService(
            repository=MagicMock(),
            hasher=hasher,
            codec=codec,
            email=AsyncMock(),
            app_url="http://localhost:5173",
        )
        assert isinstance(service, IAccountService)
