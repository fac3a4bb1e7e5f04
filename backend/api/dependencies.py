"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Process-wide resources (the Supabase client, the token codec, the
realtime hub) are built in startup() and released in shutdown(), which
the application lifespan calls.
"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAccountService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenCodec
    from modules.notifications.hub import NotificationHub
    from modules.notifications.interfaces import INotificationService
    from modules.posts.service import IPostService
    from modules.uploads.service import UploadService
    from shared.email import IEmailSender

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as
    singletons within the container. Use reset() to clear them.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._db: "Client | None" = None
        self._token_codec: "TokenCodec | None" = None
        self._hasher: "PasswordHasher | None" = None
        self._email: "IEmailSender | None" = None
        self._user_repository: "UserRepository | None" = None
        self._account_service: "IAccountService | None" = None
        self._post_service: "IPostService | None" = None
        self._notification_hub: "NotificationHub | None" = None
        self._notification_service: "INotificationService | None" = None
        self._upload_service: "UploadService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def token_codec(self) -> "TokenCodec":
        """Get the token codec. Fails if JWT_SECRET is unset."""
        if self._token_codec is None:
            from modules.auth.tokens import TokenCodec
            self._token_codec = TokenCodec(
                self.settings.jwt_secret,
                expires_in=timedelta(minutes=self.settings.jwt_expires_minutes),
            )
        return self._token_codec

    @property
    def hasher(self) -> "PasswordHasher":
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._hasher

    @property
    def email(self) -> "IEmailSender":
        if self._email is None:
            from shared.email import EmailService
            self._email = EmailService(self.settings)
        return self._email

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.auth.service import AccountService
            self._account_service = AccountService(
                repository=self.user_repository,
                hasher=self.hasher,
                codec=self.token_codec,
                email=self.email,
                app_url=self.settings.app_url,
            )
        return self._account_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.repository import PostRepository
            from modules.posts.service import PostService
            self._post_service = PostService(
                repository=PostRepository(self.db),
                users=self.user_repository,
            )
        return self._post_service

    @property
    def notification_hub(self) -> "NotificationHub":
        if self._notification_hub is None:
            from modules.notifications.hub import NotificationHub
            self._notification_hub = NotificationHub()
        return self._notification_hub

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.repository import NotificationRepository
            from modules.notifications.service import NotificationService
            self._notification_service = NotificationService(
                repository=NotificationRepository(self.db),
                users=self.user_repository,
                channel=self.notification_hub,
                email=self.email,
                max_page_size=self.settings.notification_max_page_size,
            )
        return self._notification_service

    @property
    def uploads(self) -> "UploadService":
        """Get the upload relay service instance."""
        if self._upload_service is None:
            from modules.uploads.client import ImageHostClient
            from modules.uploads.service import UploadService
            host = ImageHostClient(
                api_key=self.settings.sharemyimage_api_key,
                api_url=self.settings.sharemyimage_api_url,
                timeout=self.settings.upload_timeout_seconds,
            )
            self._upload_service = UploadService(
                host=host,
                upload_dir=Path(self.settings.upload_dir),
                max_size=self.settings.max_upload_size,
            )
        return self._upload_service

    def startup(self) -> None:
        """
        Build the process-wide resources.

        Raises:
            ConfigurationError: If JWT_SECRET is unset
            RuntimeError: If Supabase is not configured
        """
        self.token_codec
        self.db
        logger.info("Service container started")

    def shutdown(self) -> None:
        """Release process-wide resources."""
        from shared.database import reset_client_cache
        self.reset()
        reset_client_cache()
        logger.info("Service container stopped")

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._token_codec = None
        self._hasher = None
        self._email = None
        self._user_repository = None
        self._account_service = None
        self._post_service = None
        self._notification_hub = None
        self._notification_service = None
        self._upload_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_codec() -> "TokenCodec":
    """FastAPI dependency for the token codec."""
    return get_container().token_codec


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for notification service."""
    return get_container().notifications


def get_notification_hub() -> "NotificationHub":
    """FastAPI dependency for the realtime hub."""
    return get_container().notification_hub


def get_upload_service() -> "UploadService":
    """FastAPI dependency for upload relay service."""
    return get_container().uploads
