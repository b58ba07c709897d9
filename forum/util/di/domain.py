"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, ForumSettings
from forum.domain.service import (
    Clock,
    IdGenerator,
    JWTService,
    OwnershipPolicy,
    SystemClock,
    UuidIdGenerator,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are stateless and APP-scoped so that APP-scoped
    repositories can depend on the ID and time capabilities.
    """

    scope = Scope.APP

    @provide
    def get_id_generator(self, forum_settings: ForumSettings) -> IdGenerator:
        """Provide identifier generator."""
        return UuidIdGenerator(length=forum_settings.id_length)

    @provide
    def get_clock(self) -> Clock:
        """Provide wall clock."""
        return SystemClock()

    @provide
    def get_ownership_policy(self) -> OwnershipPolicy:
        """Provide ownership authorization policy."""
        return OwnershipPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)
