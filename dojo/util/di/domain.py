"""Domain layer DI providers."""

from dishka import Scope, provide

from dojo.config import AuthSettings
from dojo.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from dojo.domain.service import (
    CommentService,
    EventService,
    JWTService,
    UserService,
)
from dojo.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_event_service(self, event_repository: EventRepository) -> EventService:
        """Provide event domain service."""
        return EventService(event_repository=event_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        event_service: EventService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            event_service=event_service,
        )
