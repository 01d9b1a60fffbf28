"""Get current user use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import JWTService, UserService
from inkwell.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        with logfire.span("get_current_user.execute"):
            # Raises JWTError if invalid
            payload = self.jwt_service.verify_token(request.token)

            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))

            return GetCurrentUserResponse(
                user_id=str(user.id),
                name=user.name,
                email=user.email,
                created_at=user.created_at,
            )
