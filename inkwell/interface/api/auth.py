"""Authentication helpers for routes.

The token is read from the ``auth_token`` cookie, or from an
``Authorization: Bearer <token>`` header when no cookie is sent.
"""

from typing import Optional

import logfire
from fastapi import HTTPException, status

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.util.jwt import JWTError


def extract_token(
    auth_token: Optional[str], authorization: Optional[str]
) -> Optional[str]:
    """Pick the JWT from the cookie or the bearer header."""
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None


async def require_user(
    use_case: GetCurrentUserUseCase,
    auth_token: Optional[str],
    authorization: Optional[str],
) -> GetCurrentUserResponse:
    """Resolve the authenticated user or fail with 401.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired, or
            names a user that no longer exists
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError:
        logfire.warn("Token for unknown user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


async def optional_user(
    use_case: GetCurrentUserUseCase,
    auth_token: Optional[str],
    authorization: Optional[str],
) -> Optional[GetCurrentUserResponse]:
    """Resolve the authenticated user, or None for anonymous callers.

    An invalid token is treated as unauthenticated.
    """
    if not extract_token(auth_token, authorization):
        return None
    try:
        return await require_user(use_case, auth_token, authorization)
    except HTTPException:
        return None
