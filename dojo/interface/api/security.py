"""Request authentication helpers for API routes.

Tokens come from the ``Authorization: Bearer`` header or the ``auth_token``
cookie, header first.
"""

import logfire
from fastapi import HTTPException, status

from dojo.config import CommentSettings
from dojo.domain.service import JWTService
from dojo.util.jwt import TokenPayload


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token from the header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


def require_commenter(
    jwt_service: JWTService,
    settings: CommentSettings,
    authorization: str | None,
    auth_token: str | None,
) -> TokenPayload:
    """Authenticate the caller and check they may comment and like.

    Raises:
        HTTPException: 401 without a valid token, 403 for a disallowed role
    """
    payload = jwt_service.get_payload_from_token(
        extract_token(authorization, auth_token)
    )
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    role = payload.user_role
    if role is None or role.value not in settings.allowed_roles:
        logfire.warn(
            "Role not allowed to comment", user_id=payload.user_id, role=payload.role
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized access. Required role: "
            + ", ".join(settings.allowed_roles),
        )

    return payload


def optional_viewer(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> TokenPayload | None:
    """Payload of the caller if they sent a valid token, otherwise None."""
    return jwt_service.get_payload_from_token(extract_token(authorization, auth_token))
