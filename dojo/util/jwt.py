"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from dojo.config import AuthSettings
from dojo.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: int
    name: str
    role: str
    exp: datetime

    @property
    def user_role(self) -> UserRole | None:
        """Parsed role, or None for a role this API does not know."""
        try:
            return UserRole.parse(self.role)
        except ValueError:
            return None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: int, name: str, role: UserRole, settings: AuthSettings
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        name: Display name
        role: Account role
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "name": name,
        "role": role.value,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
