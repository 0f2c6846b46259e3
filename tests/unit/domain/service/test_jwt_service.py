"""Unit tests for JWTService."""

import pytest

from dojo.config import AuthSettings
from dojo.domain.service import JWTService
from dojo.domain.value import UserRole
from dojo.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="unit-test-secret-at-least-32-bytes-long"))


class TestJWTService:
    """Tests for token round trips and failure handling."""

    def test_verify_created_token(self, jwt_service):
        token = jwt_service.create_token(7, "Aiko", UserRole.INSTRUCTOR)

        payload = jwt_service.verify_token(token)

        assert payload.user_id == 7
        assert payload.name == "Aiko"
        assert payload.user_role is UserRole.INSTRUCTOR

    def test_wrong_secret_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-test-secret-at-least-32-bytes"))
        token = other.create_token(7, "Aiko", UserRole.STUDENT)

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_expired_token_rejected(self):
        service = JWTService(AuthSettings(jwt_secret="unit-test-secret-at-least-32-bytes-long", jwt_expiry_days=-1))
        token = service.create_token(7, "Aiko", UserRole.STUDENT)

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_payload_from_missing_or_bad_token(self, jwt_service):
        assert jwt_service.get_payload_from_token(None) is None
        assert jwt_service.get_payload_from_token("") is None
        assert jwt_service.get_payload_from_token("not-a-jwt") is None


class TestUserRole:
    """Tests for role parsing."""

    def test_user_is_student_alias(self):
        assert UserRole.parse("user") is UserRole.STUDENT
        assert UserRole.parse(" Admin ") is UserRole.ADMIN

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            UserRole.parse("guest")
