"""Domain value objects for the academy."""

from enum import Enum

from pydantic import field_validator

from dojo.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Account roles.

    ``user`` is accepted as an alias of ``student`` because the student
    mobile app requests tokens with that scope name.
    """

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """Parse a role name, mapping the ``user`` alias to student."""
        normalized = value.strip().lower()
        if normalized == "user":
            return cls.STUDENT
        return cls(normalized)


class DisplayName(RootValueObject[str]):
    """Human-readable name shown next to comments."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Name must be 1-255 characters")
        return v
