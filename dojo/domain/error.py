"""Domain layer errors.

Every error carries a machine-checkable ``code`` that the HTTP layer
returns next to the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class ValidationError(DomainError):
    """Malformed or missing input."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: object, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class InvalidReferenceError(DomainError):
    """Raised when a reference points at an entity in the wrong scope."""

    code = "invalid_reference"


class ConflictError(DomainError):
    """Store-level constraint violation not otherwise classified."""

    code = "conflict"
