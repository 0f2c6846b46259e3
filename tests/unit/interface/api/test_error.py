"""Unit tests for domain error to HTTP status mapping."""

import pytest

from dojo.domain.error import (
    ConflictError,
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from dojo.interface.error import status_for


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (ValidationError("bad"), 422, "validation_error"),
        (NotFoundError("comment", 1), 404, "not_found"),
        (InvalidReferenceError("wrong event"), 422, "invalid_reference"),
        (ConflictError("busy"), 409, "conflict"),
        (DomainError("other"), 400, "domain_error"),
    ],
)
def test_status_for(error, status_code, code):
    assert status_for(error) == status_code
    assert error.code == code


def test_not_found_default_message():
    error = NotFoundError("event", 42)

    assert str(error) == "event not found: 42"
    assert error.identifier == 42
