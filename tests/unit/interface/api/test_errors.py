"""Unit tests for domain error to HTTP status mapping."""

import pytest

from comet.domain.error import (
    AreaHiddenError,
    ConflictError,
    DomainError,
    HumanVerificationError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from comet.interface.api.errors import status_code_for


@pytest.mark.parametrize(
    "error,expected",
    [
        (ValidationError("empty"), 400),
        (UnauthorizedError("delete comment areas"), 401),
        (AreaHiddenError("blog1"), 403),
        (HumanVerificationError(), 403),
        (NotFoundError("Comment", 1), 404),
        (ConflictError("Comment area", "blog1"), 409),
        (DomainError("other"), 400),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected
