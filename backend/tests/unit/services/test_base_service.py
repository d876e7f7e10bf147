"""Unit tests for BaseService error translation."""

from __future__ import annotations

import pytest

from authservice.core.errors import APIError, Conflict, ServiceUnavailable
from authservice.services._shared.base import BaseService
from authservice.services._shared.errors import (
    DuplicateEmailError,
    RefreshPersistenceError,
    TokenSigningError,
    UserCreationError,
)


@pytest.fixture()
def service() -> BaseService:
    return BaseService()


@pytest.mark.parametrize(
    ("exc", "expected_type", "status"),
    [
        (DuplicateEmailError(), Conflict, 409),
        (RefreshPersistenceError(), ServiceUnavailable, 503),
        (TokenSigningError(), APIError, 500),
        (UserCreationError(), APIError, 400),
    ],
)
def test_service_errors_map_to_api_errors(service, exc, expected_type, status):
    translated = service.translate_exceptions(exc)

    assert isinstance(translated, expected_type)
    assert translated.status_code == status


def test_unknown_errors_pass_through(service):
    exc = KeyError("boom")
    assert service.translate_exceptions(exc) is exc
