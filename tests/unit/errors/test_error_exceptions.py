"""Tests for the API exception hierarchy."""

import pytest

from nettu_scheduler.errors import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [BadRequestError, UnauthorizedError, ForbiddenError, NotFoundError, ConflictError, RateLimitError],
)
def test_client_errors(exc_class):
    assert issubclass(exc_class, ClientError)
    assert issubclass(exc_class, APIError)


@pytest.mark.unit
def test_server_error_is_not_client_error():
    assert issubclass(ServerError, APIError)
    assert not issubclass(ServerError, ClientError)


@pytest.mark.unit
def test_api_error_attributes():
    error = APIError("HTTP 500: boom", status_code=500)

    assert str(error) == "HTTP 500: boom"
    assert error.message == "HTTP 500: boom"
    assert error.status_code == 500
    assert error.response is None


@pytest.mark.unit
def test_rate_limit_error_retry_after():
    error = RateLimitError("slow down", retry_after=12, status_code=429)

    assert error.retry_after == 12
    assert error.status_code == 429
