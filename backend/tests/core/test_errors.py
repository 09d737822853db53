"""Error taxonomy — fixed statuses, default messages, and status/message resolution.

Invariants:
    - Each kind has a fixed status that the raiser cannot change
    - resolve_status: typed → integer cause → 500
    - resolve_message falls back to "Something went wrong"
"""

import pytest

from app.core.errors import (
    BadRequestError, ClientsApiError, ConflictError, DatabaseError, ForbiddenError,
    InternalError, NotFoundError, UnauthorizedError, UnprocessableEntityError,
    DEFAULT_ERROR_MESSAGE, resolve_message, resolve_status,
)


@pytest.mark.parametrize("error_cls, status, message", [
    (BadRequestError, 400, "Bad request"),
    (UnauthorizedError, 401, "Unauthorized"),
    (ForbiddenError, 403, "Forbidden"),
    (NotFoundError, 404, "Resource not found"),
    (ConflictError, 409, "Conflict"),
    (UnprocessableEntityError, 422, "Unprocessable Entity"),
    (InternalError, 500, "Internal server error"),
])
def test_each_kind_has_fixed_status_and_default_message(error_cls, status, message):
    err = error_cls()
    assert isinstance(err, ClientsApiError)
    assert err.http_status == status
    assert err.message == message
    assert str(err) == message


def test_message_is_overridable_but_status_is_not():
    err = NotFoundError("Client not found")
    assert err.message == "Client not found"
    assert err.http_status == 404
    with pytest.raises(TypeError):
        NotFoundError("Client not found", 500)


def test_database_error_is_internal():
    err = DatabaseError("Connection or operational error", "execute")
    assert isinstance(err, InternalError)
    assert err.http_status == 500
    assert err.message == "Database execute failed: Connection or operational error"
    assert err.operation == "execute"


def test_resolve_status_prefers_typed_status_over_cause():
    err = ConflictError("taken")
    err.cause = 404
    assert resolve_status(err) == 409


def test_resolve_status_uses_integer_cause_on_untyped_errors():
    err = RuntimeError("Resource not found")
    err.cause = 404
    assert resolve_status(err) == 404


@pytest.mark.parametrize("cause", [None, "404", 4.04, True])
def test_resolve_status_ignores_non_integer_cause(cause):
    err = RuntimeError("boom")
    err.cause = cause
    assert resolve_status(err) == 500


def test_resolve_status_defaults_to_500():
    assert resolve_status(ValueError("boom")) == 500


def test_resolve_message_falls_back_when_empty():
    assert resolve_message(RuntimeError()) == DEFAULT_ERROR_MESSAGE
    assert resolve_message(RuntimeError("")) == "Something went wrong"


def test_resolve_message_uses_error_message():
    assert resolve_message(KeyError("x")) == "'x'"
    assert resolve_message(BadRequestError("Invalid id")) == "Invalid id"


@pytest.mark.parametrize("cause", [7, 0, 99, 600, 99999, -404])
def test_resolve_status_ignores_cause_outside_http_range(cause):
    err = RuntimeError("boom")
    err.cause = cause
    assert resolve_status(err) == 500


@pytest.mark.parametrize("cause", [100, 599])
def test_resolve_status_accepts_http_range_bounds(cause):
    err = RuntimeError("boom")
    err.cause = cause
    assert resolve_status(err) == cause
