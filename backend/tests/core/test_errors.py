"""Error hierarchy tests: codes, statuses, and public envelopes."""

from app.core.errors import (
    BodyTooLargeError,
    DemoServerError,
    ErrorCategory,
    ErrorSeverity,
    MalformedBodyError,
    RouteNotFoundError,
)


def test_route_not_found_envelope():
    err = RouteNotFoundError("GET", "/nope")
    assert err.http_status == 404
    assert err.code == "ROUTE_NOT_FOUND"
    assert err.severity == ErrorSeverity.WARNING
    assert err.to_response() == {"error": "Rota não encontrada"}
    assert "/nope" in err.message


def test_body_errors_share_generic_500():
    for err in (MalformedBodyError("bad"), BodyTooLargeError(20, 10)):
        assert isinstance(err, DemoServerError)
        assert err.http_status == 500
        assert err.category == ErrorCategory.VALIDATION
        assert err.to_response() == {"error": "Algo deu errado!"}


def test_internal_message_not_in_response():
    err = MalformedBodyError("secret parser state")
    assert "secret" in str(err)
    assert "secret" not in str(err.to_response())


def test_severity_and_category_serialize_as_strings():
    assert ErrorSeverity.CRITICAL.value == "critical"
    assert ErrorCategory.RESOURCE_NOT_FOUND.value == "resource_not_found"
