"""Tests for domain and store exceptions (error_code, message, details, to_dict)."""

from loresearch.domain.exceptions import LoreSearchException, ValidationException
from loresearch.infrastructure.exceptions import (
    StoreException,
    StoreFormatError,
    StoreNotFoundError,
    StoreReadError,
)


def test_base_exception_default_error_code() -> None:
    """Base LoreSearchException uses class name as error_code when not provided."""
    exc = LoreSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "LoreSearchException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_base_exception_custom_error_code_and_details() -> None:
    """LoreSearchException accepts custom error_code and details."""
    exc = LoreSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_to_dict_is_failure_body() -> None:
    """to_dict always reports success False with the message as error."""
    exc = LoreSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "success": False,
        "error": "Oops",
        "errorCode": "CUSTOM",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Too long", field="query")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "query"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_store_not_found() -> None:
    exc = StoreNotFoundError("/data/store.json")
    assert isinstance(exc, StoreException)
    assert isinstance(exc, LoreSearchException)
    assert exc.error_code == "STORE_NOT_FOUND"
    assert exc.details == {"path": "/data/store.json"}
    assert "/data/store.json" in exc.message


def test_store_read_error() -> None:
    exc = StoreReadError("/data/store.json", "permission denied")
    assert exc.error_code == "STORE_READ_ERROR"
    assert exc.details == {"path": "/data/store.json", "reason": "permission denied"}


def test_store_format_error() -> None:
    exc = StoreFormatError("/data/store.json", "invalid JSON")
    assert exc.error_code == "STORE_FORMAT_ERROR"
    assert exc.details["reason"] == "invalid JSON"
