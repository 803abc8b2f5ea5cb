"""Tests for structured errors."""

import json

import pytest
from safe_result.exceptions import ErrorType, RescueError, StructuredError
from safe_result.result import Failure


def test_base_exception():
    """Test base StructuredError."""
    error = StructuredError(
        "Test error",
        error_type=ErrorType.EXCEPTION,
        details={"url": "https://example.com"},
    )

    assert error.message == "Test error"
    assert error.error_type == ErrorType.EXCEPTION
    assert error.details["url"] == "https://example.com"
    assert error.cause is None
    assert "exception" in str(error)
    assert "Test error" in str(error)


def test_default_error_type():
    """Test that errors default to UNKNOWN_ERROR."""
    error = StructuredError("plain")
    assert error.error_type == ErrorType.UNKNOWN_ERROR
    assert error.details == {}
    assert str(error) == "[unknown_error] plain"


def test_coerce_structured_error():
    """Test that coerce returns structured errors unchanged."""
    error = StructuredError("already structured")
    assert StructuredError.coerce(error) is error


def test_coerce_native_exception():
    """Test coerce with a native exception."""
    exc = ValueError("x")
    error = StructuredError.coerce(exc)

    assert error.message == "x"
    assert error.error_type == ErrorType.EXCEPTION
    assert error.details["exception_type"] == "ValueError"
    assert error.cause is exc
    assert error.__cause__ is exc


def test_coerce_exception_without_message():
    """Test that an empty exception message falls back to the class name."""
    error = StructuredError.coerce(KeyboardInterrupt())
    assert error.message == "KeyboardInterrupt"


def test_coerce_arbitrary_value():
    """Test coerce with a value that is not an exception."""
    error = StructuredError.coerce(404)

    assert error.message == "404"
    assert error.error_type == ErrorType.NON_EXCEPTION
    assert error.details["value"] == 404


def test_causes():
    """Test that causes layers a new message over the error."""
    error = StructuredError("Cannot divide by zero.", ErrorType.EXCEPTION)
    wrapped = error.causes("Division error.")

    assert wrapped is not error
    assert wrapped.message == "Division error."
    assert wrapped.error_type == ErrorType.EXCEPTION
    assert wrapped.cause is error
    assert wrapped.__cause__ is error


def test_messages_follow_chain():
    """Test messages across several layers of causes."""
    error = StructuredError.coerce(OSError("disk full"))
    error = error.causes("Could not save").causes("Export failed")

    assert error.messages() == ["Export failed", "Could not save", "disk full"]
    assert len(list(error.chain())) == 3


def test_with_details():
    """Test merging extra details into an error."""
    error = StructuredError("x", details={"a": 1})
    assert error.with_details(b=2) is error
    assert error.details == {"a": 1, "b": 2}


def test_to_result():
    """Test converting an error into a failed result."""
    error = StructuredError("x")
    result = error.to_result()

    assert isinstance(result, Failure)
    assert result.error is error


def test_exception_to_dict():
    """Test exception serialization."""
    error = StructuredError("inner", details={"id": 7}).causes("outer")
    error_dict = error.to_dict()

    assert error_dict["error_type"] == "unknown_error"
    assert error_dict["message"] == "outer"
    assert error_dict["cause"]["message"] == "inner"
    assert error_dict["cause"]["details"]["id"] == 7


def test_to_dict_with_native_cause():
    """Test serialization of an error caused by a native exception."""
    error_dict = StructuredError.coerce(ValueError("x")).to_dict()
    assert error_dict["cause"] == repr(ValueError("x"))


def test_to_dict_is_json_serializable():
    """Test that details holding arbitrary objects serialize cleanly."""
    rescue = RescueError(StructuredError.coerce(object()), KeyError("missing"))
    error = StructuredError("outer", details={"error": StructuredError("inner")})
    error.with_details(items=[1, 2], exc=ValueError("x"))

    json.dumps(rescue.to_dict())
    error_dict = error.to_dict()
    json.dumps(error_dict)
    assert error_dict["details"]["error"]["message"] == "inner"
    assert error_dict["details"]["exc"] == repr(ValueError("x"))
    assert error_dict["details"]["items"] == [1, 2]
    assert rescue.to_dict()["details"]["original_error"]["error_type"] == "non_exception"


def test_rescue_error():
    """Test RescueError."""
    original = StructuredError("original")
    raised = RuntimeError("fallback broke")
    error = RescueError(original, raised)

    assert isinstance(error, StructuredError)
    assert error.error_type == ErrorType.RESCUE_FAILED
    assert error.message == "Error rescue failed."
    assert error.original_error is original
    assert error.rescue_error is raised
    assert error.details["original_error"] == original.to_dict()
    assert error.details["rescue_error"] == repr(raised)


def test_exception_can_be_raised():
    """Test that exceptions can be raised and caught."""
    with pytest.raises(StructuredError) as exc_info:
        raise StructuredError("Test", ErrorType.EXCEPTION)

    assert exc_info.value.error_type == ErrorType.EXCEPTION
