"""Unit tests for typed JSON-RPC errors."""
import pytest

from jsonrpc_server.jsonrpc.errors import (
    DecodeError,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    KnownFailure,
    MethodNotFoundError,
    OpaqueFailure,
    ParseError,
    RPCError,
    classify_failure,
)
from jsonrpc_server.jsonrpc.models import ERROR_CODES, ErrorCode, ErrorName


def test_error_codes():
    """Test that error codes are correctly defined."""
    assert ErrorCode.PARSE_ERROR == -32700
    assert ErrorCode.INVALID_REQUEST == -32600
    assert ErrorCode.METHOD_NOT_FOUND == -32601
    assert ErrorCode.INVALID_PARAMS == -32602
    assert ErrorCode.INTERNAL_ERROR == -32603
    assert ErrorCode.DECODE_ERROR == -32800
    assert set(ERROR_CODES) == set(ErrorName)


@pytest.mark.parametrize(
    "error_class, name, code, message",
    [
        (ParseError, ErrorName.PARSE_ERROR, -32700, "Parse error"),
        (InvalidRequestError, ErrorName.INVALID_REQUEST, -32600, "Invalid request"),
        (MethodNotFoundError, ErrorName.METHOD_NOT_FOUND, -32601, "Method not found"),
        (InvalidParamsError, ErrorName.INVALID_PARAMS, -32602, "Invalid params"),
        (InternalError, ErrorName.INTERNAL_ERROR, -32603, "Internal error"),
        (DecodeError, ErrorName.DECODE_ERROR, -32800, "Decode error"),
    ],
)
def test_typed_errors(error_class, name, code, message):
    """Test that each typed error carries its table entry."""
    error = error_class()

    assert error.name is name
    assert error.code == code
    assert error.message == message
    assert error.data is None
    assert str(error) == message
    assert error == RPCError(name)
    assert error.to_error_object() == {"code": code, "message": message}


def test_error_by_string_name():
    error = RPCError("METHOD_NOT_FOUND", data={"method": "x"})

    assert error.name is ErrorName.METHOD_NOT_FOUND
    assert error == MethodNotFoundError({"method": "x"})


def test_unknown_error_name_rejected():
    with pytest.raises(ValueError):
        RPCError("NOT_A_NAME")


def test_is_kind_and_matches():
    error = InvalidParamsError()

    assert error.is_kind(ErrorName.INVALID_PARAMS)
    assert not error.is_kind(ErrorName.INTERNAL_ERROR)
    assert RPCError.matches(error, ErrorName.INVALID_PARAMS)
    assert not RPCError.matches(ValueError("x"), ErrorName.INVALID_PARAMS)
    assert not RPCError.matches(None, ErrorName.INVALID_PARAMS)


def test_equality_includes_data():
    assert InvalidParamsError({"a": 1}) == InvalidParamsError({"a": 1})
    assert InvalidParamsError({"a": 1}) != InvalidParamsError({"a": 2})
    assert ParseError() != DecodeError()
    assert ParseError() != ValueError("Parse error")


def test_fields_are_read_only():
    error = MethodNotFoundError()

    with pytest.raises(AttributeError):
        error.code = 1
    with pytest.raises(AttributeError):
        error.data = "x"


def test_error_object_includes_data():
    error = InvalidParamsError({"field": "name"})

    assert error.to_error_object() == {
        "code": -32602,
        "message": "Invalid params",
        "data": {"field": "name"},
    }


def test_classify_failure():
    typed = DecodeError()
    other = KeyError("x")

    assert classify_failure(typed) == KnownFailure(typed)
    assert classify_failure(other) == OpaqueFailure(other)
