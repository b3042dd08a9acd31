"""Tests for blob.errors."""

from blob.errors import BlobError, DecodeError, TypeMismatchError


def test_blob_error_is_exception() -> None:
    assert issubclass(BlobError, Exception)


def test_decode_error_is_blob_error_and_value_error() -> None:
    assert issubclass(DecodeError, BlobError)
    assert issubclass(DecodeError, ValueError)


def test_type_mismatch_is_blob_error_and_type_error() -> None:
    assert issubclass(TypeMismatchError, BlobError)
    assert issubclass(TypeMismatchError, TypeError)


def test_decode_error_carries_attributes() -> None:
    err = DecodeError("invalid_byte", offset=3, config="standard")
    assert err.reason == "invalid_byte"
    assert err.offset == 3
    assert err.config == "standard"
    assert err.field_name is None


def test_decode_error_message() -> None:
    err = DecodeError("invalid_padding", offset=7, config="url_safe", field_name="payload")
    assert str(err) == "payload: Invalid base64: invalid padding at offset 7 (url_safe)"


def test_decode_error_message_without_offset() -> None:
    assert str(DecodeError("invalid_length")) == "Invalid base64: invalid length"


def test_type_mismatch_carries_attributes() -> None:
    err = TypeMismatchError("byte sequence", "dict", index=2, field_name="data")
    assert err.expected == "byte sequence"
    assert err.actual == "dict"
    assert err.index == 2
    assert err.field_name == "data"


def test_type_mismatch_message() -> None:
    err = TypeMismatchError("byte sequence", "float", index=1)
    assert str(err) == "Invalid type at index 1: expected byte sequence, got float"
