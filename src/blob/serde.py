"""Plain-data and JSON helpers for records that carry Blob fields."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TypeVar

from blob._blob import Blob
from blob.errors import DecodeError, TypeMismatchError

BlobT = TypeVar("BlobT", bound=Blob)


def to_plain_data(value: object) -> object:
    """Recursively normalize Mapping/tuple containers into plain dict/list values.

    Blobs become their base-64 text.
    """
    if isinstance(value, Blob):
        return value.serialize()
    if isinstance(value, Mapping):
        return {str(key): to_plain_data(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [to_plain_data(item) for item in value]
    return value


def require_blob(value: object, *, field_name: str, blob_type: type[BlobT] = Blob) -> BlobT:  # type: ignore[assignment]
    """Deserialize a required Blob field, naming the field in any error."""
    try:
        return blob_type.deserialize(value)
    except DecodeError as exc:
        raise DecodeError(exc.reason, offset=exc.offset, config=exc.config, field_name=field_name) from exc
    except TypeMismatchError as exc:
        raise TypeMismatchError(exc.expected, exc.actual, index=exc.index, field_name=field_name) from exc


def optional_blob(value: object, *, field_name: str, blob_type: type[BlobT] = Blob) -> BlobT | None:  # type: ignore[assignment]
    """Deserialize an optional Blob field; ``None`` passes through."""
    if value is None:
        return None
    return require_blob(value, field_name=field_name, blob_type=blob_type)


def json_default(value: object) -> object:
    """``json.dumps`` ``default`` hook that serializes Blobs as base-64 text."""
    if isinstance(value, Blob):
        return value.serialize()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def dumps(value: object, **kwargs: object) -> str:
    """Serialize ``value`` to JSON, encoding any Blob as base-64 text."""
    kwargs.setdefault("default", json_default)
    return json.dumps(value, **kwargs)  # type: ignore[arg-type]
