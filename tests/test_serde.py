import json
from dataclasses import dataclass
from types import MappingProxyType

import pytest

from blob import Blob, DecodeError, TypeMismatchError, UrlSafeNoPadBlob
from blob.serde import (
    dumps,
    json_default,
    optional_blob,
    require_blob,
    to_plain_data,
)

DATA = bytes([1, 2, 3, 4, 5])


@dataclass
class BlobFixture:
    my_blob: Blob
    thumbnail: UrlSafeNoPadBlob | None = None

    def to_dict(self) -> dict[str, object]:
        return {"my_blob": self.my_blob, "thumbnail": self.thumbnail}

    @classmethod
    def from_dict(cls, value: object) -> "BlobFixture":
        if not isinstance(value, dict):
            msg = "BlobFixture must be a mapping."
            raise TypeError(msg)
        return cls(
            my_blob=require_blob(value.get("my_blob"), field_name="BlobFixture.my_blob"),
            thumbnail=optional_blob(
                value.get("thumbnail"),
                field_name="BlobFixture.thumbnail",
                blob_type=UrlSafeNoPadBlob,
            ),
        )


# =============================================================================
# to_plain_data
# =============================================================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(42, 42, id="int"),
        pytest.param("hello", "hello", id="string"),
        pytest.param(None, None, id="none"),
        pytest.param(Blob(DATA), "AQIDBAU=", id="blob"),
        pytest.param(UrlSafeNoPadBlob(b"\xfb\xff"), "-_8", id="url-safe-blob"),
    ],
)
def test_to_plain_data_scalars(value: object, expected: object) -> None:
    assert to_plain_data(value) == expected


def test_to_plain_data_converts_nested_blobs() -> None:
    nested = MappingProxyType({"items": (Blob(DATA), {1: Blob(b"")})})
    assert to_plain_data(nested) == {"items": ["AQIDBAU=", {"1": ""}]}


# =============================================================================
# require_blob / optional_blob
# =============================================================================


def test_require_blob_accepts_both_shapes() -> None:
    assert require_blob("AQIDBAU=", field_name="f") == DATA
    assert require_blob([1, 2, 3, 4, 5], field_name="f") == DATA


def test_require_blob_uses_blob_type() -> None:
    blob = require_blob("-_8", field_name="f", blob_type=UrlSafeNoPadBlob)
    assert isinstance(blob, UrlSafeNoPadBlob)
    assert blob == b"\xfb\xff"


def test_require_blob_names_field_on_decode_error() -> None:
    with pytest.raises(DecodeError, match="^payload: Invalid base64") as exc_info:
        require_blob("AQ!D", field_name="payload")
    assert exc_info.value.field_name == "payload"
    assert exc_info.value.reason == "invalid_byte"
    assert exc_info.value.offset == 2
    assert isinstance(exc_info.value.__cause__, DecodeError)


def test_require_blob_names_field_on_type_mismatch() -> None:
    with pytest.raises(TypeMismatchError, match="^payload: Invalid type at index 1") as exc_info:
        require_blob([1, 999], field_name="payload")
    assert exc_info.value.field_name == "payload"
    assert exc_info.value.index == 1


def test_require_blob_rejects_none() -> None:
    with pytest.raises(TypeMismatchError, match="got NoneType"):
        require_blob(None, field_name="payload")


def test_optional_blob_passes_none_through() -> None:
    assert optional_blob(None, field_name="f") is None
    assert optional_blob("AQ==", field_name="f") == b"\x01"


# =============================================================================
# JSON
# =============================================================================


def test_json_default_encodes_blob() -> None:
    assert json_default(Blob(DATA)) == "AQIDBAU="


def test_json_default_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError, match="set is not JSON serializable"):
        json_default({1})


def test_dumps_encodes_blobs() -> None:
    assert json.loads(dumps({"my_blob": Blob(DATA)})) == {"my_blob": "AQIDBAU="}


def test_dumps_forwards_kwargs() -> None:
    assert dumps({"b": Blob(b""), "a": 1}, sort_keys=True) == '{"a": 1, "b": ""}'


def test_fixture_round_trips_through_json() -> None:
    fixture = BlobFixture(my_blob=Blob(DATA), thumbnail=UrlSafeNoPadBlob(b"\xfb\xff"))
    encoded = dumps(fixture.to_dict(), indent=2)
    assert '"my_blob": "AQIDBAU="' in encoded
    assert BlobFixture.from_dict(json.loads(encoded)) == fixture


def test_fixture_accepts_byte_array_json() -> None:
    decoded = BlobFixture.from_dict(json.loads('{"my_blob": [1, 2, 3, 4, 5]}'))
    assert decoded == BlobFixture(my_blob=Blob(DATA))


def test_fixture_rejects_byte_overflow() -> None:
    with pytest.raises(TypeMismatchError, match="BlobFixture.my_blob"):
        BlobFixture.from_dict(json.loads('{"my_blob": [1, 2, 3000, 4, 5]}'))
