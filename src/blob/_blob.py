"""Blob: an owned byte buffer that serializes as base-64 text."""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, ClassVar, SupportsIndex, TypeVar, overload

from blob.config import CRYPT, STANDARD, STANDARD_NO_PAD, URL_SAFE, URL_SAFE_NO_PAD, Base64Config
from blob.errors import DecodeError, TypeMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

BlobT = TypeVar("BlobT", bound="Blob")

EXPECTED_SHAPE = "base64 encoded string or byte sequence"
_BYTES_LIKE = (bytes, bytearray, memoryview)


def _owned_bytes(source: object) -> bytearray:
    """Copy a bytes-like, str or iterable-of-ints source into a new bytearray."""
    if isinstance(source, Blob):
        return bytearray(source._data)
    if isinstance(source, str):
        return bytearray(source.encode("utf-8"))
    if isinstance(source, int):
        # bytearray(n) would build n zero bytes; a lone int is not a byte sequence.
        msg = f"cannot convert {type(source).__name__} to a byte sequence."
        raise TypeError(msg)
    return bytearray(source)  # type: ignore[arg-type]


class _BlobMeta(type):
    """Metaclass that keeps a Blob class bound to the config it was defined with."""

    def __setattr__(cls, name: str, value: object) -> None:
        if name == "config":
            msg = f"{cls.__name__}.config cannot be rebound."
            raise AttributeError(msg)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name == "config":
            msg = f"{cls.__name__}.config cannot be deleted."
            raise AttributeError(msg)
        super().__delattr__(name)


class Blob(metaclass=_BlobMeta):
    """Owned, resizable byte sequence with base-64 (de)serialization.

    The encoding config is bound to the class: ``Blob`` uses standard base-64
    with padding, and the subclasses below pin the other alphabets. A value can
    move to another config with ``with_config``.

    Serialization always emits base-64 text. Deserialization accepts either
    base-64 text or a raw sequence of byte values.
    """

    __slots__ = ("_data",)

    config: ClassVar[Base64Config] = STANDARD

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Require every Blob subclass to bind a Base64Config."""
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.__dict__.get("config", cls.config), Base64Config):
            msg = f"{cls.__name__}.config must be a Base64Config."
            raise TypeError(msg)

    def __init__(self, source: bytes | bytearray | memoryview | str | Iterable[int] = b"") -> None:
        """Initialize by copying a bytes-like value, a string's UTF-8 bytes, or byte values."""
        self._data = _owned_bytes(source)

    # ---- construction ----

    @classmethod
    def new(cls: type[BlobT]) -> BlobT:
        """Create an empty Blob."""
        return cls()

    @classmethod
    def from_bytearray(cls: type[BlobT], buffer: bytearray) -> BlobT:
        """Adopt an existing bytearray without copying it."""
        if not isinstance(buffer, bytearray):
            msg = f"from_bytearray expects a bytearray, got {type(buffer).__name__}."
            raise TypeError(msg)
        blob = cls.__new__(cls)
        blob._data = buffer
        return blob

    @classmethod
    def decode_base64(cls: type[BlobT], encoded: str | bytes | bytearray | memoryview) -> BlobT:
        """Decode base-64 text into a Blob using the class config."""
        try:
            decoded = cls.config.decode(encoded)
        except DecodeError as exc:
            logger.debug("Rejected base64 input for %s: %s", cls.__name__, exc)
            raise
        return cls.from_bytearray(bytearray(decoded))

    @classmethod
    def from_str(cls: type[BlobT], text: str) -> BlobT:
        """Parse base-64 text into a Blob."""
        if not isinstance(text, str):
            msg = f"from_str expects a string, got {type(text).__name__}."
            raise TypeError(msg)
        return cls.decode_base64(text)

    @classmethod
    def deserialize(cls: type[BlobT], value: object) -> BlobT:
        """Build a Blob from a serialized value.

        Strings are decoded as base-64 with the class config. Bytes-like values and
        lists/tuples of integers in ``0-255`` are taken as raw bytes. Any other
        shape raises ``TypeMismatchError``.
        """
        if isinstance(value, str):
            return cls.decode_base64(value)
        if isinstance(value, _BYTES_LIKE):
            return cls.from_bytearray(bytearray(value))
        if isinstance(value, (list, tuple)):
            try:
                data = _byte_values(value)
            except TypeMismatchError as exc:
                logger.debug("Rejected byte sequence for %s: %s", cls.__name__, exc)
                raise
            return cls.from_bytearray(data)

        logger.debug("Rejected %s value for %s", type(value).__name__, cls.__name__)
        raise TypeMismatchError(EXPECTED_SHAPE, type(value).__name__)

    def with_config(self, blob_type: type[BlobT]) -> BlobT:
        """Move the bytes into a Blob bound to a different config, leaving this one empty."""
        return blob_type.from_bytearray(self.into_bytearray())

    # ---- encoding ----

    def encode_base64(self) -> str:
        """Encode the Blob as base-64 text."""
        return self.config.encode(self._data)

    def serialize(self) -> str:
        """Return the serialized form: base-64 text in the class config."""
        return self.encode_base64()

    def encode_to(self, writer: IO[bytes]) -> int:
        """Write the base-64 encoding into a binary writer and return the number of bytes written."""
        encoded = self.encode_base64().encode("ascii")
        writer.write(encoded)
        return len(encoded)

    def append_base64(self, encoded: str | bytes | bytearray | memoryview) -> None:
        """Decode base-64 text and append it; the Blob is unchanged when decoding fails."""
        try:
            decoded = self.config.decode(encoded)
        except DecodeError as exc:
            logger.debug("Rejected base64 input for %s: %s", type(self).__name__, exc)
            raise
        self._data += decoded

    # ---- buffer access ----

    def into_bytearray(self) -> bytearray:
        """Hand over the underlying bytearray, leaving this Blob empty."""
        data = self._data
        self._data = bytearray()
        return data

    def copy(self: BlobT) -> BlobT:
        """Return a Blob of the same type holding a copy of the bytes."""
        return type(self).from_bytearray(bytearray(self._data))

    __copy__ = copy

    def append(self, value: SupportsIndex) -> None:
        """Append one byte value."""
        self._data.append(value)

    def extend(self, values: Iterable[SupportsIndex] | bytes | bytearray | memoryview) -> None:
        """Append byte values from an iterable or bytes-like object."""
        self._data.extend(values)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append raw bytes, file-object style."""
        size = len(self._data)
        self._data += data
        return len(self._data) - size

    def flush(self) -> None:
        """No-op; present so a Blob can stand in for a binary writer."""

    def truncate(self, size: int) -> None:
        """Shorten the Blob to ``size`` bytes; larger sizes leave it unchanged."""
        if size < 0:
            msg = "size must be >= 0."
            raise ValueError(msg)
        del self._data[size:]

    def clear(self) -> None:
        """Remove all bytes."""
        self._data.clear()

    # ---- protocols ----

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    @overload
    def __getitem__(self, index: SupportsIndex) -> int: ...

    @overload
    def __getitem__(self: BlobT, index: slice) -> BlobT: ...

    def __getitem__(self, index: SupportsIndex | slice) -> int | Blob:
        if isinstance(index, slice):
            return type(self).from_bytearray(self._data[index])
        return self._data[index]

    def __setitem__(self, index: SupportsIndex, value: SupportsIndex) -> None:
        self._data[index] = value

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __str__(self) -> str:
        return self.encode_base64()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Blob):
            if other.config != self.config:
                return False
            return self._data == other._data
        if isinstance(other, _BYTES_LIKE):
            return self._data == other
        if isinstance(other, (list, tuple)):
            return list(self._data) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def _byte_values(items: list[object] | tuple[object, ...]) -> bytearray:
    """Collect a sequence of integers in ``0-255`` into a bytearray."""
    data = bytearray()
    for index, item in enumerate(items):
        if not isinstance(item, int) or isinstance(item, bool):
            raise TypeMismatchError(EXPECTED_SHAPE, type(item).__name__, index=index)
        if not 0 <= item <= 255:
            raise TypeMismatchError("integer in range 0-255", f"integer {item}", index=index)
        data.append(item)
    return data


class StandardNoPadBlob(Blob):
    """Blob encoded with the standard alphabet and no padding."""

    __slots__ = ()
    config = STANDARD_NO_PAD


class UrlSafeBlob(Blob):
    """Blob encoded with the URL-safe alphabet and padding."""

    __slots__ = ()
    config = URL_SAFE


class UrlSafeNoPadBlob(Blob):
    """Blob encoded with the URL-safe alphabet and no padding."""

    __slots__ = ()
    config = URL_SAFE_NO_PAD


class CryptBlob(Blob):
    """Blob encoded with the ``crypt(3)`` alphabet."""

    __slots__ = ()
    config = CRYPT

