"""Base64Config: alphabet and padding policy bound to a Blob type."""

from __future__ import annotations

import base64
import binascii
import string
from dataclasses import dataclass, field

from blob.errors import DecodeError

STANDARD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
URL_SAFE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
CRYPT_ALPHABET = "./" + string.digits + string.ascii_uppercase + string.ascii_lowercase

_PAD = b"="
# Low bits of the final symbol that fall outside the decoded bytes, keyed by payload length mod 4.
_TRAILING_BITS_MASK = {2: 0b1111, 3: 0b11}


@dataclass(frozen=True, slots=True)
class Base64Config:
    """A base-64 alphabet together with its padding rule.

    Encoding emits ``=`` padding only when ``padding`` is true. Decoding is strict:
    padded configs require canonical padding, unpadded configs reject ``=``, and
    the final symbol may not carry non-zero trailing bits.
    """

    name: str
    alphabet: str
    padding: bool = True

    _alphabet_bytes: bytes = field(init=False, repr=False, compare=False)
    _to_standard: bytes = field(init=False, repr=False, compare=False)
    _from_standard: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the alphabet and precompute translation tables."""
        if len(self.alphabet) != 64 or len(set(self.alphabet)) != 64:
            msg = "alphabet must contain 64 distinct characters."
            raise ValueError(msg)
        if not self.alphabet.isascii() or "=" in self.alphabet:
            msg = "alphabet must be ASCII and must not contain the padding character."
            raise ValueError(msg)
        alphabet_bytes = self.alphabet.encode("ascii")
        standard_bytes = STANDARD_ALPHABET.encode("ascii")
        object.__setattr__(self, "_alphabet_bytes", alphabet_bytes)
        object.__setattr__(self, "_to_standard", bytes.maketrans(alphabet_bytes, standard_bytes))
        object.__setattr__(self, "_from_standard", bytes.maketrans(standard_bytes, alphabet_bytes))

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        """Encode bytes into base-64 text using this config's alphabet."""
        encoded = base64.b64encode(data).translate(self._from_standard)
        if not self.padding:
            encoded = encoded.rstrip(_PAD)
        return encoded.decode("ascii")

    def decode(self, encoded: str | bytes | bytearray | memoryview) -> bytes:
        """Decode base-64 text, raising ``DecodeError`` on any framing or alphabet violation."""
        raw = self._as_ascii(encoded)
        if not raw:
            return b""

        payload = raw.rstrip(_PAD)
        pad_count = len(raw) - len(payload)
        self._check_symbols(payload)

        remainder = len(payload) % 4
        if remainder == 1:
            raise DecodeError("invalid_length", config=self.name)
        if pad_count:
            if not self.padding or pad_count > 2 or len(raw) % 4:
                raise DecodeError("invalid_padding", offset=len(payload), config=self.name)
        elif self.padding and remainder:
            raise DecodeError("invalid_padding", offset=len(raw), config=self.name)

        mask = _TRAILING_BITS_MASK.get(remainder)
        if mask is not None and self._alphabet_bytes.index(payload[-1]) & mask:
            raise DecodeError("invalid_last_symbol", offset=len(payload) - 1, config=self.name)

        standard = payload.translate(self._to_standard) + _PAD * (-len(payload) % 4)
        try:
            return base64.b64decode(standard, validate=True)
        except binascii.Error as exc:
            raise DecodeError("invalid_length", config=self.name) from exc

    def _as_ascii(self, encoded: str | bytes | bytearray | memoryview) -> bytes:
        """Return the input as ASCII bytes."""
        if isinstance(encoded, str):
            try:
                return encoded.encode("ascii")
            except UnicodeEncodeError as exc:
                raise DecodeError("invalid_byte", offset=exc.start, config=self.name) from exc
        if isinstance(encoded, (bytes, bytearray, memoryview)):
            return bytes(encoded)
        msg = f"base64 input must be str or bytes-like, got {type(encoded).__name__}."
        raise TypeError(msg)

    def _check_symbols(self, payload: bytes) -> None:
        """Reject the first byte that is not part of the alphabet."""
        if not payload.translate(None, self._alphabet_bytes):
            return
        for offset, byte in enumerate(payload):
            if byte not in self._alphabet_bytes:
                reason = "invalid_padding" if byte == _PAD[0] else "invalid_byte"
                raise DecodeError(reason, offset=offset, config=self.name)


CRYPT = Base64Config("crypt", CRYPT_ALPHABET, padding=False)
STANDARD = Base64Config("standard", STANDARD_ALPHABET, padding=True)
STANDARD_NO_PAD = Base64Config("standard_no_pad", STANDARD_ALPHABET, padding=False)
URL_SAFE = Base64Config("url_safe", URL_SAFE_ALPHABET, padding=True)
URL_SAFE_NO_PAD = Base64Config("url_safe_no_pad", URL_SAFE_ALPHABET, padding=False)
