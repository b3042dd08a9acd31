"""blob: an owned byte buffer with base-64 (de)serialization."""

import importlib.metadata as importlib_metadata
import logging

from blob._blob import Blob, CryptBlob, StandardNoPadBlob, UrlSafeBlob, UrlSafeNoPadBlob
from blob.config import CRYPT, STANDARD, STANDARD_NO_PAD, URL_SAFE, URL_SAFE_NO_PAD, Base64Config
from blob.errors import BlobError, DecodeError, TypeMismatchError

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("blob")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "CRYPT",
    "STANDARD",
    "STANDARD_NO_PAD",
    "URL_SAFE",
    "URL_SAFE_NO_PAD",
    "Base64Config",
    "Blob",
    "BlobError",
    "CryptBlob",
    "DecodeError",
    "StandardNoPadBlob",
    "TypeMismatchError",
    "UrlSafeBlob",
    "UrlSafeNoPadBlob",
]
