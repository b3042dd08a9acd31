"""Typed errors for blob."""


class BlobError(Exception):
    """Base exception for all blob errors."""


class DecodeError(BlobError, ValueError):
    """Raised when base-64 text cannot be decoded with a Blob's config.

    ``reason`` is one of ``invalid_byte``, ``invalid_length``, ``invalid_padding``
    or ``invalid_last_symbol``.
    """

    def __init__(
        self,
        reason: str,
        *,
        offset: int | None = None,
        config: str | None = None,
        field_name: str | None = None,
    ) -> None:
        """Initialize with the failure reason, offending offset, config name and optional field name."""
        self.reason = reason
        self.offset = offset
        self.config = config
        self.field_name = field_name
        detail = reason.replace("_", " ")
        if offset is not None:
            detail = f"{detail} at offset {offset}"
        if config is not None:
            detail = f"{detail} ({config})"
        prefix = "" if field_name is None else f"{field_name}: "
        super().__init__(f"{prefix}Invalid base64: {detail}")


class TypeMismatchError(BlobError, TypeError):
    """Raised when a serialized value has a shape a Blob cannot be built from."""

    def __init__(
        self,
        expected: str,
        actual: str,
        *,
        index: int | None = None,
        field_name: str | None = None,
    ) -> None:
        """Initialize with the expected shape, the received value description and optional location."""
        self.expected = expected
        self.actual = actual
        self.index = index
        self.field_name = field_name
        where = "" if index is None else f" at index {index}"
        prefix = "" if field_name is None else f"{field_name}: "
        super().__init__(f"{prefix}Invalid type{where}: expected {expected}, got {actual}")
