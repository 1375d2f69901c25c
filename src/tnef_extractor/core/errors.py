"""
Error types raised while decoding a TNEF stream.

Every error is fatal: once raised, the reader that produced it must be
discarded.
"""

from __future__ import annotations


class TnefError(RuntimeError):
    """Base class for all TNEF decoding failures."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (offset {offset})"
        super().__init__(message)
        self.offset = offset


class InvalidSignatureError(TnefError):
    """Raised when the stream does not start with the TNEF magic."""


class TruncatedStreamError(TnefError):
    """Raised when the stream ends before the requested bytes."""


class AttributeBoundaryError(TnefError):
    """Raised when an attribute value was read past its declared length."""


class ChecksumMismatchError(TnefError):
    """Raised when an attribute's stored checksum does not match its value."""

    def __init__(self, expected: int, actual: int, *, offset: int | None = None) -> None:
        super().__init__(
            f"Invalid checksum: stored {expected}, computed {actual}",
            offset=offset,
        )
        self.expected = expected
        self.actual = actual


class UnknownAttributeError(TnefError):
    """Raised for attribute level or tag values outside the known tables."""

    def __init__(self, message: str, value: int, *, offset: int | None = None) -> None:
        super().__init__(message, offset=offset)
        self.value = value


class UnknownAttributeLevelError(UnknownAttributeError):
    def __init__(self, value: int, *, offset: int | None = None) -> None:
        super().__init__(f"Unknown attribute level 0x{value:02x}", value, offset=offset)


class UnknownAttributeTagError(UnknownAttributeError):
    def __init__(self, value: int, *, offset: int | None = None) -> None:
        super().__init__(f"Unknown attribute tag 0x{value:08x}", value, offset=offset)
