"""
Shared fixtures for building TNEF byte streams in memory.
"""

from __future__ import annotations

import io
import struct

import pytest

from tnef_extractor.core.constants import TNEF_SIGNATURE


def encode_attribute(
    level: int,
    tag: int,
    value: bytes = b"",
    *,
    checksum: int | None = None,
    length: int | None = None,
) -> bytes:
    """Frame one attribute; ``checksum``/``length`` override the computed values."""
    if checksum is None:
        checksum = sum(value) & 0xFFFF
    if length is None:
        length = len(value)
    return (
        struct.pack("<B", level)
        + struct.pack("<I", tag)
        + struct.pack("<i", length)
        + value
        + struct.pack("<H", checksum & 0xFFFF)
    )


def encode_stream(*attributes: bytes, attachment_key: int = 0, signature: int = TNEF_SIGNATURE) -> bytes:
    return struct.pack("<I", signature) + struct.pack("<h", attachment_key) + b"".join(attributes)


@pytest.fixture
def make_attribute():
    """Return a callable framing a single attribute."""
    return encode_attribute


@pytest.fixture
def make_stream():
    """Return a callable building a seekable TNEF stream from framed attributes."""

    def _make(*attributes: bytes, attachment_key: int = 0, signature: int = TNEF_SIGNATURE) -> io.BytesIO:
        return io.BytesIO(encode_stream(*attributes, attachment_key=attachment_key, signature=signature))

    return _make

