"""
Sequential reader for TNEF (``winmail.dat``) streams.

A TNEF stream is a 4-byte signature, a 2-byte attachment key and a run of
attributes. Each attribute is framed as::

    level (1) | tag (4) | length (4) | value (length) | checksum (2)

where the checksum is the 16-bit sum of the value bytes. :class:`TnefReader`
walks the attributes one at a time. Callers read the value of the current
attribute through the primitive ``read_*`` methods and may call
:meth:`TnefReader.validate_checksum` once the whole value was consumed. The
next call to :meth:`TnefReader.next_attribute` skips whatever the caller left
unread and refuses to continue if the caller read past the value.

The reader never closes the stream it was given.
"""

from __future__ import annotations

import io
import logging
import struct
from typing import BinaryIO, Protocol

from tnef_extractor.core.codepages import decode_text, encoding_for_code_page
from tnef_extractor.core.constants import (
    TNEF_SIGNATURE,
    AttributeLevel,
    AttributeTag,
    AttributeType,
    level_from_byte,
    tag_from_int,
)
from tnef_extractor.core.errors import (
    AttributeBoundaryError,
    ChecksumMismatchError,
    InvalidSignatureError,
    TruncatedStreamError,
)
from tnef_extractor.core.limits import CHUNK_SIZE
from tnef_extractor.core.models import TnefAttribute, TnefHeader

logger = logging.getLogger(__name__)

_INT16 = struct.Struct("<h")
_INT32 = struct.Struct("<i")


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> object:
        ...


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class TnefReader:
    """
    Cursor over the attributes of a TNEF stream.

    The header is read and validated on construction. Any
    :class:`~tnef_extractor.core.errors.TnefError` leaves the reader in an
    undefined state; it must not be used afterwards.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._size = self._measure(stream)

        self._attribute: TnefAttribute | None = None
        self._checksum = 0

        self._tnef_version = 0
        self._oem_code_page = 0
        self._version_seen = False
        self._code_page_seen = False

        self._header = self._read_header()

    @staticmethod
    def _measure(stream: BinaryIO) -> int:
        start = stream.tell()
        size = stream.seek(0, io.SEEK_END)
        stream.seek(start)
        return size

    # ------------------------------------------------------------------
    # Properties

    @property
    def header(self) -> TnefHeader:
        return self._header

    @property
    def attachment_key(self) -> int:
        return self._header.attachment_key

    @property
    def attribute(self) -> TnefAttribute | None:
        """The current attribute, or ``None`` before the first advance."""
        return self._attribute

    @property
    def attribute_level(self) -> AttributeLevel:
        return self.current_attribute.level

    @property
    def attribute_tag(self) -> AttributeTag:
        return self.current_attribute.tag

    @property
    def attribute_length(self) -> int:
        return self.current_attribute.length

    @property
    def attribute_type(self) -> AttributeType:
        return self.current_attribute.type

    @property
    def position(self) -> int:
        return self._stream.tell()

    @property
    def size(self) -> int:
        return self._size

    @property
    def remaining(self) -> int:
        """Value bytes of the current attribute not yet read."""
        if self._attribute is None:
            return 0
        return max(0, self._attribute.value_end - self.position)

    @property
    def checksum(self) -> int:
        """Running checksum of the current value, as a signed 16-bit int."""
        return _to_int16(self._checksum)

    @property
    def tnef_version(self) -> int:
        return self._tnef_version

    @property
    def oem_code_page(self) -> int:
        return self._oem_code_page

    @property
    def encoding(self) -> str:
        """Charset name for the OEM code page, ``""`` when unrecognised."""
        return encoding_for_code_page(self._oem_code_page)

    @property
    def current_attribute(self) -> TnefAttribute:
        """The current attribute; raises before the first advance."""
        if self._attribute is None:
            raise AttributeBoundaryError("No attribute has been read yet", offset=self.position)
        return self._attribute

    # ------------------------------------------------------------------
    # Primitive reads

    def _read_buffer(self, length: int) -> bytes:
        if length < 0:
            raise TruncatedStreamError(f"Invalid read length {length}", offset=self.position)
        offset = self.position
        data = self._stream.read(length)
        if len(data) != length:
            logger.error("Short read at offset %d: wanted %d, got %d", offset, length, len(data))
            raise TruncatedStreamError("Invalid stream", offset=offset)
        return data

    def _update_checksum(self, data: bytes) -> None:
        self._checksum = (self._checksum + sum(data)) & 0xFFFF

    def read_bytes(self, length: int) -> bytes:
        data = self._read_buffer(length)
        self._update_checksum(data)
        return data

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_int16(self) -> int:
        return _INT16.unpack(self.read_bytes(2))[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read_bytes(4))[0]

    def copy_bytes(self, sink: ByteSink, length: int) -> int:
        """Stream ``length`` bytes into ``sink`` in bounded chunks."""
        if length < 0:
            raise TruncatedStreamError(f"Invalid read length {length}", offset=self.position)
        left = length
        while left:
            chunk = self.read_bytes(min(left, CHUNK_SIZE))
            sink.write(chunk)
            left -= len(chunk)
        return length

    def read_string(self) -> str:
        """Read the whole current value as text, dropping one trailing NUL."""
        data = self.read_bytes(self.current_attribute.length)
        if data.endswith(b"\x00"):
            data = data[:-1]

        encoding = self.encoding
        if not encoding and self._oem_code_page:
            logger.warning("Unrecognised OEM code page %d", self._oem_code_page)
        return decode_text(data, encoding)

    # ------------------------------------------------------------------
    # Attribute cursor

    def _read_header(self) -> TnefHeader:
        signature = self.read_int32() & 0xFFFFFFFF
        if signature != TNEF_SIGNATURE:
            logger.error("Bad TNEF signature 0x%08x", signature)
            raise InvalidSignatureError("Invalid TNEF format", offset=0)

        header = TnefHeader(signature=signature, attachment_key=self.read_int16())
        logger.debug("TNEF header read, attachment key %d", header.attachment_key)
        return header

    def _validate_next_attribute_pos(self) -> None:
        if self._attribute is None:
            return

        expected = self._attribute.next_offset
        position = self.position
        if expected > position:
            if expected > self._size:
                logger.error(
                    "Attribute %s declares %d bytes past the end of the stream",
                    self._attribute.tag.name,
                    expected - self._size,
                )
                raise TruncatedStreamError("Invalid stream", offset=position)
            logger.debug("Skipping %d unread bytes of %s", expected - position, self._attribute.tag.name)
            self._stream.seek(expected)
        elif expected < position:
            logger.error(
                "Attribute %s read %d bytes past its boundary",
                self._attribute.tag.name,
                position - expected,
            )
            raise AttributeBoundaryError("The attribute was read incorrectly", offset=position)

    def next_attribute(self) -> bool:
        """
        Advance to the next attribute.

        Returns ``False`` once the stream is exhausted. Raises a
        :class:`~tnef_extractor.core.errors.TnefError` subclass when the
        stream is truncated, the previous attribute was over-read or the
        framing holds an unknown level or tag.
        """
        self._validate_next_attribute_pos()

        if self.position >= self._size:
            return False

        offset = self.position
        level = level_from_byte(self.read_byte(), offset=offset)
        tag = tag_from_int(self.read_int32(), offset=offset + 1)
        length = self.read_int32()

        self._attribute = TnefAttribute(level=level, tag=tag, length=length, value_start=self.position)
        self._checksum = 0
        logger.debug("Attribute %s/%s, %d bytes at offset %d", level.name, tag.name, length, offset)

        self._read_bootstrap_value()
        return True

    def _read_bootstrap_value(self) -> None:
        attribute = self.current_attribute
        if attribute.level is not AttributeLevel.MESSAGE:
            return

        if attribute.tag is AttributeTag.TNEF_VERSION:
            version = self.read_int32()
            if not self._version_seen:
                self._tnef_version = version
                self._version_seen = True
                logger.debug("TNEF version 0x%08x", version & 0xFFFFFFFF)
        elif attribute.tag is AttributeTag.OEM_CODEPAGE:
            code_page = self.read_int32()
            if not self._code_page_seen:
                self._oem_code_page = code_page
                self._code_page_seen = True
                logger.debug("OEM code page %d (%s)", code_page, self.encoding or "unknown")

    def validate_checksum(self) -> bool:
        """
        Check the stored checksum when exactly the declared value was read.

        Returns ``True`` when the checksum was verified and ``False`` when the
        cursor is not at the end of the value, in which case nothing is read.
        """
        attribute = self._attribute
        if attribute is None or attribute.value_end != self.position:
            return False

        actual = self.checksum
        offset = self.position
        expected = self.read_int16()
        if actual != expected:
            logger.error("Checksum mismatch for %s: stored %d, computed %d", attribute.tag.name, expected, actual)
            raise ChecksumMismatchError(expected, actual, offset=offset)
        return True
