"""
Fixed TNEF enumerations: signature, attribute levels, tags and value types.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import UnknownAttributeLevelError, UnknownAttributeTagError

# Stored little-endian, so the stream starts with 78 9F 3E 22
TNEF_SIGNATURE = 0x223E9F78

TYPE_MASK = 0xF0000


class AttributeLevel(IntEnum):
    MESSAGE = 0x01
    ATTACHMENT = 0x02


class AttributeType(IntEnum):
    TRIPLES = 0x0000
    STRING = 0x0001
    TEXT = 0x0002
    DATE = 0x0003
    SHORT = 0x0004
    LONG = 0x0005
    BYTE = 0x0006
    WORD = 0x0007
    DWORD = 0x0008
    MAX = 0x0009


class AttributeTag(IntEnum):
    """TNEF attribute ids; bits 16-19 carry the value type."""

    NULL = 0x00000000
    OWNER = 0x00060000
    SENT_FOR = 0x00060001
    DELEGATE = 0x00060002
    DATE_START = 0x00030006
    DATE_END = 0x00030007
    AID_OWNER = 0x00050008
    REQUEST_RES = 0x00040009
    FROM = 0x00008000
    SUBJECT = 0x00018004
    DATE_SENT = 0x00038005
    DATE_RECEIVED = 0x00038006
    MESSAGE_STATUS = 0x00068007
    MESSAGE_CLASS = 0x00078008
    MESSAGE_ID = 0x00018009
    PARENT_ID = 0x0001800A
    CONVERSATION_ID = 0x0001800B
    BODY = 0x0002800C
    PRIORITY = 0x0004800D
    ATTACH_DATA = 0x0006800F
    ATTACH_TITLE = 0x00018010
    ATTACH_META_FILE = 0x00068011
    ATTACH_CREATE_DATE = 0x00038012
    ATTACH_MODIFY_DATE = 0x00038013
    DATE_MODIFIED = 0x00038020
    ATTACH_TRANSPORT_FILENAME = 0x00069001
    ATTACH_REND_DATA = 0x00069002
    MAPI_PROPS = 0x00069003
    RECIP_TABLE = 0x00069004
    ATTACHMENT = 0x00069005
    TNEF_VERSION = 0x00089006
    OEM_CODEPAGE = 0x00069007
    ORIGINAL_MESSAGE_CLASS = 0x00070006


def level_from_byte(value: int, *, offset: int | None = None) -> AttributeLevel:
    """Map a raw level byte, raising for values outside the table."""
    try:
        return AttributeLevel(value)
    except ValueError:
        raise UnknownAttributeLevelError(value, offset=offset) from None


def tag_from_int(value: int, *, offset: int | None = None) -> AttributeTag:
    """Map a raw 32-bit tag (signed or unsigned), raising when unmapped."""
    raw = value & 0xFFFFFFFF
    try:
        return AttributeTag(raw)
    except ValueError:
        raise UnknownAttributeTagError(raw, offset=offset) from None


def type_of_tag(tag: int) -> AttributeType:
    return AttributeType((tag & TYPE_MASK) >> 16)
