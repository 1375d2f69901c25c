"""Core TNEF types, tables and errors."""

from .codepages import decode_text, encoding_for_code_page
from .constants import TNEF_SIGNATURE, AttributeLevel, AttributeTag, AttributeType
from .errors import (
    AttributeBoundaryError,
    ChecksumMismatchError,
    InvalidSignatureError,
    TnefError,
    TruncatedStreamError,
    UnknownAttributeError,
    UnknownAttributeLevelError,
    UnknownAttributeTagError,
)
from .models import AttributeRecord, TnefAttribute, TnefHeader, TnefSummary

__all__ = [
    "TNEF_SIGNATURE",
    "AttributeBoundaryError",
    "AttributeLevel",
    "AttributeRecord",
    "AttributeTag",
    "AttributeType",
    "ChecksumMismatchError",
    "InvalidSignatureError",
    "TnefAttribute",
    "TnefError",
    "TnefHeader",
    "TnefSummary",
    "TruncatedStreamError",
    "UnknownAttributeError",
    "UnknownAttributeLevelError",
    "UnknownAttributeTagError",
    "decode_text",
    "encoding_for_code_page",
]
