"""
Typed models produced while walking a TNEF stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import AttributeLevel, AttributeTag, AttributeType, type_of_tag
from .limits import CHECKSUM_SIZE


@dataclass(slots=True, frozen=True)
class TnefHeader:
    signature: int
    attachment_key: int


@dataclass(slots=True, frozen=True)
class TnefAttribute:
    """Framing of the attribute currently under the reader's cursor."""

    level: AttributeLevel
    tag: AttributeTag
    length: int  # declared, signed 32-bit
    value_start: int  # absolute offset of the first value byte

    @property
    def type(self) -> AttributeType:
        return type_of_tag(self.tag)

    @property
    def value_end(self) -> int:
        return self.value_start + self.length

    @property
    def next_offset(self) -> int:
        """Offset of the following attribute, past the trailing checksum."""
        return self.value_end + CHECKSUM_SIZE


@dataclass(slots=True)
class AttributeRecord:
    level: AttributeLevel
    tag: AttributeTag
    type: AttributeType
    length: int
    offset: int  # value start
    sha256: str | None = None
    text: str | None = None


@dataclass(slots=True)
class TnefSummary:
    attachment_key: int
    tnef_version: int = 0
    oem_code_page: int = 0
    encoding: str = ""
    subject: str | None = None
    attachment_titles: list[str] = field(default_factory=list)
    records: list[AttributeRecord] = field(default_factory=list)

    @property
    def attribute_count(self) -> int:
        return len(self.records)

    @property
    def message_attribute_count(self) -> int:
        return sum(1 for record in self.records if record.level is AttributeLevel.MESSAGE)

    @property
    def attachment_attribute_count(self) -> int:
        return sum(1 for record in self.records if record.level is AttributeLevel.ATTACHMENT)

    @property
    def attachment_count(self) -> int:
        # Each attachment opens with its rendering attribute
        return sum(1 for record in self.records if record.tag is AttributeTag.ATTACH_REND_DATA)
