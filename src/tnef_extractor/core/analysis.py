"""
Whole-stream TNEF walking helpers.

These routines drive :class:`~tnef_extractor.tnef_reader.TnefReader` over a
complete stream, fingerprint attribute values and verify every checksum.
Nothing is written to disk; structural errors from the reader propagate.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from tnef_extractor.core.constants import AttributeTag
from tnef_extractor.core.models import AttributeRecord, TnefSummary
from tnef_extractor.tnef_reader import TnefReader

logger = logging.getLogger(__name__)

# Attributes whose value is decoded as text while walking
TEXT_TAGS = frozenset({AttributeTag.SUBJECT, AttributeTag.ATTACH_TITLE})


class _DigestSink:
    """Write-only sink feeding a SHA-256 digest."""

    def __init__(self) -> None:
        self._digest = hashlib.sha256()

    def write(self, data: bytes) -> int:
        self._digest.update(data)
        return len(data)

    def hexdigest(self) -> str:
        return self._digest.hexdigest()


def iter_attributes(reader: TnefReader, *, validate: bool = True) -> Iterator[AttributeRecord]:
    """
    Yield one :class:`AttributeRecord` per attribute until the stream ends.

    Subject and attachment title values are decoded as text. Every other
    value still unread is drained into a SHA-256 digest; values already
    consumed by the reader itself (version, code page) carry no digest. With
    ``validate`` the stored checksum of each attribute is verified.
    """
    while reader.next_attribute():
        attribute = reader.current_attribute

        text: str | None = None
        sha256: str | None = None
        if reader.remaining == attribute.length and attribute.tag in TEXT_TAGS:
            text = reader.read_string()
        elif reader.remaining == attribute.length:
            sink = _DigestSink()
            reader.copy_bytes(sink, attribute.length)
            sha256 = sink.hexdigest()
        else:
            reader.copy_bytes(_DigestSink(), reader.remaining)

        if validate:
            reader.validate_checksum()

        yield AttributeRecord(
            level=attribute.level,
            tag=attribute.tag,
            type=attribute.type,
            length=attribute.length,
            offset=attribute.value_start,
            sha256=sha256,
            text=text,
        )


def _summarize(stream: BinaryIO, *, validate: bool) -> TnefSummary:
    reader = TnefReader(stream)
    records = list(iter_attributes(reader, validate=validate))

    summary = TnefSummary(
        attachment_key=reader.attachment_key,
        tnef_version=reader.tnef_version,
        oem_code_page=reader.oem_code_page,
        encoding=reader.encoding,
        records=records,
    )
    for record in records:
        if record.tag is AttributeTag.SUBJECT and summary.subject is None:
            summary.subject = record.text
        elif record.tag is AttributeTag.ATTACH_TITLE and record.text is not None:
            summary.attachment_titles.append(record.text)
    return summary


def summarize_tnef(source: str | Path | BinaryIO, *, validate: bool = True) -> TnefSummary:
    """
    Walk a whole TNEF stream and summarise it.

    ``source`` may be a path, which is opened and closed here, or an open
    binary stream, which is left open for the caller.
    """
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser()
        logger.info("Summarising TNEF file %s", path)
        with path.open("rb") as stream:
            return _summarize(stream, validate=validate)
    return _summarize(source, validate=validate)
