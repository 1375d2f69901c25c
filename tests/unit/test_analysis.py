"""
Unit tests for whole-stream walking and summaries.
"""

from __future__ import annotations

import hashlib
import struct

import pytest

from tnef_extractor.core.analysis import iter_attributes, summarize_tnef
from tnef_extractor.core.constants import AttributeLevel, AttributeTag, AttributeType
from tnef_extractor.core.errors import ChecksumMismatchError, InvalidSignatureError
from tnef_extractor.tnef_reader import TnefReader

MESSAGE = AttributeLevel.MESSAGE
ATTACHMENT = AttributeLevel.ATTACHMENT


def test_iter_attributes_records(make_stream, make_attribute):
    payload = b"\x00\x01binary\xff" * 3
    reader = TnefReader(
        make_stream(
            make_attribute(MESSAGE, AttributeTag.TNEF_VERSION, struct.pack("<i", 0x00010000)),
            make_attribute(MESSAGE, AttributeTag.SUBJECT, b"Status\x00"),
            make_attribute(ATTACHMENT, AttributeTag.ATTACH_DATA, payload),
        )
    )

    records = list(iter_attributes(reader))

    assert [record.tag for record in records] == [
        AttributeTag.TNEF_VERSION,
        AttributeTag.SUBJECT,
        AttributeTag.ATTACH_DATA,
    ]
    version, subject, data = records
    assert version.sha256 is None
    assert version.type is AttributeType.DWORD
    assert subject.text == "Status"
    assert subject.sha256 is None
    assert data.level is AttributeLevel.ATTACHMENT
    assert data.length == len(payload)
    assert data.sha256 == hashlib.sha256(payload).hexdigest()
    assert data.text is None
    assert reader.tnef_version == 0x00010000


def test_iter_attributes_offsets(make_stream, make_attribute):
    reader = TnefReader(
        make_stream(
            make_attribute(MESSAGE, AttributeTag.BODY, b"abc"),
            make_attribute(MESSAGE, AttributeTag.BODY, b"de"),
        )
    )

    offsets = [record.offset for record in iter_attributes(reader)]

    # header (6) + framing (9); then value (3) + checksum (2) + framing (9)
    assert offsets == [15, 29]


def test_iter_attributes_validates_checksums(make_stream, make_attribute):
    reader = TnefReader(make_stream(make_attribute(MESSAGE, AttributeTag.BODY, b"abc", checksum=1)))

    with pytest.raises(ChecksumMismatchError):
        list(iter_attributes(reader))


def test_iter_attributes_without_validation(make_stream, make_attribute):
    reader = TnefReader(
        make_stream(
            make_attribute(MESSAGE, AttributeTag.BODY, b"abc", checksum=1),
            make_attribute(MESSAGE, AttributeTag.BODY, b"def"),
        )
    )

    assert len(list(iter_attributes(reader, validate=False))) == 2


def test_summarize_stream_is_left_open(make_stream, make_attribute):
    stream = make_stream(
        make_attribute(MESSAGE, AttributeTag.OEM_CODEPAGE, struct.pack("<ii", 1252, 0)),
        make_attribute(MESSAGE, AttributeTag.SUBJECT, "Café menu\x00".encode("cp1252")),
        attachment_key=77,
    )

    summary = summarize_tnef(stream)

    assert not stream.closed
    assert summary.attachment_key == 77
    assert summary.oem_code_page == 1252
    assert summary.encoding == "windows-1252"
    assert summary.subject == "Café menu"
    assert summary.attribute_count == 2
    assert summary.attachment_count == 0


def test_summarize_path(tmp_path, make_stream, make_attribute):
    path = tmp_path / "winmail.dat"
    path.write_bytes(make_stream(make_attribute(MESSAGE, AttributeTag.BODY, b"text")).getvalue())

    summary = summarize_tnef(path)

    assert summary.message_attribute_count == 1
    assert summary.records[0].sha256 == hashlib.sha256(b"text").hexdigest()


def test_summarize_rejects_non_tnef(tmp_path):
    path = tmp_path / "not-tnef.bin"
    path.write_bytes(b"PK\x03\x04" + b"\x00" * 20)

    with pytest.raises(InvalidSignatureError):
        summarize_tnef(str(path))
