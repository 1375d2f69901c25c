"""
OEM code page resolution and text decoding for TNEF string attributes.

The table is scanned linearly and the first entry wins, so for code pages
listed more than once (28591, 866, 932, 50220) the order below decides
which alias name is reported.
"""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)

CHARSET_CODE_PAGES: tuple[tuple[int, str], ...] = (
    (1250, "windows-1250"),
    (1251, "windows-1251"),
    (1252, "windows-1252"),
    (1253, "windows-1253"),
    (1254, "windows-1254"),
    (1255, "windows-1255"),
    (1256, "windows-1256"),
    (1257, "windows-1257"),
    (1258, "windows-1258"),
    (28591, "iso-8859-1"),
    (28592, "iso-8859-2"),
    (28593, "iso-8859-3"),
    (28594, "iso-8859-4"),
    (28595, "iso-8859-5"),
    (28596, "iso-8859-6"),
    (28597, "iso-8859-7"),
    (28598, "iso-8859-8"),
    (28599, "iso-8859-9"),
    (28603, "iso-8859-13"),
    (28605, "iso-8859-15"),
    (866, "ibm866"),
    (866, "cp866"),
    (1200, "utf-16"),
    (12000, "utf-32"),
    (65000, "utf-7"),
    (65001, "utf-8"),
    (20127, "us-ascii"),
    (28591, "Latin1"),
    (10007, "x-mac-cyrillic"),
    (21866, "koi8-u"),
    (20866, "koi8-r"),
    (932, "shift-jis"),
    (932, "shift_jis"),
    (50220, "iso-2022-jp"),
    (50220, "csISO2022JP"),
)

# Table names with no Python codec of the same name
CODEC_ALIASES: dict[str, str] = {
    "x-mac-cyrillic": "mac_cyrillic",
}

# Minimum chardet confidence before a detected charset is trusted
DETECTION_CONFIDENCE = 0.7


def encoding_for_code_page(code_page: int) -> str:
    """Return the charset name for ``code_page`` or ``""`` when unknown."""
    for number, name in CHARSET_CODE_PAGES:
        if number == code_page:
            return name
    return ""


def decode_text(data: bytes, encoding: str = "") -> str:
    """
    Decode ``data`` using ``encoding``, tolerating empty or unknown names.

    Unknown names fall back to charset detection and finally to UTF-8.
    Undecodable bytes are replaced, never raised.
    """
    if encoding:
        codec = CODEC_ALIASES.get(encoding.lower(), encoding)
        try:
            return data.decode(codec, errors="replace")
        except LookupError:
            logger.debug("No codec for %r; detecting charset", encoding)

    if data:
        detected = chardet.detect(data)
        guess = detected.get("encoding")
        if guess and (detected.get("confidence") or 0.0) > DETECTION_CONFIDENCE:
            try:
                return data.decode(guess, errors="replace")
            except LookupError:
                logger.debug("chardet suggested unsupported codec %r", guess)

    return data.decode("utf-8", errors="replace")
