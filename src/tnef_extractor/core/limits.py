"""
Reader tuning constants shared by the reader and the analysis helpers.
"""

from __future__ import annotations

# Largest single read issued while streaming an attribute value to a sink
CHUNK_SIZE: int = 4096

# Width of the checksum word that trails every attribute value
CHECKSUM_SIZE: int = 2
