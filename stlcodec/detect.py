# stlcodec/detect.py
from __future__ import annotations

import enum
import logging
from typing import BinaryIO

from .config import ASCII_MAGIC, HEADER_SIZE

logger = logging.getLogger(__name__)


class StlFormat(enum.Enum):
    BINARY = "binary"
    ASCII = "ascii"


def detect_header(header: bytes) -> StlFormat:
    """Classify by the literal ``solid `` prefix.

    Heuristic only: a binary file whose comment starts with ``solid `` reads
    as ASCII, an ASCII file without it reads as binary.
    """
    if header[:HEADER_SIZE].startswith(ASCII_MAGIC):
        return StlFormat.ASCII
    return StlFormat.BINARY


def detect_format(stream: BinaryIO) -> StlFormat:
    """Peek at the header of a seekable stream; the position is restored."""
    start = stream.tell()
    try:
        header = stream.read(HEADER_SIZE)
    finally:
        stream.seek(start)
    fmt = detect_header(header)
    logger.debug("Detected %s STL from %d header bytes", fmt.value, len(header))
    return fmt
