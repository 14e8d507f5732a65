# stlcodec/binary.py
"""
Binary STL reader and writer.

Layout (little-endian):
    80 bytes   header/comment
    uint32     triangle count N
    N x 50     normal (3f), positions (9f), attribute (H)
"""
from __future__ import annotations

import logging
import struct
from typing import BinaryIO, Iterable, List, Optional

from .config import (COUNT_SIZE, DEFAULT_HEADER_COMMENT, HEADER_SIZE, RECORD_FORMAT,
                     RECORD_SIZE)
from .errors import TruncatedInput, warn_degenerate
from .face import Face
from .vector import Vector3

logger = logging.getLogger(__name__)

_COUNT = struct.Struct("<I")
_RECORD = struct.Struct(RECORD_FORMAT)


# -------
# Reading
# -------

def decode_binary(stream: BinaryIO, path: Optional[str] = None) -> List[Face]:
    where = path or "<bytes>"
    header = stream.read(HEADER_SIZE)
    if len(header) < HEADER_SIZE:
        raise TruncatedInput(f"Binary STL header truncated ({len(header)} of {HEADER_SIZE} bytes) "
                             f"in {where}", path=path)
    raw_count = stream.read(COUNT_SIZE)
    if len(raw_count) < COUNT_SIZE:
        raise TruncatedInput(f"Binary STL triangle count missing in {where}", path=path)
    (expecting,) = _COUNT.unpack(raw_count)
    logger.debug("Binary STL %s declares %d triangles", where, expecting)

    faces: List[Face] = []
    degenerate = 0
    for i in range(expecting):
        data = stream.read(RECORD_SIZE)
        if len(data) < RECORD_SIZE:
            raise TruncatedInput(
                f"Binary STL ended at triangle {i} of {expecting} in {where}",
                path=path, index=i, expected=expecting)
        vals = _RECORD.unpack(data)
        normal = Vector3(vals[0], vals[1], vals[2])
        if normal.magnitude() == 0:
            degenerate += 1
        vertices = [
            Vector3(vals[3], vals[4], vals[5]),
            Vector3(vals[6], vals[7], vals[8]),
            Vector3(vals[9], vals[10], vals[11]),
        ]
        # vals[12] is the attribute byte count, unused
        faces.append(Face(vertices, [normal, normal, normal]))

    if degenerate:
        logger.warning("%d of %d facets in %s have zero-length normals; deriving from vertices",
                       degenerate, expecting, where)
        warn_degenerate(f"{degenerate} zero-length facet normals in {where}")
    return faces


# -------
# Writing
# -------

def encode_header(comment: str = DEFAULT_HEADER_COMMENT) -> bytes:
    """Comment bytes cut to 80 and null-padded to exactly 80."""
    raw = comment.encode("utf-8")[:HEADER_SIZE]
    return raw + bytes(HEADER_SIZE - len(raw))


def encode_binary(faces: Iterable[Face], comment: str = DEFAULT_HEADER_COMMENT) -> bytes:
    faces = list(faces)
    out = bytearray(encode_header(comment))
    out += _COUNT.pack(len(faces))
    degenerate = 0
    for face in faces:
        if face.complete and face.degenerate:
            degenerate += 1
        out += face.to_binary_stl()
    if degenerate:
        logger.warning("%d of %d faces are degenerate; wrote zero normals", degenerate, len(faces))
        warn_degenerate(f"{degenerate} degenerate faces written with zero normals")
    return bytes(out)
