# stlcodec/ascii.py
"""
ASCII STL reader.

    solid <name>
      facet normal <nx> <ny> <nz>
        outer loop
          vertex <x> <y> <z>
          vertex <x> <y> <z>
          vertex <x> <y> <z>
        endloop
      endfacet
    endsolid <name>

Only ``facet``, ``vertex`` and ``endfacet`` lines drive the parser; every other
line is skipped. Keywords are matched case-sensitively as prefixes of the
stripped line.
"""
from __future__ import annotations

import logging
import struct
from typing import Iterable, List, Optional, Sequence

from .errors import CoordinateOutOfRange, IncompleteFacet, MalformedVertex, warn_degenerate
from .face import Face
from .vector import Vector3

logger = logging.getLogger(__name__)


def _parse_scalars(tokens: Sequence[str]) -> Optional[Vector3]:
    if len(tokens) < 3:
        return None
    try:
        return Vector3.from_iterable(tokens[:3])
    except ValueError:
        return None


def _fits_float32(v: Vector3) -> bool:
    try:
        struct.pack("<3f", *v)
    except OverflowError:
        return False
    return True


def _facet_normal(tokens: Sequence[str]) -> Optional[Vector3]:
    """Normalized normal from a ``facet normal`` line, None when unusable."""
    if len(tokens) != 5 or tokens[1].lower() != "normal":
        return None
    normal = _parse_scalars(tokens[2:5])
    if normal is None:
        return None
    if normal.magnitude() > 0:
        return normal.normalize()
    return None


def decode_ascii(lines: Iterable[str], path: Optional[str] = None) -> List[Face]:
    where = path or "<bytes>"
    faces: List[Face] = []
    pending: Optional[Face] = None
    zero_normals = 0

    for line_num, line in enumerate(lines, start=1):
        line = line.strip()

        # start building a new face
        if line.startswith("facet"):
            tokens = line.split()
            normal = _facet_normal(tokens)
            if normal is not None:
                pending = Face(normals=[normal, normal, normal])
            else:
                if len(tokens) == 5 and tokens[1].lower() == "normal":
                    logger.debug("Zero or unreadable facet normal at line %d in %s", line_num, where)
                    if _parse_scalars(tokens[2:5]) is not None:
                        zero_normals += 1
                pending = Face()

        elif line.startswith("vertex") and pending is not None:
            tokens = line.split()
            position = _parse_scalars(tokens[1:])
            if position is None:
                raise MalformedVertex(
                    f"Malformed vertex at line {line_num} in file {where}: {line!r}",
                    path=path, line=line_num)
            if not _fits_float32(position):
                raise CoordinateOutOfRange(
                    f"Vertex outside single-precision range at line {line_num} in file {where}: {line!r}",
                    path=path, line=line_num)
            pending.add_position(position)

        elif line.startswith("endfacet"):
            if pending is not None and pending.complete:
                faces.append(pending)
                pending = None
            else:
                raise IncompleteFacet(
                    f"Incomplete facet description at line {line_num} in file {where}.",
                    path=path, line=line_num)

    if zero_normals:
        logger.warning("%d facets in %s have zero-length normals; deriving from vertices",
                       zero_normals, where)
        warn_degenerate(f"{zero_normals} zero-length facet normals in {where}")
    logger.debug("Parsed %d triangles from %s", len(faces), where)
    return faces
