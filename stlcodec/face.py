# stlcodec/face.py
"""
Face: one STL facet.

A face holds up to three vertex positions and, optionally, a triple of
per-vertex normals read from the source file ("special" normals). When the
supplied normals are missing or any of them has zero length the face derives
its normal from the vertex winding instead.
"""
from __future__ import annotations

import struct
from typing import List, Optional, Sequence, Tuple

from .config import RECORD_FORMAT
from .errors import warn_degenerate
from .vector import Vector3

NormalTriple = Tuple[Vector3, Vector3, Vector3]

_RECORD = struct.Struct(RECORD_FORMAT)

# float32 unit normals read back from a file are within a few ulps of 1
_UNIT_TOLERANCE = 1e-6


def _coerce_normals(normals: Optional[Sequence[Vector3]]) -> Optional[NormalTriple]:
    if normals is None:
        return None
    normals = list(normals)[:3]
    if len(normals) < 3:
        return None
    return (normals[0], normals[1], normals[2])


class Face:
    def __init__(self, positions: Optional[Sequence[Vector3]] = None,
                 normals: Optional[Sequence[Vector3]] = None):
        self._positions: List[Vector3] = []
        self._normals = _coerce_normals(normals)
        if positions:
            for p in positions:
                self.add_position(p)

    # ---- construction ----
    def add_position(self, position: Vector3) -> None:
        """Append a vertex; silently ignored once three are present."""
        if len(self._positions) < 3:
            self._positions.append(position)

    @property
    def complete(self) -> bool:
        return len(self._positions) == 3

    @property
    def positions(self) -> Tuple[Vector3, ...]:
        return tuple(self._positions)

    @property
    def normals(self) -> Optional[NormalTriple]:
        """Normals as supplied by the source, valid or not."""
        return self._normals

    @property
    def special_normals(self) -> bool:
        """True when supplied normals exist and all three are non-zero."""
        if self._normals is None:
            return False
        return all(n.magnitude() > 0 for n in self._normals)

    # ---- shading ----
    def derived_normal(self) -> Vector3:
        """Unnormalized ``cross(b - a, c - a)``; zero vector if incomplete."""
        if not self.complete:
            return Vector3.zero()
        a, b, c = self._positions
        return (b - a).cross(c - a)

    def effective_normals(self) -> NormalTriple:
        if self.special_normals:
            return self._normals  # type: ignore[return-value]
        n = self.derived_normal()
        return (n, n, n)

    def _facet_normal(self) -> Optional[Vector3]:
        """Unit facet normal, or None for a degenerate face."""
        n0, n1, n2 = self.effective_normals()
        if self.special_normals and n0 == n1 == n2 and abs(n0.magnitude() - 1.0) <= _UNIT_TOLERANCE:
            # already unit length (e.g. read back from binary); keep bit-for-bit
            return n0
        avg = (n0 + n1 + n2) / 3.0
        if avg.magnitude() == 0:
            return None
        return avg.normalize()

    @property
    def degenerate(self) -> bool:
        """True when no facet normal can be derived (zero-area triangle)."""
        return self._facet_normal() is None

    def single_normal(self) -> Vector3:
        """Averaged, normalized facet normal; zero vector for degenerate faces."""
        n = self._facet_normal()
        if n is None:
            warn_degenerate("degenerate face normal, using zero vector")
            return Vector3.zero()
        return n

    # ---- output ----
    def to_stl(self, kind: str):
        if kind == "binary":
            return self.to_binary_stl()
        elif kind == "ascii":
            return self.to_ascii_stl()
        raise ValueError(f"Unknown STL kind: {kind!r}")

    def to_binary_stl(self) -> bytes:
        """One 50-byte binary STL record, or b"" for an incomplete face.

        Degenerate faces get a zero normal without a warning; encode_binary
        reports them once per mesh.
        """
        if not self.complete:
            return b""
        a, b, c = self._positions
        normal = self._facet_normal()
        if normal is None:
            normal = Vector3.zero()
        return _RECORD.pack(*normal, *a, *b, *c, 0)

    def to_ascii_stl(self) -> str:
        # not implemented; callers get empty output
        return ""

    def to_obj(self) -> str:
        return ""

    def __repr__(self) -> str:
        pos = ", ".join(repr(p) for p in self._positions)
        if self.special_normals:
            return f"<Face p=[{pos}] n={list(self._normals)}>"  # type: ignore[arg-type]
        return f"<Face p=[{pos}]>"
