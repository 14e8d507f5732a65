# stlcodec/mesh.py
from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .ascii import decode_ascii
from .binary import decode_binary, encode_binary
from .config import DEFAULT_HEADER_COMMENT
from .detect import StlFormat, detect_format
from .face import Face
from .vector import Vector3

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]


# --------------
# Mesh container
# --------------

class Mesh:
    """Ordered, complete faces in the order they were read."""

    def __init__(self, faces: Optional[Iterable[Face]] = None, name: str = "mesh",
                 source: Optional[str] = None, fmt: Optional[StlFormat] = None):
        self._faces: List[Face] = []
        self.name = name
        self.source = source
        self.format = fmt
        for face in faces or ():
            self.add_face(face)

    def add_face(self, face: Face) -> None:
        if not face.complete:
            raise ValueError(f"Mesh accepts only complete faces, got {face!r}")
        self._faces.append(face)

    def faces(self) -> Tuple[Face, ...]:
        return tuple(self._faces)

    def positions(self) -> Iterator[Vector3]:
        for face in self._faces:
            yield from face.positions

    def vertex_array(self) -> np.ndarray:
        """All positions as an (n_faces * 3, 3) float64 array."""
        if not self._faces:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([p.as_tuple() for p in self.positions()], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._faces)

    def __iter__(self) -> Iterator[Face]:
        return iter(self.faces())

    def __repr__(self) -> str:
        return f"<Mesh {self.name!r} faces={len(self._faces)}>"

    # ---- output ----
    def to_binary(self, comment: str = DEFAULT_HEADER_COMMENT) -> bytes:
        return encode_binary(self._faces, comment)

    def save(self, path: Union[str, "os.PathLike[str]"], comment: str = DEFAULT_HEADER_COMMENT) -> None:
        """Write a binary STL."""
        data = self.to_binary(comment)
        with open(path, "wb") as f:
            f.write(data)
        logger.info("Wrote %d faces to %s", len(self._faces), os.fspath(path))

    def to_ascii(self) -> str:
        # not implemented; returns empty output
        return "".join(face.to_ascii_stl() for face in self._faces)

    def to_obj(self) -> str:
        return "".join(face.to_obj() for face in self._faces)


# -------
# Loading
# -------

def _decode_stream(stream: BinaryIO, path: Optional[str], name: str) -> Mesh:
    fmt = detect_format(stream)
    logger.info("Parsing %s...", path or "<bytes>")
    if fmt is StlFormat.ASCII:
        logger.info("The source is an ASCII STL file.")
        text = io.TextIOWrapper(stream, encoding="utf-8", errors="replace")
        try:
            faces = decode_ascii(text, path)
        finally:
            # leave the underlying stream to its owner
            text.detach()
    else:
        logger.info("The source is a binary STL file.")
        faces = decode_binary(stream, path)
    logger.info("%s contains %d faces.", path or "<bytes>", len(faces))
    return Mesh(faces, name=name, source=path, fmt=fmt)


def load(source: Source, name: Optional[str] = None) -> Mesh:
    """Read a binary or ASCII STL from a path, bytes, or binary stream.

    Raises a ParserError subclass (TruncatedInput, IncompleteFacet,
    MalformedVertex) on malformed input.
    """
    if isinstance(source, (bytes, bytearray)):
        return _decode_stream(io.BytesIO(bytes(source)), None, name or "mesh")

    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        if name is None:
            name = os.path.splitext(os.path.basename(path))[0] or "mesh"
        with open(path, "rb") as f:
            return _decode_stream(f, path, name)

    if hasattr(source, "read"):
        stream = source
        if not (hasattr(stream, "seekable") and stream.seekable()):
            stream = io.BytesIO(stream.read())
        path = getattr(source, "name", None)
        path = path if isinstance(path, str) else None
        return _decode_stream(stream, path, name or "mesh")

    raise TypeError(f"Cannot load STL from {type(source).__name__}")
