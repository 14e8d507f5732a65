"""
stlcodec: read binary and ASCII STL into a face list, write binary STL.

Highlights
---------
• Format autodetection from the 80-byte header
• Binary and ASCII decoders producing one uniform Mesh of Faces
• Face normals derived from vertex winding when missing or zero-length
• Deterministic binary STL encoder
• Vertex statistics and a small CLI (``python -m stlcodec``)
"""
from .detect import StlFormat, detect_format, detect_header
from .errors import (CoordinateOutOfRange, DegenerateNormal, IncompleteFacet, MalformedVertex, ParserError,
                     TruncatedInput)
from .face import Face
from .mesh import Mesh, load
from .stats import MeshStats, compute_stats
from .vector import Vector3

__all__ = [
    "CoordinateOutOfRange",
    "DegenerateNormal",
    "Face",
    "IncompleteFacet",
    "MalformedVertex",
    "Mesh",
    "MeshStats",
    "ParserError",
    "StlFormat",
    "TruncatedInput",
    "Vector3",
    "compute_stats",
    "detect_format",
    "detect_header",
    "load",
]

__version__ = "0.1.0"
