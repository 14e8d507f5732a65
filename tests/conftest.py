"""Test configuration and fixtures."""

import struct
import sys
from pathlib import Path

import pytest

# Add project root to path so imports work without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

SAMPLE_ASCII = """solid test
facet normal 0 0 1
outer loop
vertex 0 0 0
vertex 1 0 0
vertex 0 1 0
endloop
endfacet
endsolid test
"""

TWO_FACET_ASCII = """solid pair
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 2 0 0
      vertex 0 2 0
    endloop
  endfacet
  facet normal 0 0 0
    outer loop
      vertex 0 0 1.5
      vertex -1 0 1.5
      vertex 0 -3 1.5
    endloop
  endfacet
endsolid pair
"""


def make_binary(records, count=None, header=b"test binary header"):
    """Build binary STL bytes from (normal, (v0, v1, v2)) tuples."""
    out = header[:80].ljust(80, b"\x00")
    out += struct.pack("<I", len(records) if count is None else count)
    for normal, verts in records:
        out += struct.pack("<3f", *normal)
        for v in verts:
            out += struct.pack("<3f", *v)
        out += struct.pack("<H", 0)
    return out


@pytest.fixture
def sample_ascii() -> str:
    return SAMPLE_ASCII


@pytest.fixture
def two_facet_ascii() -> str:
    return TWO_FACET_ASCII


@pytest.fixture
def unit_triangle_binary() -> bytes:
    return make_binary([((0.0, 0.0, 1.0), ((0, 0, 0), (1, 0, 0), (0, 1, 0)))])


@pytest.fixture
def sample_ascii_file(tmp_path) -> Path:
    path = tmp_path / "sample_ascii.stl"
    path.write_text(SAMPLE_ASCII, encoding="utf-8")
    return path


@pytest.fixture
def two_facet_file(tmp_path) -> Path:
    path = tmp_path / "pair.stl"
    path.write_text(TWO_FACET_ASCII, encoding="utf-8")
    return path
