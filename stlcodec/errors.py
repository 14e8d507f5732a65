# stlcodec/errors.py
from __future__ import annotations

import warnings
from typing import Optional


class ParserError(Exception):
    """Raised when an STL source cannot be decoded.

    ``path`` is the source file (None for in-memory sources) and ``line`` the
    1-based line number for ASCII input.
    """

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.line = line


class TruncatedInput(ParserError):
    """Binary stream ended before the declared triangle count was read."""

    def __init__(self, message: str, path: Optional[str] = None, index: Optional[int] = None,
                 expected: Optional[int] = None):
        super().__init__(message, path=path)
        self.index = index
        self.expected = expected


class IncompleteFacet(ParserError):
    """``endfacet`` reached with fewer than three vertices."""


class MalformedVertex(ParserError):
    """``vertex`` line whose coordinates cannot be read as floats."""


class CoordinateOutOfRange(ParserError):
    """Coordinate that does not fit a single-precision float."""


class DegenerateNormal(UserWarning):
    """A supplied or derived normal has zero magnitude."""


def warn_degenerate(message: str, stacklevel: int = 3) -> None:
    warnings.warn(message, DegenerateNormal, stacklevel=stacklevel)
