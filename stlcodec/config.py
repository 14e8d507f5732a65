# stlcodec/config.py
"""
Constants shared by the codec and the command line tool.

Binary layout sizes, the ASCII detection token, the default header comment
written by the encoder, and the logging defaults used by ``python -m stlcodec``.
"""
from __future__ import annotations

import logging
import os

HEADER_SIZE = 80
COUNT_SIZE = 4
# normal (3f) + 3 positions (9f) + attribute (H)
RECORD_SIZE = 50
RECORD_FORMAT = "<12fH"

ASCII_MAGIC = b"solid "

DEFAULT_HEADER_COMMENT = "stlcodec binary STL export"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "STLCODEC_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """Level named by $STLCODEC_LOG_LEVEL, or ``default`` when unset/unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return default
