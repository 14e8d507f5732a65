# stlcodec/cli.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import DEFAULT_HEADER_COMMENT, LOG_FORMAT, get_log_level
from .errors import ParserError
from .mesh import load
from .stats import compute_stats

logger = logging.getLogger("stlcodec")

_DEF_HELP = """
Examples:
  python -m stlcodec info part.stl other.stl
  python -m stlcodec convert part_ascii.stl part_binary.stl
  python -m stlcodec -v convert part.stl out.stl --comment "exported part"
"""


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    # basicConfig touches the root logger; only configure once
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("stlcodec").setLevel(level)


def _fmt(v) -> str:
    return f"({v.x:.6f}, {v.y:.6f}, {v.z:.6f})"


def _info(paths: List[str]) -> int:
    status = 0
    for path in paths:
        try:
            mesh = load(path)
        except (ParserError, OSError) as e:
            logger.error("Failed to read %s: %s", path, e)
            status = 1
            continue
        print(f"FILE: {path}")
        print(f"  FORMAT: {mesh.format.value if mesh.format else 'unknown'}")
        print(f"  FACES: {len(mesh)}")
        if len(mesh) == 0:
            continue
        stats = compute_stats(mesh)
        print(f"  VERTICES: {stats.vertex_count}")
        print(f"  MIN: {_fmt(stats.minimum)}")
        print(f"  MAX: {_fmt(stats.maximum)}")
        print(f"  AVERAGE: {_fmt(stats.average)}")
        print(f"  SIZE: {_fmt(stats.size)}")
    return status


def _convert(src: str, out: str, comment: str) -> int:
    try:
        mesh = load(src)
        mesh.save(out, comment=comment)
    except (ParserError, OSError) as e:
        logger.error("Failed to convert %s: %s", src, e)
        return 1
    return 0


def _cli(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="stlcodec", description="stlcodec: read ASCII/binary STL, write binary STL",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Print face count and vertex statistics")
    info.add_argument("paths", nargs="+")

    conv = sub.add_parser("convert", help="Re-encode any STL as binary STL")
    conv.add_argument("input")
    conv.add_argument("output")
    conv.add_argument("--comment", default=DEFAULT_HEADER_COMMENT, help="Header comment (max 80 bytes)")

    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "info":
        return _info(args.paths)
    return _convert(args.input, args.output, args.comment)
