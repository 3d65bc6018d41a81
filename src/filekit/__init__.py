from __future__ import annotations

from .errors import IoFailure, MalformedOffset, UsageError
from .offsets import ExplicitZero, Offset, Signed, parse_offset, resolve
from .tail import TailConfig, extract_bytes, extract_lines, measure, tail_files

__all__ = [
    "ExplicitZero",
    "IoFailure",
    "MalformedOffset",
    "Offset",
    "Signed",
    "TailConfig",
    "UsageError",
    "extract_bytes",
    "extract_lines",
    "measure",
    "parse_offset",
    "resolve",
    "tail_files",
]
