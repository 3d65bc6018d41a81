from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from .errors import UsageError
from .inputs import STDIN, open_input


@dataclass(frozen=True, slots=True)
class CommConfig:
    file1: str
    file2: str
    show_col1: bool = True
    show_col2: bool = True
    show_col3: bool = True
    insensitive: bool = False
    delimiter: str = "\t"


def _lines(source: BinaryIO, insensitive: bool) -> Iterator[str]:
    for raw in source:
        line = raw.decode("utf-8", errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line.lower() if insensitive else line


def format_row(config: CommConfig, column: int, value: str) -> str | None:
    """Lay out one value in column 1, 2 or 3; None when it is suppressed."""
    shown = (config.show_col1, config.show_col2, config.show_col3)
    if not shown[column - 1]:
        return None
    fields = ["" for visible in shown[: column - 1] if visible]
    fields.append(value)
    return config.delimiter.join(fields)


def merge(lines1: Iterator[str], lines2: Iterator[str]) -> Iterator[tuple[int, str]]:
    """Walk two sorted streams, yielding (column, line) pairs."""
    a = next(lines1, None)
    b = next(lines2, None)
    while a is not None or b is not None:
        if b is None or (a is not None and a < b):
            yield 1, a
            a = next(lines1, None)
        elif a is None or a > b:
            yield 2, b
            b = next(lines2, None)
        else:
            yield 3, a
            a = next(lines1, None)
            b = next(lines2, None)


def comm(config: CommConfig, out: TextIO) -> None:
    if config.file1 == STDIN and config.file2 == STDIN:
        raise UsageError('Both input files cannot be STDIN ("-")')

    with ExitStack() as stack:
        f1 = stack.enter_context(open_input(config.file1))
        f2 = stack.enter_context(open_input(config.file2))
        pairs = merge(_lines(f1, config.insensitive), _lines(f2, config.insensitive))
        for column, value in pairs:
            row = format_row(config, column, value)
            if row is not None:
                print(row, file=out)
