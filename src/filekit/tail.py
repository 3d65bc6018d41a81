from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from .errors import IoFailure
from .inputs import STDIN, open_input
from .offsets import Offset, Signed, parse_offset, resolve


log = logging.getLogger(__name__)

DEFAULT_LINES = "10"


@dataclass(frozen=True, slots=True)
class TailConfig:
    files: tuple[str, ...]
    lines: Offset = Signed(-10)
    bytes: Offset | None = None  # selects byte mode when set
    quiet: bool = False

    @classmethod
    def from_tokens(
        cls,
        files: list[str],
        *,
        lines_token: str = DEFAULT_LINES,
        bytes_token: str | None = None,
        quiet: bool = False,
    ) -> TailConfig:
        """Parse both offset tokens up front; raises MalformedOffset."""
        return cls(
            files=tuple(files),
            lines=parse_offset(lines_token, unit="line"),
            bytes=(
                parse_offset(bytes_token, unit="byte")
                if bytes_token is not None
                else None
            ),
            quiet=quiet,
        )


def _read_lines(source: BinaryIO, name: str) -> Iterator[bytes]:
    try:
        yield from source
    except OSError as e:
        raise IoFailure(name, e) from e


def measure(source: BinaryIO, *, name: str = STDIN) -> tuple[int, int]:
    """Count (lines, bytes) in one forward pass, then rewind `source`."""
    lines = 0
    nbytes = 0
    for line in _read_lines(source, name):
        lines += 1
        nbytes += len(line)
    try:
        source.seek(0)
    except OSError as e:
        raise IoFailure(name, e) from e
    return lines, nbytes


def extract_lines(source: BinaryIO, start: int | None, out: BinaryIO, *, name: str = STDIN) -> None:
    if start is None:
        return
    for i, line in enumerate(_read_lines(source, name)):
        if i >= start:
            out.write(line)


def extract_bytes(source: BinaryIO, start: int | None, out: BinaryIO, *, name: str = STDIN) -> None:
    if start is None:
        return
    try:
        source.seek(start)
        buf = source.read()
    except OSError as e:
        raise IoFailure(name, e) from e
    if buf:
        # Arbitrary cut points may split a character; show it as U+FFFD.
        out.write(buf.decode("utf-8", errors="replace").encode("utf-8"))


def tail_file(source: BinaryIO, config: TailConfig, out: BinaryIO, *, name: str = STDIN) -> None:
    """Measure and extract one input.

    Read and seek failures on `source` raise `IoFailure`; failures writing to
    `out` propagate unchanged.
    """
    total_lines, total_bytes = measure(source, name=name)
    if config.bytes is not None:
        start = resolve(config.bytes, total_bytes)
        log.debug("bytes=%d start=%s", total_bytes, start)
        extract_bytes(source, start, out, name=name)
    else:
        start = resolve(config.lines, total_lines)
        log.debug("lines=%d start=%s", total_lines, start)
        extract_lines(source, start, out, name=name)


def tail_files(config: TailConfig, out: BinaryIO, err: TextIO) -> int:
    """Tail every input in order; returns the number of inputs that failed."""
    failures = 0
    multiple = len(config.files) > 1
    for file_num, name in enumerate(config.files):
        try:
            with open_input(name, seekable=True) as f:
                if multiple and not config.quiet:
                    sep = "\n" if file_num > 0 else ""
                    out.write(f"{sep}==> {name} <==\n".encode("utf-8"))
                tail_file(f, config, out, name=name)
        except IoFailure as e:
            failures += 1
            log.debug("skipping %s", name, exc_info=True)
            out.flush()
            print(e, file=err)
    return failures
