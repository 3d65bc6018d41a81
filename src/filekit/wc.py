from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from .errors import IoFailure
from .inputs import STDIN, open_input


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WcConfig:
    files: tuple[str, ...] = (STDIN,)
    lines: bool = True
    words: bool = True
    bytes: bool = True
    chars: bool = False

    @classmethod
    def from_flags(
        cls,
        files: list[str],
        *,
        lines: bool = False,
        words: bool = False,
        bytes_: bool = False,
        chars: bool = False,
    ) -> WcConfig:
        # No selection at all means the classic "lines words bytes" triple.
        if not (lines or words or bytes_ or chars):
            lines = words = bytes_ = True
        return cls(
            files=tuple(files) or (STDIN,),
            lines=lines,
            words=words,
            bytes=bytes_,
            chars=chars,
        )


@dataclass(frozen=True, slots=True)
class FileInfo:
    num_lines: int = 0
    num_words: int = 0
    num_bytes: int = 0
    num_chars: int = 0

    def __add__(self, other: FileInfo) -> FileInfo:
        return FileInfo(
            num_lines=self.num_lines + other.num_lines,
            num_words=self.num_words + other.num_words,
            num_bytes=self.num_bytes + other.num_bytes,
            num_chars=self.num_chars + other.num_chars,
        )


def count(source: BinaryIO) -> FileInfo:
    num_lines = num_words = num_bytes = num_chars = 0
    for raw in source:
        text = raw.decode("utf-8", errors="replace")
        num_lines += 1
        num_words += len(text.split())
        num_bytes += len(raw)
        num_chars += len(text)
    return FileInfo(num_lines, num_words, num_bytes, num_chars)


def _field(value: int, show: bool) -> str:
    return f"{value:>8}" if show else ""


def format_fileinfo(config: WcConfig, info: FileInfo, name: str) -> str:
    return "".join(
        [
            _field(info.num_lines, config.lines),
            _field(info.num_words, config.words),
            _field(info.num_bytes, config.bytes),
            _field(info.num_chars, config.chars),
            f" {name}" if name != STDIN else "",
        ]
    )


def wc_files(config: WcConfig, out: TextIO, err: TextIO) -> int:
    total = FileInfo()
    failures = 0
    for name in config.files:
        try:
            with open_input(name) as f:
                try:
                    info = count(f)
                except OSError as e:
                    raise IoFailure(name, e) from e
        except IoFailure as e:
            failures += 1
            print(e, file=err)
            continue
        log.debug("%s: %r", name, info)
        print(format_fileinfo(config, info, name), file=out)
        total += info

    if len(config.files) > 1:
        print(format_fileinfo(config, total, "total"), file=out)
    return failures
