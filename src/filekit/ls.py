from __future__ import annotations

import grp
import logging
import pwd
import stat
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TextIO

from .errors import IoFailure


log = logging.getLogger(__name__)

_TRIPLETS = ("---", "--x", "-w-", "-wx", "r--", "r-x", "rw-", "rwx")

# Column alignment for the long listing: "<" left, ">" right.
_LONG_ALIGN = ("<", ">", "<", "<", ">", "<", "<")


@dataclass(frozen=True, slots=True)
class LsConfig:
    paths: tuple[str, ...] = (".",)
    long: bool = False
    show_hidden: bool = False


def find_files(
    paths: list[str] | tuple[str, ...],
    show_hidden: bool,
    on_error: Callable[[IoFailure], None] | None = None,
) -> list[Path]:
    """Expand `paths` into the entries to list.

    Files are taken as given (hidden or not); directories contribute their
    immediate entries. Unreadable paths are passed to `on_error` and skipped.
    """
    res: list[Path] = []
    for name in paths:
        p = Path(name)
        try:
            if p.is_dir():
                entries = sorted(p.iterdir())
            else:
                p.stat()
                res.append(p)
                continue
        except OSError as e:
            if on_error is not None:
                on_error(IoFailure(name, e))
            continue
        res.extend(
            entry for entry in entries if show_hidden or not entry.name.startswith(".")
        )
    return res


def format_mode(mode: int) -> str:
    """Render the low nine permission bits as `rwxr-xr-x`."""
    return "".join(_TRIPLETS[(mode >> shift) & 0o7] for shift in (6, 3, 0))


def _owner(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _long_row(path: Path) -> list[str]:
    try:
        st = path.stat()
    except OSError as e:
        raise IoFailure(str(path), e) from e
    file_type = "d" if stat.S_ISDIR(st.st_mode) else "-"
    modified = datetime.fromtimestamp(st.st_mtime)
    return [
        file_type + format_mode(st.st_mode),
        str(st.st_nlink),
        _owner(st.st_uid),
        _group(st.st_gid),
        str(st.st_size),
        modified.strftime("%b %d %y %H:%M"),
        str(path),
    ]


def format_output(paths: list[Path]) -> str:
    rows = [_long_row(p) for p in paths]
    if not rows:
        return ""
    widths = [max(len(r[i]) for r in rows) for i in range(len(_LONG_ALIGN))]
    lines = []
    for r in rows:
        cells = [
            f"{cell:{align}{width}}" if i < len(r) - 1 else cell
            for i, (cell, align, width) in enumerate(zip(r, _LONG_ALIGN, widths))
        ]
        lines.append(" ".join(cells))
    return "\n".join(lines) + "\n"


def ls(config: LsConfig, out: TextIO, err: TextIO) -> int:
    failures: list[IoFailure] = []

    def report(failure: IoFailure) -> None:
        failures.append(failure)
        print(failure, file=err)

    paths = find_files(config.paths, config.show_hidden, report)
    log.debug("listing %d entries", len(paths))
    if config.long:
        out.write(format_output(paths))
    else:
        for p in paths:
            print(p, file=out)
    return len(failures)
