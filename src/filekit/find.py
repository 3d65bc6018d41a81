from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO


log = logging.getLogger(__name__)


class EntryType(str, Enum):
    DIR = "d"
    FILE = "f"
    LINK = "l"


@dataclass(frozen=True, slots=True)
class FindConfig:
    paths: tuple[str, ...] = (".",)
    names: tuple[re.Pattern[str], ...] = ()
    entry_types: frozenset[EntryType] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class Entry:
    path: str
    entry_type: EntryType | None  # None for sockets, fifos, devices


def _classify(path: str) -> EntryType | None:
    if os.path.islink(path):
        return EntryType.LINK
    if os.path.isdir(path):
        return EntryType.DIR
    if os.path.isfile(path):
        return EntryType.FILE
    return None


def walk(root: str, on_error: Callable[[str, OSError], None]) -> Iterator[Entry]:
    """Depth-first walk yielding `root` first, then its entries by name.

    Symbolic links are reported but never followed. `on_error(path, exc)` is
    called for entries that cannot be read; the walk continues.
    """
    try:
        os.lstat(root)
    except OSError as e:
        on_error(root, e)
        return
    stack = [root]
    while stack:
        path = stack.pop()
        kind = _classify(path)
        yield Entry(path, kind)
        if kind is not EntryType.DIR:
            continue
        try:
            with os.scandir(path) as it:
                names = sorted(e.name for e in it)
        except OSError as e:
            on_error(path, e)
            continue
        stack.extend(os.path.join(path, n) for n in reversed(names))


def matches(config: FindConfig, entry: Entry) -> bool:
    type_ok = not config.entry_types or entry.entry_type in config.entry_types
    name = os.path.basename(entry.path.rstrip(os.sep)) or entry.path
    name_ok = not config.names or any(rx.search(name) for rx in config.names)
    return type_ok and name_ok


def find(config: FindConfig, out: TextIO, err: TextIO) -> int:
    failures = 0

    def report(path: str, exc: OSError) -> None:
        nonlocal failures
        failures += 1
        print(f"{path}: {exc.strerror or exc}", file=err)

    for root in config.paths:
        for entry in walk(root, report):
            if matches(config, entry):
                print(entry.path, file=out)
            else:
                log.debug("filtered out %s (%s)", entry.path, entry.entry_type)
    return failures
