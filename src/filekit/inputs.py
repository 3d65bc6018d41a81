from __future__ import annotations

import shutil
import sys
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from .errors import IoFailure


STDIN = "-"


@contextmanager
def open_input(name: str, *, seekable: bool = False) -> Iterator[BinaryIO]:
    """Open `name` for binary reading; `-` is standard input.

    With `seekable=True` standard input is first copied to a temporary file so
    callers can rewind it. Failures to open surface as `IoFailure`.
    """
    if name == STDIN:
        if not seekable:
            yield sys.stdin.buffer
            return
        with tempfile.SpooledTemporaryFile(max_size=1 << 20) as spool:
            try:
                shutil.copyfileobj(sys.stdin.buffer, spool)
            except OSError as e:
                raise IoFailure(name, e) from e
            spool.seek(0)
            yield spool
        return

    try:
        f = open(name, "rb")
    except OSError as e:
        raise IoFailure(name, e) from e
    with f:
        yield f
