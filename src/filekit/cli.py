from __future__ import annotations

import argparse
import logging
import os
import re
import sys

from .comm import CommConfig, comm
from .errors import IoFailure, MalformedOffset, UsageError
from .find import EntryType, FindConfig, find
from .ls import LsConfig, ls
from .tail import DEFAULT_LINES, TailConfig, tail_files
from .wc import WcConfig, wc_files


def _configure_logging(verbose: bool) -> None:
    if logging.root.handlers:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="filekit", description="Small file utilities")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("tail", help="Print the trailing part of files")
    p.add_argument("files", nargs="+", metavar="FILE", help="Input file(s)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("-n", "--lines", default=DEFAULT_LINES, metavar="LINES", help="Number of lines")
    mode.add_argument("-c", "--bytes", metavar="BYTES", help="Number of bytes")
    p.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")

    p = sub.add_parser("wc", help="Count lines, words, bytes and characters")
    p.add_argument("files", nargs="*", default=["-"], metavar="FILE", help="Input file(s)")
    p.add_argument("-l", "--lines", action="store_true", help="Show line count")
    p.add_argument("-w", "--words", action="store_true", help="Show word count")
    counts = p.add_mutually_exclusive_group()
    counts.add_argument("-c", "--bytes", action="store_true", help="Show byte count")
    counts.add_argument("-m", "--chars", action="store_true", help="Show character count")

    p = sub.add_parser("comm", help="Compare two sorted files line by line")
    p.add_argument("file1", metavar="FILE1", help="Input file 1")
    p.add_argument("file2", metavar="FILE2", help="Input file 2")
    p.add_argument("-i", dest="insensitive", action="store_true", help="Case-insensitive comparison of lines")
    p.add_argument("-1", dest="suppress_col1", action="store_true", help="Suppress printing of column 1")
    p.add_argument("-2", dest="suppress_col2", action="store_true", help="Suppress printing of column 2")
    p.add_argument("-3", dest="suppress_col3", action="store_true", help="Suppress printing of column 3")
    p.add_argument("-d", "--output-delimiter", dest="delimiter", default="\t", metavar="DELIM", help="Output delimiter")

    p = sub.add_parser("find", help="Walk directory trees")
    p.add_argument("paths", nargs="*", default=["."], metavar="PATH", help="Search paths")
    p.add_argument("-n", "--name", dest="names", action="append", default=[], metavar="NAME", help="Name")
    p.add_argument(
        "-t",
        "--type",
        dest="types",
        action="append",
        default=[],
        choices=[t.value for t in EntryType],
        metavar="TYPE",
        help="Entry type (f, d, l)",
    )

    p = sub.add_parser("ls", help="List directory contents")
    p.add_argument("paths", nargs="*", default=["."], metavar="PATH", help="Files and/or directories")
    p.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Show all files")
    p.add_argument("-l", "--long", action="store_true", help="Long listing")
    return ap


def _compile_names(names: list[str]) -> tuple[re.Pattern[str], ...]:
    out = []
    for name in names:
        try:
            out.append(re.compile(name))
        except re.error as e:
            raise UsageError(f'Invalid --name "{name}"') from e
    return tuple(out)


def _run(args: argparse.Namespace) -> int:
    if args.command == "tail":
        config = TailConfig.from_tokens(
            args.files,
            lines_token=args.lines,
            bytes_token=args.bytes,
            quiet=args.quiet,
        )
        failures = tail_files(config, sys.stdout.buffer, sys.stderr)
        sys.stdout.buffer.flush()
    elif args.command == "wc":
        config = WcConfig.from_flags(
            args.files,
            lines=args.lines,
            words=args.words,
            bytes_=args.bytes,
            chars=args.chars,
        )
        failures = wc_files(config, sys.stdout, sys.stderr)
    elif args.command == "comm":
        config = CommConfig(
            file1=args.file1,
            file2=args.file2,
            show_col1=not args.suppress_col1,
            show_col2=not args.suppress_col2,
            show_col3=not args.suppress_col3,
            insensitive=args.insensitive,
            delimiter=args.delimiter,
        )
        comm(config, sys.stdout)
        failures = 0
    elif args.command == "find":
        config = FindConfig(
            paths=tuple(args.paths),
            names=_compile_names(args.names),
            entry_types=frozenset(EntryType(t) for t in args.types),
        )
        failures = find(config, sys.stdout, sys.stderr)
    else:
        config = LsConfig(paths=tuple(args.paths), long=args.long, show_hidden=args.show_hidden)
        failures = ls(config, sys.stdout, sys.stderr)
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return _run(args)
    except (MalformedOffset, UsageError, IoFailure) as e:
        sys.stdout.flush()
        print(f"filekit {args.command}: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # The reader went away; silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
