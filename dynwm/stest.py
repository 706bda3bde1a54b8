"""Filter a list of files by properties, like test(1) applied to many paths."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, TextIO

from dynwm.argparsing import UsageError, parse_flags

USAGE = "usage: stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"
SIMPLE_FLAGS = "abcdefghlpqrsuvwx"
PATH_MAX = 4096


@dataclass(frozen=True)
class TestFlags:
    """The tests selected on the command line."""

    __test__ = False

    letters: frozenset[str] = field(default_factory=frozenset)
    newer_than: int | None = None
    older_than: int | None = None

    def __contains__(self, letter: str) -> bool:
        return letter in self.letters


def _mtime_of(path: str) -> int | None:
    try:
        return int(os.stat(path).st_mtime)
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def parse_args(argv: Iterable[str]) -> tuple[TestFlags, list[str]]:
    """Parse the command line into flags and file operands.

    A reference file for ``-n`` or ``-o`` that cannot be read is reported on
    standard error and the test is dropped. Unknown flags raise UsageError.
    """
    parsed, operands = parse_flags(argv, "no")
    letters: set[str] = set()
    newer_than: int | None = None
    older_than: int | None = None
    for flag, value in parsed:
        if flag == "n":
            newer_than = _mtime_of(value)
        elif flag == "o":
            older_than = _mtime_of(value)
        elif flag in SIMPLE_FLAGS:
            letters.add(flag)
        else:
            raise UsageError(flag, f"unknown option -- {flag}")
    return TestFlags(frozenset(letters), newer_than, older_than), operands


def _is_symlink(path: str) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except OSError:
        return False


def passes(path: str, name: str, flags: TestFlags) -> bool:
    """Tell whether ``path`` satisfies every selected test (inverted by ``-v``)."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return "v" in flags
    mode = st.st_mode
    checks = {
        "b": lambda: stat.S_ISBLK(mode),
        "c": lambda: stat.S_ISCHR(mode),
        "d": lambda: stat.S_ISDIR(mode),
        "e": lambda: os.access(path, os.F_OK),
        "f": lambda: stat.S_ISREG(mode),
        "g": lambda: bool(mode & stat.S_ISGID),
        "h": lambda: _is_symlink(path),
        "p": lambda: stat.S_ISFIFO(mode),
        "r": lambda: os.access(path, os.R_OK),
        "s": lambda: st.st_size > 0,
        "u": lambda: bool(mode & stat.S_ISUID),
        "w": lambda: os.access(path, os.W_OK),
        "x": lambda: os.access(path, os.X_OK),
    }
    mtime = int(st.st_mtime)
    ok = (
        ("a" in flags or not name.startswith("."))
        and all(check() for letter, check in checks.items() if letter in flags)
        and (flags.newer_than is None or mtime > flags.newer_than)
        and (flags.older_than is None or mtime < flags.older_than)
    )
    return ok != ("v" in flags)


def candidates(
    flags: TestFlags, operands: list[str], stdin: TextIO
) -> Iterator[tuple[str, str]]:
    """Yield ``(path, name)`` pairs to test.

    Without operands the paths are read one per line from ``stdin``. With
    ``-l`` a directory operand stands for its entries, ``.`` and ``..``
    included.
    """
    if not operands:
        for line in stdin:
            entry = line[:-1] if line.endswith("\n") else line
            yield entry, entry
        return
    for operand in operands:
        entries = None
        if "l" in flags:
            try:
                entries = [".", "..", *os.listdir(operand)]
            except OSError:
                entries = None
        if entries is None:
            yield operand, operand
            continue
        for entry in entries:
            path = f"{operand}/{entry}"
            if len(os.fsencode(path)) < PATH_MAX:
                yield path, entry


def main(argv: list[str] | None = None) -> int:
    """Run the filter; exit status 0 if anything matched, 1 if not, 2 on misuse."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        flags, operands = parse_args(argv)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 2
    matched = False
    for path, name in candidates(flags, operands, sys.stdin):
        if passes(path, name, flags):
            if "q" in flags:
                return 0
            matched = True
            print(name)
    return 0 if matched else 1