"""Replace every occurrence of one string with another, line by line."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO


def replace_line(line: str, old: str, new: str) -> tuple[str, int]:
    """Return line with each distinct occurrence of old replaced by new.

    Occurrences are found left to right without overlap. The second
    item is the number of replacements; an empty old replaces nothing.
    """
    if old == "":
        return line, 0
    return line.replace(old, new), line.count(old)


def replace_stream(lines: Iterable[str], old: str, new: str, out: TextIO) -> int:
    """Write each line to out with replacements made; return the total count."""
    total = 0
    for line in lines:
        replaced, count = replace_line(line, old, new)
        out.write(replaced)
        total += count
    return total


def main(argv: list[str] | None = None) -> int:
    """Filter stdin to stdout, reporting the number of replacements on stderr."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 2:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "replace"
        print(f"usage: {prog} fromstring tostring", file=sys.stderr)
        return 1
    old, new = argv
    total = replace_stream(sys.stdin, old, new, sys.stdout)
    print(f"{total} replacements", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())