"""Command-line entry point: ``dirtree <path> [-f]``."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from dirtree.models import DirTreeError
from dirtree.tree_renderer import dir_tree

USAGE = "usage: dirtree <path> [-f]"
FILES_FLAG = "-f"


class UsageError(DirTreeError):
    """Raised when the command line has the wrong number of arguments."""


def parse_args(argv: list[str]) -> tuple[str, bool]:
    """Return ``(path, include_files)`` from the arguments after the program name.

    Only an exact ``-f`` as the second argument turns on files; anything
    else there is ignored.
    """
    if not 1 <= len(argv) <= 2:
        raise UsageError(USAGE)
    include_files = len(argv) == 2 and argv[1] == FILES_FLAG
    return argv[0], include_files


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if argv is None:
        argv = sys.argv[1:]
    if out is None:
        # Names that are not valid UTF-8 go back out as their original bytes
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(errors="surrogateescape")
        out = sys.stdout

    try:
        path, include_files = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2

    try:
        dir_tree(out, path, include_files)
    except DirTreeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
