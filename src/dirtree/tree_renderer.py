"""ASCII rendering of a built directory tree."""

from __future__ import annotations

import io
import os
from typing import Sequence, TextIO

from dirtree.models import DirNode, DirTreeError, Node
from dirtree.tree_builder import build_tree

BRANCH = "├───"
LAST_BRANCH = "└───"

# Prefix fragments contributed by an ancestor level
BAR = "│\t"
BLANK = "\t"


class OutputWriteError(DirTreeError):
    """Raised when a rendered line cannot be written."""


def render_tree(
    out: TextIO,
    nodes: Sequence[Node],
    prefixes: Sequence[str] = (),
) -> None:
    """Write *nodes* and their descendants to *out*, one line each.

    Example output (files included):
        ├───docs
        │	└───readme.txt (120b)
        └───main.go (empty)

    Args:
        out: any object with a ``write(str)`` method.
        nodes: siblings at one level, in display order.
        prefixes: fragments accumulated from the ancestor levels.
    """
    if not nodes:
        return

    indent = "".join(prefixes)
    last = len(nodes) - 1
    for i, node in enumerate(nodes):
        is_last = i == last
        connector = LAST_BRANCH if is_last else BRANCH
        _write(out, f"{indent}{connector}{node.label}\n")

        if isinstance(node, DirNode):
            extension = BLANK if is_last else BAR
            render_tree(out, node.children, [*prefixes, extension])


def _write(out: TextIO, line: str) -> None:
    # ValueError covers unencodable names and closed streams
    try:
        out.write(line)
    except (OSError, ValueError) as exc:
        raise OutputWriteError(f"Failed to write output: {exc}") from exc


def format_tree(nodes: Sequence[Node]) -> str:
    """Render *nodes* into a string instead of a stream."""
    buf = io.StringIO()
    render_tree(buf, nodes)
    return buf.getvalue()


def dir_tree(
    out: TextIO,
    path: str | os.PathLike[str],
    include_files: bool = False,
) -> None:
    """Build the tree under *path*, then render it to *out*."""
    render_tree(out, build_tree(path, include_files))
