"""Filesystem walker that builds the in-memory directory tree."""

from __future__ import annotations

import logging
import os

from dirtree.models import DirNode, DirTreeError, FileNode, Node

logger = logging.getLogger(__name__)


class RootAccessError(DirTreeError):
    """Raised when the root directory cannot be opened or listed."""


def build_tree(path: str | os.PathLike[str], include_files: bool = False) -> list[Node]:
    """Walk *path* and return its children as an ordered list of nodes.

    Entries are sorted by name with directories and files interleaved.
    Symbolic links are never followed; a link is listed as a file.
    A subdirectory that cannot be listed is kept as a childless ``DirNode``
    so the readable rest of the tree still comes through.

    Raises:
        RootAccessError: *path* itself cannot be opened or listed.
    """
    try:
        return _read_dir(os.fspath(path), include_files)
    except OSError as exc:
        raise RootAccessError(str(exc)) from exc


def _read_dir(path: str, include_files: bool) -> list[Node]:
    nodes: list[Node] = []
    for entry in _scan(path):
        if entry.is_dir(follow_symlinks=False):
            try:
                children = _read_dir(entry.path, include_files)
            except OSError:
                children = []
            nodes.append(DirNode(entry.name, tuple(children)))
        elif include_files:
            size = entry.stat(follow_symlinks=False).st_size
            nodes.append(FileNode(entry.name, size))
    return nodes


def _scan(path: str) -> list[os.DirEntry[str]]:
    """List the entries of *path* sorted by name.

    The handle is closed on every exit path. A close failure is raised
    only when listing succeeded; otherwise the listing error wins.
    """
    handle = os.scandir(path)
    error: OSError | None = None
    entries: list[os.DirEntry[str]] = []
    try:
        entries = list(handle)
    except OSError as exc:
        error = exc
    finally:
        error = _close(handle, path, error)

    if error is not None:
        raise error

    entries.sort(key=lambda entry: entry.name)
    return entries


def _close(handle, path: str, pending: OSError | None) -> OSError | None:
    """Close *handle* and return the error to report for this scan."""
    try:
        handle.close()
    except OSError as exc:
        if pending is None:
            return exc
        logger.debug("Discarding close error for %s: %s", path, exc)
    return pending
