"""Data classes and the shared error base for dirtree."""

from __future__ import annotations

from dataclasses import dataclass


class DirTreeError(Exception):
    """Base class for errors raised by dirtree."""


@dataclass(frozen=True)
class FileNode:
    name: str
    size: int = 0

    @property
    def label(self) -> str:
        if self.size == 0:
            return f"{self.name} (empty)"
        return f"{self.name} ({self.size}b)"


@dataclass(frozen=True)
class DirNode:
    name: str
    children: tuple[Node, ...] = ()

    @property
    def label(self) -> str:
        return self.name


Node = DirNode | FileNode
