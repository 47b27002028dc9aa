"""Helpers for resolving POSIX-style paths inside the VFS."""

from __future__ import annotations

from .exceptions import NotADirectory, NotAFile, PathNotFound
from .nodes import DirectoryNode, FileNode, Node


def split_segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def _walk_segments(base: list[str], segments: list[str]) -> list[str]:
    parts = list(base)
    for part in segments:
        if part == ".":
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return parts


def resolve_absolute(path: str | None, cwd: str = "/") -> str:
    """Return the canonical absolute form of ``path`` seen from ``cwd``.

    ``..`` never climbs above the root, so ``/..`` and ``..`` from ``/`` both
    resolve to ``/``.
    """

    if not path:
        path = cwd
    if path.startswith("/"):
        parts = _walk_segments([], split_segments(path))
    else:
        parts = _walk_segments(split_segments(cwd), split_segments(path))
    return "/" + "/".join(parts)


def resolve_node(root: DirectoryNode, path: str | None, cwd: str = "/") -> Node | None:
    """Walk from ``root`` to ``path``; ``None`` when nothing lives there."""

    current: Node = root
    for part in split_segments(resolve_absolute(path, cwd)):
        if not isinstance(current, DirectoryNode):
            return None
        child = current.get_child(part)
        if child is None:
            return None
        current = child
    return current


class PathResolverMixin:
    """Resolution helpers that turn absence into console errors."""

    def _root(self) -> DirectoryNode:  # pragma: no cover - provided by the VFS
        raise NotImplementedError

    def _normalize(self, path: str | None, cwd: str = "/") -> str:
        return resolve_absolute(path, cwd)

    def _resolve_node(self, path: str | None, cwd: str = "/") -> Node | None:
        return resolve_node(self._root(), path, cwd)

    def _require_node(self, path: str | None, cwd: str = "/") -> Node:
        node = self._resolve_node(path, cwd)
        if node is None:
            raise PathNotFound(f"path not found: {path}")
        return node

    def _require_directory(self, path: str | None, cwd: str = "/") -> DirectoryNode:
        node = self._require_node(path, cwd)
        if not isinstance(node, DirectoryNode):
            raise NotADirectory(f"not a directory: {path}")
        return node

    def _require_file(self, path: str | None, cwd: str = "/") -> FileNode:
        node = self._require_node(path, cwd)
        if not isinstance(node, FileNode):
            raise NotAFile(f"not a file: {path}")
        return node


__all__ = ["PathResolverMixin", "resolve_absolute", "resolve_node", "split_segments"]
