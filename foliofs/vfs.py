"""Read-only virtual filesystem over portfolio content."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .builder import TreeBuilder
from .config import SiteProfile
from .exceptions import FilesystemNotInitialized, InvalidDepth
from .nodes import DirectoryNode, FileNode, Node
from .path_utils import PathResolverMixin, split_segments
from .records import ContentRecord
from .search import SearchResult, search_nodes

logger = logging.getLogger(__name__)

PROJECTS_DIR = "projects"


@dataclass(frozen=True)
class DirEntry:
    name: str
    kind: str
    path: str

    @property
    def is_dir(self) -> bool:
        return self.kind == "directory"


def _label(node: Node) -> str:
    if isinstance(node, DirectoryNode):
        return "/" if node.path == "/" else f"{node.name}/"
    return node.name


class VirtualFileSystem(PathResolverMixin):
    """Owns the content tree and answers queries against it.

    The tree is built once by :meth:`initialize`; every query before that
    raises :class:`FilesystemNotInitialized`.
    """

    def __init__(self, profile: SiteProfile | None = None) -> None:
        self.profile = profile or SiteProfile()
        self._tree: DirectoryNode | None = None

    @classmethod
    def from_records(
        cls,
        records: Iterable[ContentRecord],
        profile: SiteProfile | None = None,
    ) -> "VirtualFileSystem":
        vfs = cls(profile)
        vfs.initialize(records)
        return vfs

    @property
    def initialized(self) -> bool:
        return self._tree is not None

    def initialize(self, records: Iterable[ContentRecord]) -> None:
        if self._tree is not None:
            return
        self._tree = TreeBuilder(self.profile).build(records)
        logger.info("Virtual filesystem initialized")

    def _root(self) -> DirectoryNode:
        if self._tree is None:
            raise FilesystemNotInitialized("Filesystem not initialized")
        return self._tree

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def resolve(self, path: str | None, cwd: str = "/") -> Node | None:
        return self._resolve_node(path, cwd)

    def exists(self, path: str, cwd: str = "/") -> bool:
        return self._resolve_node(path, cwd) is not None

    def is_dir(self, path: str, cwd: str = "/") -> bool:
        return isinstance(self._resolve_node(path, cwd), DirectoryNode)

    def is_file(self, path: str, cwd: str = "/") -> bool:
        return isinstance(self._resolve_node(path, cwd), FileNode)

    def ls(self, path: str | None = ".", cwd: str = "/") -> list[DirEntry]:
        directory = self._require_directory(path, cwd)
        entries = [
            DirEntry(
                name=name,
                kind="directory" if isinstance(child, DirectoryNode) else "file",
                path=child.path,
            )
            for name, child in directory.children.items()
        ]
        entries.sort(key=lambda entry: (not entry.is_dir, entry.name))
        return entries

    def read_file(self, path: str | None, cwd: str = "/") -> str:
        return self._require_file(path, cwd).content or ""

    def walk(self, path: str | None = "/", cwd: str = "/") -> Iterator[tuple[str, Node]]:
        start_node = self._require_node(path, cwd)

        def _walk(node: Node) -> Iterator[tuple[str, Node]]:
            yield (node.path, node)
            if isinstance(node, DirectoryNode):
                for child in node.iter_children():
                    yield from _walk(child)

        return _walk(start_node)

    def search(self, keyword: str) -> list[SearchResult]:
        self._root()
        return search_nodes(self.walk("/"), keyword)

    def tree(self, path: str | None = ".", depth: int = 3, cwd: str = "/") -> str:
        if depth < 0:
            raise InvalidDepth("tree depth must be a positive number")
        start = self._require_node(path, cwd)
        lines = [_label(start)]

        def render(directory: DirectoryNode, prefix: str, level: int) -> None:
            if level > depth:
                return
            entries = list(directory.iter_children())
            for idx, node in enumerate(entries):
                last = idx == len(entries) - 1
                connector = "└── " if last else "├── "
                lines.append(f"{prefix}{connector}{_label(node)}")
                if isinstance(node, DirectoryNode):
                    extension = "    " if last else "│   "
                    render(node, prefix + extension, level + 1)

        if isinstance(start, DirectoryNode):
            render(start, "", 1)
        return "\n".join(lines)

    def project_id_for_path(self, path: str, cwd: str = "/") -> int | str | None:
        node = self._resolve_node(path, cwd)
        if node is None:
            return None
        if isinstance(node, DirectoryNode) and node.project_id is not None:
            return node.project_id
        parts = split_segments(node.path)
        if len(parts) >= 2 and parts[0] == PROJECTS_DIR:
            project = self._resolve_node(f"/{PROJECTS_DIR}/{parts[1]}")
            if isinstance(project, DirectoryNode):
                return project.project_id
        return None

    def path_for_project_id(self, project_id: int | str) -> str | None:
        projects = self._root().get_child(PROJECTS_DIR)
        if not isinstance(projects, DirectoryNode):
            return None
        wanted = str(project_id).strip()
        for project in projects.iter_children():
            if isinstance(project, DirectoryNode) and str(project.project_id) == wanted:
                return project.path
        return None


__all__ = ["VirtualFileSystem", "DirEntry"]
