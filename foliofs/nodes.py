"""Core node representations for the virtual filesystem."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union


@dataclass(frozen=True, slots=True)
class FileNode:
    """Leaf node holding text, optionally pointing at an external URL."""

    name: str
    path: str
    content: str = ""
    url: str | None = None

    @property
    def is_dir(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class DirectoryNode:
    """Directory whose children are fixed once the node is created."""

    name: str
    path: str
    children: Mapping[str, "Node"] = field(default_factory=dict)
    project_id: int | str | None = None

    def __post_init__(self) -> None:
        # Copy so callers cannot mutate the tree through the dict they passed in.
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def is_dir(self) -> bool:
        return True

    def get_child(self, name: str) -> "Node" | None:
        return self.children.get(name)

    def iter_children(self) -> Iterator["Node"]:
        return iter(self.children.values())


Node = Union[DirectoryNode, FileNode]


def join_path(parent: str, name: str) -> str:
    if parent == "/":
        return f"/{name}"
    return f"{parent}/{name}"


__all__ = ["Node", "DirectoryNode", "FileNode", "join_path"]
