"""Search helpers for foliofs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import MissingArgument
from .nodes import FileNode, Node

SNIPPET_RADIUS = 50
ELLIPSIS = "..."


@dataclass(frozen=True)
class SearchResult:
    path: str
    snippet: str
    kind: str = "file"


def extract_snippet(content: str, start: int, length: int, *, radius: int = SNIPPET_RADIUS) -> str:
    """Cut a window around ``content[start:start + length]``."""

    begin = max(0, start - radius)
    end = min(len(content), start + length + radius)
    snippet = content[begin:end]
    if begin > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet


def search_nodes(nodes: Iterable[tuple[str, Node]], keyword: str) -> list[SearchResult]:
    """Case-insensitive substring search over file content.

    ``nodes`` is consumed in order, so callers get results in the order their
    walk produced them.
    """

    if not keyword or not keyword.strip():
        raise MissingArgument("search keyword required")
    needle = keyword.lower()
    results: list[SearchResult] = []
    for path, node in nodes:
        if not isinstance(node, FileNode) or not node.content:
            continue
        index = node.content.lower().find(needle)
        if index < 0:
            continue
        results.append(
            SearchResult(path=path, snippet=extract_snippet(node.content, index, len(needle)))
        )
    return results


__all__ = ["SearchResult", "extract_snippet", "search_nodes", "SNIPPET_RADIUS"]
