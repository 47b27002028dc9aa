"""Search-oriented commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandName, CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import MissingArgument
from ...search import SearchResult

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import ConsoleShell


def _format_results(keyword: str, results: list[SearchResult]) -> str:
    lines = [f"Found {len(results)} result(s) for: {keyword}\n"]
    for idx, result in enumerate(results, start=1):
        lines.append(f"[{idx}] {result.path}")
        lines.append(f"    {result.snippet}")
        if idx < len(results):
            lines.append("")
    return "\n".join(lines)


@COMMAND_REGISTRY.command(
    CommandName.SEARCH, description="Search for keyword across all content"
)
def search(shell: "ConsoleShell", args: list[str]) -> CommandResult:
    if not args:
        raise MissingArgument("search requires a keyword")
    keyword = " ".join(args)
    results = shell.vfs.search(keyword)
    if not results:
        return CommandResult(output=f"No results found for: {keyword}")
    return CommandResult(output=_format_results(keyword, results))
