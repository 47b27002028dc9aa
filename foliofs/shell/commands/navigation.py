"""Navigation-oriented commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandName, CommandResult, ExternalNavigation, RecordNavigation
from ..registry import COMMAND_REGISTRY
from ...exceptions import InvalidDepth, PathNotFound
from ...nodes import DirectoryNode
from ...vfs import DirEntry

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import ConsoleShell

DEFAULT_TREE_DEPTH = 3


def _format_ls(entries: list[DirEntry]) -> str:
    if not entries:
        return "(empty directory)"
    return "\n".join(f"{entry.name}/" if entry.is_dir else entry.name for entry in entries)


def _parse_depth(raw: str) -> int:
    try:
        depth = int(raw)
    except ValueError:
        raise InvalidDepth("tree depth must be a positive number") from None
    if depth < 1:
        raise InvalidDepth("tree depth must be a positive number")
    return depth


@COMMAND_REGISTRY.command(CommandName.CWD, description="Show current working directory")
def cwd(shell: "ConsoleShell", _: list[str]) -> CommandResult:
    return CommandResult(output=shell.cwd)


@COMMAND_REGISTRY.command(CommandName.LIST, description="List directory contents")
def list_(shell: "ConsoleShell", args: list[str]) -> CommandResult:
    target = args[0] if args else "."
    return CommandResult(output=_format_ls(shell.vfs.ls(target, shell.cwd)))


@COMMAND_REGISTRY.command(
    CommandName.OPEN, description="Navigate to directory or open file"
)
def open_(shell: "ConsoleShell", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult(output=f"Current directory: {shell.cwd}")
    path = args[0]
    node = shell.vfs.resolve(path, shell.cwd)
    if node is None:
        raise PathNotFound(f"path not found: {path}")
    if isinstance(node, DirectoryNode):
        shell.session.cwd = node.path
        return CommandResult(output=f"Changed directory to {node.path}")

    project_id = shell.vfs.project_id_for_path(node.path)
    if project_id is not None:
        return CommandResult(
            output=f"Opening project: {node.path}",
            navigation=RecordNavigation(record_id=project_id),
        )
    if node.url:
        return CommandResult(
            output=f"Opening: {node.path}",
            navigation=ExternalNavigation(url=node.url),
        )
    return CommandResult(output=node.content or "(empty file)")


@COMMAND_REGISTRY.command(CommandName.TREE, description="Display tree structure")
def tree(shell: "ConsoleShell", args: list[str]) -> CommandResult:
    target = args[0] if args else "."
    depth = _parse_depth(args[1]) if len(args) > 1 else DEFAULT_TREE_DEPTH
    return CommandResult(output=shell.vfs.tree(target, depth, shell.cwd))
