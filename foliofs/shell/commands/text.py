"""Text reading commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandName, CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import MissingArgument

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import ConsoleShell


@COMMAND_REGISTRY.command(CommandName.READ, description="Read file contents")
def read(shell: "ConsoleShell", args: list[str]) -> CommandResult:
    if not args:
        raise MissingArgument("read requires a file path")
    return CommandResult(output=shell.vfs.read_file(args[0], shell.cwd))
