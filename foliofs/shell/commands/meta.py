"""Meta commands for the console session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandName, CommandResult
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import ConsoleShell

HELP_TEXT = """Console Mode - Available Commands

NAVIGATION:
  list [path]          List directory contents (alias: ls, dir)
  open <path>          Navigate to directory or open file (alias: cd)
  cwd                  Show current working directory (alias: pwd)

FILE OPERATIONS:
  read <path>          Read file contents (alias: cat)
  tree [path] [depth]  Display tree structure (default depth: 3)

SEARCH:
  search <keyword>     Search for keyword across all content

UTILITY:
  help                 Display this help message
  clear                Clear console output
  exit                 Close console (alias: quit)

PATH NOTATION:
  /                    Root directory
  .                    Current directory
  ..                   Parent directory
  /absolute/path       Absolute path from root
  relative/path        Relative to current directory

FILESYSTEM STRUCTURE:
  /base/               About, contact, resume
  /projects/           Project directories
  /meta/               System information

NOTE: This is a read-only portfolio system. Shell features like pipes,
redirection, and command chaining are not supported."""


@COMMAND_REGISTRY.command(CommandName.HELP, description="Display this help message")
def help(shell: "ConsoleShell", _: list[str]) -> CommandResult:  # noqa: A001
    return CommandResult(output=HELP_TEXT)


@COMMAND_REGISTRY.command(CommandName.CLEAR, description="Clear console output")
def clear(shell: "ConsoleShell", _: list[str]) -> CommandResult:
    return CommandResult(clear=True)


@COMMAND_REGISTRY.command(CommandName.EXIT, description="Close console")
def exit(shell: "ConsoleShell", _: list[str]) -> CommandResult:  # noqa: A001
    return CommandResult(output="Closing console...", exit=True)
