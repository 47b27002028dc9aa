"""Tab completion for command names and paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit.completion import Completer, Completion

from ..exceptions import ConsoleError
from ..nodes import DirectoryNode
from ..shell_parser import parse_command
from .common import ALIASES, CommandName, resolve_command

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .core import ConsoleShell


def command_suggestions(prefix: str) -> list[str]:
    names = [name.value for name in CommandName] + list(ALIASES)
    return sorted(name for name in names if name.startswith(prefix))


def path_suggestions(shell: "ConsoleShell", fragment: str) -> list[str]:
    """Children of the fragment's directory whose names start with its tail."""

    head, sep, tail = fragment.rpartition("/")
    directory = shell.cwd
    if sep:
        try:
            node = shell.vfs.resolve(head + sep, shell.cwd)
        except ConsoleError:
            return []
        if not isinstance(node, DirectoryNode):
            return []
        directory = node.path
    try:
        entries = shell.vfs.ls(directory)
    except ConsoleError:
        return []
    return sorted(
        f"{entry.name}/" if entry.is_dir else entry.name
        for entry in entries
        if entry.name.startswith(tail)
    )


def complete(shell: "ConsoleShell", partial: str) -> list[str]:
    if not partial or not partial.strip():
        return []
    text = partial.lstrip()
    parsed = parse_command(text)
    trailing_space = text[-1].isspace()
    if not parsed.args and not trailing_space:
        return command_suggestions(parsed.name)
    if resolve_command(parsed.name) is None:
        return []
    fragment = "" if trailing_space or not parsed.args else parsed.args[-1]
    return path_suggestions(shell, fragment)


class ConsoleCompleter(Completer):
    """prompt_toolkit adapter over :func:`complete`."""

    def __init__(self, shell: "ConsoleShell") -> None:
        self.shell = shell

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.strip():
            return
        parsed = parse_command(text.lstrip())
        if text[-1].isspace():
            replaced = ""
        elif not parsed.args:
            replaced = parsed.name
        else:
            replaced = parsed.args[-1].rpartition("/")[2]
        for suggestion in complete(self.shell, text):
            yield Completion(suggestion, start_position=-len(replaced))


__all__ = ["ConsoleCompleter", "command_suggestions", "complete", "path_suggestions"]
