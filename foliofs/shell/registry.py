"""Registry binding each canonical command to its handler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from .common import CommandName, ShellCommand


@dataclass(slots=True)
class CommandSpec:
    name: CommandName
    handler: ShellCommand
    description: str = ""


class CommandRegistry:
    """Holds exactly one handler per :class:`CommandName`."""

    def __init__(self) -> None:
        self._commands: dict[CommandName, CommandSpec] = {}

    def register(
        self,
        name: CommandName,
        handler: ShellCommand,
        *,
        description: str = "",
    ) -> ShellCommand:
        name = CommandName(name)
        if name in self._commands:
            raise ValueError(f"Command {name.value!r} is already registered")
        self._commands[name] = CommandSpec(name, handler, description)
        return handler

    def command(
        self,
        name: CommandName,
        *,
        description: str = "",
    ) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering shell commands."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(name, func, description=description)

        return decorator

    def get(self, name: CommandName) -> CommandSpec | None:
        return self._commands.get(name)

    def iter_commands(self) -> Iterable[CommandSpec]:
        return tuple(self._commands.values())


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec"]
