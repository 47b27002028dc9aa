"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from .core import ConsoleShell


class CommandName(str, Enum):
    """Closed set of canonical console commands."""

    LIST = "list"
    OPEN = "open"
    READ = "read"
    TREE = "tree"
    SEARCH = "search"
    HELP = "help"
    CLEAR = "clear"
    CWD = "cwd"
    EXIT = "exit"


ALIASES = MappingProxyType(
    {
        "ls": CommandName.LIST,
        "dir": CommandName.LIST,
        "cd": CommandName.OPEN,
        "cat": CommandName.READ,
        "pwd": CommandName.CWD,
        "quit": CommandName.EXIT,
    }
)


def resolve_command(name: str) -> CommandName | None:
    """Map a typed command name or alias to its canonical command."""

    if name in ALIASES:
        return ALIASES[name]
    try:
        return CommandName(name)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class RecordNavigation:
    record_id: int | str
    kind: Literal["record"] = "record"


@dataclass(frozen=True, slots=True)
class ExternalNavigation:
    url: str
    kind: Literal["external"] = "external"


Navigation = Union[RecordNavigation, ExternalNavigation]


@dataclass(slots=True)
class CommandResult:
    output: str = ""
    error: bool = False
    navigation: Navigation | None = None
    exit: bool = False
    clear: bool = False


@dataclass
class SessionState:
    cwd: str = "/"
    history: list[str] = field(default_factory=list)


ShellCommand = Callable[["ConsoleShell", list[str]], CommandResult | str | None]


__all__ = [
    "ALIASES",
    "CommandName",
    "CommandResult",
    "ExternalNavigation",
    "Navigation",
    "RecordNavigation",
    "SessionState",
    "ShellCommand",
    "resolve_command",
]
