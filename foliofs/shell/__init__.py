"""Console shell package."""

from .common import (
    ALIASES,
    CommandName,
    CommandResult,
    ExternalNavigation,
    RecordNavigation,
    resolve_command,
)
from .completion import ConsoleCompleter, complete
from .core import ConsoleShell

__all__ = [
    "ALIASES",
    "CommandName",
    "CommandResult",
    "ConsoleCompleter",
    "ConsoleShell",
    "ExternalNavigation",
    "RecordNavigation",
    "complete",
    "resolve_command",
]
