"""Core ConsoleShell implementation."""

from __future__ import annotations

import logging
from types import MappingProxyType

from ..exceptions import (
    ConsoleError,
    NotADirectory,
    PathNotFound,
    UnknownCommand,
    UnsupportedShellSyntax,
)
from ..nodes import DirectoryNode
from ..path_utils import resolve_absolute
from ..shell_parser import contains_shell_features, parse_command
from ..vfs import VirtualFileSystem
from .common import CommandName, CommandResult, SessionState, ShellCommand, resolve_command
from .registry import COMMAND_REGISTRY

logger = logging.getLogger(__name__)

SHELL_FEATURES_MESSAGE = (
    "shell features are not supported. This console exposes a read-only portfolio system."
)


class ConsoleShell:
    """Executes the console's fixed command set against the VFS.

    One instance is one session: it owns the current directory and the
    command history and must not be shared between concurrent callers.
    """

    def __init__(self, vfs: VirtualFileSystem, *, cwd: str = "/") -> None:
        self.vfs = vfs
        self.session = SessionState()
        self.command_docs: dict[CommandName, str] = {}
        self._handlers = MappingProxyType(self._load_builtin_commands())
        if resolve_absolute(cwd) != "/":
            self._enter_start_dir(cwd)

    def _enter_start_dir(self, path: str) -> None:
        node = self.vfs.resolve(path)
        if node is None:
            raise PathNotFound(f"path not found: {path}")
        if not isinstance(node, DirectoryNode):
            raise NotADirectory(f"not a directory: {path}")
        self.session.cwd = node.path

    def _load_builtin_commands(self) -> dict[CommandName, ShellCommand]:
        # Import command modules for their side effects (registration)
        from . import commands  # noqa: F401

        handlers: dict[CommandName, ShellCommand] = {}
        for spec in COMMAND_REGISTRY.iter_commands():
            handlers[spec.name] = spec.handler
            if spec.description:
                self.command_docs[spec.name] = spec.description
        return handlers

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------
    @property
    def cwd(self) -> str:
        return self.session.cwd

    @property
    def history(self) -> list[str]:
        return list(self.session.history)

    def available_commands(self) -> list[CommandName]:
        return sorted(self._handlers, key=lambda name: name.value)

    def change_directory(self, path: str) -> bool:
        """Point the session at ``path`` if it names an existing directory."""

        try:
            node = self.vfs.resolve(path, self.session.cwd)
        except ConsoleError:
            return False
        if not isinstance(node, DirectoryNode):
            return False
        self.session.cwd = node.path
        return True

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def exec(self, command: str) -> CommandResult:
        if not command or not command.strip():
            return CommandResult()
        line = command.strip()
        self.session.history.append(line)
        try:
            return self._dispatch(line)
        except ConsoleError as exc:
            return CommandResult(output=f"Error: {exc}", error=True)

    def _dispatch(self, line: str) -> CommandResult:
        if contains_shell_features(line):
            logger.debug("Rejected shell syntax in %r", line)
            raise UnsupportedShellSyntax(SHELL_FEATURES_MESSAGE)

        parsed = parse_command(line)
        name = resolve_command(parsed.name)
        handler = self._handlers.get(name) if name is not None else None
        if handler is None:
            raise UnknownCommand(
                f"unknown command: {parsed.name}. Type 'help' for available commands."
            )

        logger.debug("Dispatching %s with %r", name.value, parsed.args)
        try:
            result = handler(self, parsed.args)
        except ConsoleError:
            raise
        except Exception as exc:  # unexpected failure path
            logger.exception("Command %s failed", name.value)
            return CommandResult(output=f"Error: {name.value} failed: {exc}", error=True)
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        return CommandResult(output=str(result))


__all__ = ["ConsoleShell", "SHELL_FEATURES_MESSAGE"]
