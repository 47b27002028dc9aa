"""Exception hierarchy for foliofs."""

from __future__ import annotations


class ConsoleError(Exception):
    """Base class for errors surfaced to the console user."""


class PathNotFound(ConsoleError):
    pass


class NotADirectory(ConsoleError):
    pass


class NotAFile(ConsoleError):
    pass


class UnsupportedShellSyntax(ConsoleError):
    pass


class MissingArgument(ConsoleError):
    pass


class InvalidDepth(ConsoleError):
    pass


class UnknownCommand(ConsoleError):
    pass


class FilesystemNotInitialized(ConsoleError):
    pass


class ContentError(Exception):
    """Raised when a content file cannot be turned into records."""


__all__ = [
    "ConsoleError",
    "PathNotFound",
    "NotADirectory",
    "NotAFile",
    "UnsupportedShellSyntax",
    "MissingArgument",
    "InvalidDepth",
    "UnknownCommand",
    "FilesystemNotInitialized",
    "ContentError",
]
