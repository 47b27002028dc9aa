"""Rejection gate and tokenizer for console input."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

SHELL_FEATURES = ("|", ">", "<", "&&", "||", ";", "`", "$")

_TOKEN_RE = re.compile(r'(?:[^\s"]+|"[^"]*")+')
_QUOTE_RE = re.compile(r'^"|"$')


@dataclass
class ParsedCommand:
    name: str
    args: list[str] = field(default_factory=list)


def contains_shell_features(command_line: str) -> bool:
    return any(feature in command_line for feature in SHELL_FEATURES)


def tokenize(command_line: str) -> list[str]:
    """Split on whitespace; a double-quoted run stays one token."""

    return _TOKEN_RE.findall(command_line)


def parse_command(command_line: str) -> ParsedCommand:
    tokens = tokenize(command_line)
    if not tokens:
        return ParsedCommand(name="")
    name, *rest = tokens
    return ParsedCommand(name=name, args=[_QUOTE_RE.sub("", token) for token in rest])


__all__ = ["ParsedCommand", "SHELL_FEATURES", "contains_shell_features", "parse_command", "tokenize"]
