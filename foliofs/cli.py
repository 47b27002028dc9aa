"""Command-line interface for foliofs."""

from __future__ import annotations

import argparse
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from .config import ConsoleConfig
from .exceptions import ConsoleError, ContentError
from .records import load_content
from .shell import CommandResult, ConsoleCompleter, ConsoleShell, ExternalNavigation
from .vfs import VirtualFileSystem

console = Console()
err_console = Console(stderr=True)


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data",
        help="Content JSON file (list of projects, or {profile, projects}).",
    )
    parser.add_argument(
        "--cwd",
        help="Directory the session starts in (default: /).",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: WARNING, or $FOLIOFS_LOG_LEVEL).",
    )


def _build_shell(config: ConsoleConfig) -> ConsoleShell:
    if config.data_path:
        profile, records = load_content(config.data_path)
    else:
        profile, records = None, []
    vfs = VirtualFileSystem.from_records(records, profile)
    return ConsoleShell(vfs, cwd=config.start_dir)


def _print_result(result: CommandResult) -> None:
    if result.error:
        err_console.print(
            result.output, style="red", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        return
    if result.output:
        console.print(result.output, markup=False, highlight=False, emoji=False, soft_wrap=True)
    if result.navigation is None:
        return
    if isinstance(result.navigation, ExternalNavigation):
        console.print(f"-> {result.navigation.url}", style="cyan", markup=False, highlight=False)
    else:
        console.print(
            f"-> project {result.navigation.record_id}",
            style="cyan",
            markup=False,
            highlight=False,
        )


def _run_exec(args: argparse.Namespace, shell: ConsoleShell) -> int:
    result = shell.exec(args.command)
    _print_result(result)
    return 1 if result.error else 0


def _run_shell(args: argparse.Namespace, shell: ConsoleShell) -> int:
    session = PromptSession(
        history=InMemoryHistory(),
        completer=ConsoleCompleter(shell),
        complete_while_typing=False,
    )
    while True:
        try:
            line = session.prompt(f"{shell.cwd}$ ")
        except (EOFError, KeyboardInterrupt):
            return 0
        result = shell.exec(line)
        if result.clear:
            console.clear()
            continue
        _print_result(result)
        if result.exit:
            return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="foliofs")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    exec_parser = subparsers.add_parser("exec", help="Run a single command")
    _add_common_flags(exec_parser)
    exec_parser.add_argument("command", help="Command string to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive console")
    _add_common_flags(shell_parser)
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    config = ConsoleConfig.from_args(args.data, args.log_level, args.cwd)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        shell = _build_shell(config)
    except (ContentError, ConsoleError) as exc:
        err_console.print(
            f"foliofs: {exc}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        raise SystemExit(2) from None
    exit_code = args.func(args, shell)
    raise SystemExit(exit_code)


__all__ = ["main"]
