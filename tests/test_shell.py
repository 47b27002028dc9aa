import logging

import pytest

from foliofs import ConsoleShell, VirtualFileSystem
from foliofs.exceptions import NotADirectory, PathNotFound
from foliofs.shell import ALIASES, CommandName, ExternalNavigation, RecordNavigation
from foliofs.shell.registry import COMMAND_REGISTRY


def test_cd_then_pwd(shell: ConsoleShell):
    result = shell.exec("cd /projects")
    assert not result.error
    assert result.output == "Changed directory to /projects"
    assert shell.exec("pwd").output == "/projects"


def test_shell_syntax_is_rejected_and_recorded(shell: ConsoleShell):
    result = shell.exec("ls | grep x")
    assert result.error
    assert result.output.startswith("Error: shell features are not supported")
    assert shell.history == ["ls | grep x"]
    assert shell.cwd == "/"


def test_blank_input_is_ignored(shell: ConsoleShell):
    result = shell.exec("   ")
    assert result.output == ""
    assert not result.error
    assert shell.history == []


def test_history_records_every_line_once(shell: ConsoleShell):
    shell.exec("ls")
    shell.exec("bogus")
    shell.exec("  read  ")
    assert shell.history == ["ls", "bogus", "read"]


def test_unknown_command(shell: ConsoleShell):
    result = shell.exec("rm -rf /")
    assert result.error
    assert result.output == "Error: unknown command: rm. Type 'help' for available commands."


def test_list_formats_entries(shell: ConsoleShell):
    assert shell.exec("ls").output == "base/\nmeta/\nprojects/"
    assert shell.exec("dir /base").output == "about\ncontact\nresume"


def test_list_of_file_is_error(shell: ConsoleShell):
    result = shell.exec("list /base/about")
    assert result.error
    assert result.output == "Error: not a directory: /base/about"


def test_list_empty_directory():
    shell = ConsoleShell(VirtualFileSystem.from_records([]))
    assert shell.exec("ls /projects").output == "(empty directory)"


def test_open_without_args_reports_cwd(shell: ConsoleShell):
    assert shell.exec("open").output == "Current directory: /"


def test_open_project_file_navigates_to_record(shell: ConsoleShell):
    shell.exec("cd projects/alpha-beta")
    result = shell.exec("open overview")
    assert result.output == "Opening project: /projects/alpha-beta/overview"
    assert result.navigation == RecordNavigation(record_id=1)
    assert result.navigation.kind == "record"
    assert shell.cwd == "/projects/alpha-beta"


def test_open_external_reference(shell: ConsoleShell):
    result = shell.exec("open /base/resume")
    assert isinstance(result.navigation, ExternalNavigation)
    assert result.navigation.kind == "external"
    assert result.output == "Opening: /base/resume"


def test_open_plain_file_shows_content(shell: ConsoleShell):
    result = shell.exec("open /meta/version")
    assert result.navigation is None
    assert result.output.startswith("Portfolio v2.0")


def test_open_missing_path_keeps_cwd(shell: ConsoleShell):
    shell.exec("cd /meta")
    result = shell.exec("cd ../nowhere")
    assert result.error
    assert result.output == "Error: path not found: ../nowhere"
    assert shell.cwd == "/meta"


def test_cd_parent_from_root_stays_at_root(shell: ConsoleShell):
    shell.exec("cd ..")
    assert shell.exec("cwd").output == "/"


def test_read(shell: ConsoleShell):
    result = shell.exec('cat "/projects/fleet-tracker/overview"')
    assert result.output.startswith("Fleet Tracker\n=============\n")
    assert shell.exec("read").output == "Error: read requires a file path"
    assert shell.exec("read /projects").output == "Error: not a file: /projects"


def test_tree_scenario(shell: ConsoleShell):
    result = shell.exec("tree / 1")
    assert result.output.splitlines() == ["/", "├── base/", "├── projects/", "└── meta/"]


def test_tree_default_depth_is_three(shell: ConsoleShell):
    lines = shell.exec("tree").output.splitlines()
    assert "│   │   └── attachments/" in lines
    assert not any("shot.jpg" in line for line in lines)


@pytest.mark.parametrize("depth", ["0", "-2", "two", "1.5"])
def test_tree_rejects_invalid_depth(shell: ConsoleShell, depth: str):
    result = shell.exec(f"tree / {depth}")
    assert result.error
    assert result.output == "Error: tree depth must be a positive number"


def test_search_output(shell: ConsoleShell):
    result = shell.exec("search outbox pattern")
    assert result.output.splitlines()[0] == "Found 1 result(s) for: outbox pattern"
    assert "[1] /projects/alpha-beta/decisions.log" in result.output
    assert shell.exec("search zzzz").output == "No results found for: zzzz"
    assert shell.exec("search").output == "Error: search requires a keyword"


def test_search_separates_results_with_blank_lines(shell: ConsoleShell):
    output = shell.exec("search alpha beta").output
    assert output.startswith(
        "Found 4 result(s) for: alpha beta\n\n[1] /projects/alpha-beta/overview\n    Alpha Beta"
    )
    assert "\n\n[2] /projects/alpha-beta/architecture\n    " in output


def test_help_clear_exit(shell: ConsoleShell):
    assert "Console Mode - Available Commands" in shell.exec("help").output
    cleared = shell.exec("clear")
    assert cleared.clear and cleared.output == ""
    closing = shell.exec("quit")
    assert closing.exit
    assert closing.output == "Closing console..."


def test_uninitialized_filesystem_reports_error():
    shell = ConsoleShell(VirtualFileSystem())
    result = shell.exec("ls")
    assert result.error
    assert result.output == "Error: Filesystem not initialized"
    assert shell.exec("help").error is False


def test_change_directory(shell: ConsoleShell):
    assert shell.change_directory("/projects/fleet-tracker")
    assert shell.cwd == "/projects/fleet-tracker"
    assert not shell.change_directory("overview")
    assert not shell.change_directory("/missing")
    assert shell.cwd == "/projects/fleet-tracker"


def test_every_command_has_one_handler(shell: ConsoleShell):
    assert {spec.name for spec in COMMAND_REGISTRY.iter_commands()} == set(CommandName)
    assert set(ALIASES.values()) <= set(CommandName)
    with pytest.raises(ValueError):
        COMMAND_REGISTRY.register(CommandName.LIST, lambda shell, args: None)


def test_history_is_a_copy(shell: ConsoleShell):
    shell.exec("ls")
    history = shell.history
    history.append("tampered")
    assert shell.history == ["ls"]


def test_start_directory_is_normalized(vfs: VirtualFileSystem):
    shell = ConsoleShell(vfs, cwd="projects/alpha-beta/..")
    assert shell.exec("pwd").output == "/projects"
    assert shell.exec("ls").output == "alpha-beta/\nfleet-tracker/"


def test_start_directory_must_exist(vfs: VirtualFileSystem):
    with pytest.raises(PathNotFound):
        ConsoleShell(vfs, cwd="/nowhere")
    with pytest.raises(NotADirectory):
        ConsoleShell(vfs, cwd="/base/about")


class BrokenListing(VirtualFileSystem):
    def ls(self, path=".", cwd="/"):
        raise RuntimeError("listing exploded")


def test_unexpected_handler_failure_becomes_error_result(records, caplog):
    shell = ConsoleShell(BrokenListing.from_records(records), cwd="/meta")
    with caplog.at_level(logging.ERROR, logger="foliofs.shell.core"):
        result = shell.exec("ls")
    assert result.error
    assert result.output == "Error: list failed: listing exploded"
    assert shell.cwd == "/meta"
    assert shell.history == ["ls"]
    assert "Command list failed" in caplog.text
    assert caplog.records[-1].exc_info is not None
