import pytest

from foliofs import VirtualFileSystem
from foliofs.exceptions import (
    FilesystemNotInitialized,
    InvalidDepth,
    NotADirectory,
    NotAFile,
    PathNotFound,
)
from foliofs.nodes import DirectoryNode, FileNode


def test_queries_before_initialize_fail():
    vfs = VirtualFileSystem()
    assert not vfs.initialized
    with pytest.raises(FilesystemNotInitialized):
        vfs.ls("/")
    with pytest.raises(FilesystemNotInitialized):
        vfs.search("about")


def test_initialize_only_builds_once(records):
    vfs = VirtualFileSystem()
    vfs.initialize(records)
    vfs.initialize([])
    assert vfs.is_dir("/projects/alpha-beta")


def test_ls_root_lists_directories_alphabetically(vfs):
    entries = vfs.ls("/")
    assert [entry.name for entry in entries] == ["base", "meta", "projects"]
    assert all(entry.kind == "directory" for entry in entries)


def test_ls_puts_directories_before_files(vfs):
    entries = vfs.ls("/projects/alpha-beta")
    assert [entry.name for entry in entries] == [
        "attachments",
        "architecture",
        "decisions.log",
        "impact",
        "overview",
    ]
    assert entries[0].path == "/projects/alpha-beta/attachments"


def test_ls_relative_to_cwd(vfs):
    names = [entry.name for entry in vfs.ls(".", cwd="/base")]
    assert names == ["about", "contact", "resume"]


def test_ls_errors(vfs):
    with pytest.raises(PathNotFound, match="path not found: /missing"):
        vfs.ls("/missing")
    with pytest.raises(NotADirectory, match="not a directory: /base/about"):
        vfs.ls("/base/about")


def test_read_file(vfs):
    assert "Realtime vehicle map." in vfs.read_file("overview", cwd="/projects/fleet-tracker")
    with pytest.raises(NotAFile):
        vfs.read_file("/projects")
    with pytest.raises(PathNotFound):
        vfs.read_file("/projects/none")


def test_tree_depth_one_renders_direct_children(vfs):
    assert vfs.tree("/", 1) == "\n".join(
        [
            "/",
            "├── base/",
            "├── projects/",
            "└── meta/",
        ]
    )


def test_tree_depth_zero_renders_only_start(vfs):
    assert vfs.tree("/projects", 0) == "projects/"
    assert vfs.tree("/base/about", 2) == "about"


def test_tree_nested_prefixes(vfs):
    rendered = vfs.tree("/projects", 2).splitlines()
    assert rendered[0] == "projects/"
    assert rendered[1] == "├── alpha-beta/"
    assert rendered[2] == "│   ├── overview"
    assert rendered[6] == "│   └── attachments/"
    assert rendered[7] == "└── fleet-tracker/"
    assert rendered[8] == "    ├── overview"
    assert rendered[-1] == "    └── impact"
    assert not any("shot.jpg" in line for line in rendered)


def test_tree_depth_beyond_tree_is_fine(vfs):
    rendered = vfs.tree("/projects/alpha-beta", 50)
    assert "│       ├── shot.jpg" not in rendered
    assert "    ├── shot.jpg" in rendered
    assert rendered.endswith("    └── design-spec.pdf")


def test_tree_negative_depth(vfs):
    with pytest.raises(InvalidDepth):
        vfs.tree("/", -1)


def test_walk_is_preorder_in_insertion_order(vfs):
    paths = [path for path, _ in vfs.walk("/")]
    assert paths[:5] == ["/", "/base", "/base/about", "/base/contact", "/base/resume"]
    assert paths.index("/projects") < paths.index("/projects/alpha-beta") < paths.index("/meta")


def test_project_id_lookups(vfs):
    assert vfs.project_id_for_path("/projects/alpha-beta") == 1
    assert vfs.project_id_for_path("/projects/alpha-beta/attachments/shot.jpg") == 1
    assert vfs.project_id_for_path("/base/about") is None
    assert vfs.project_id_for_path("/missing") is None
    assert vfs.path_for_project_id(2) == "/projects/fleet-tracker"
    assert vfs.path_for_project_id("1") == "/projects/alpha-beta"
    assert vfs.path_for_project_id(99) is None


def test_tree_is_read_only(vfs):
    projects = vfs.resolve("/projects")
    assert isinstance(projects, DirectoryNode)
    with pytest.raises(TypeError):
        projects.children["new"] = projects  # type: ignore[index]
    with pytest.raises(AttributeError):
        projects.name = "renamed"  # type: ignore[misc]


def test_ls_sort_is_case_sensitive(monkeypatch):
    files = {
        name: FileNode(name, f"/{name}", "x") for name in ("alpha", "Zeta", "beta", "Alpha")
    }
    docs = DirectoryNode("docs", "/docs", {})
    root = DirectoryNode("", "/", {**files, "docs": docs})
    vfs = VirtualFileSystem()
    monkeypatch.setattr(vfs, "_tree", root)
    assert [entry.name for entry in vfs.ls("/")] == ["docs", "Alpha", "Zeta", "alpha", "beta"]
