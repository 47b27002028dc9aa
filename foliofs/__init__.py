"""foliofs package: read-only portfolio filesystem with a console shell."""

from .builder import TreeBuilder, slugify
from .config import ConsoleConfig, SiteProfile
from .nodes import DirectoryNode, FileNode, Node
from .path_utils import resolve_absolute, resolve_node
from .records import Attachment, ContentRecord, ExternalLink, load_content
from .search import SearchResult
from .shell import CommandResult, ConsoleShell, complete
from .vfs import DirEntry, VirtualFileSystem

__all__ = [
    "VirtualFileSystem",
    "ConsoleShell",
    "CommandResult",
    "DirEntry",
    "SearchResult",
    "TreeBuilder",
    "slugify",
    "complete",
    "ContentRecord",
    "ExternalLink",
    "Attachment",
    "load_content",
    "SiteProfile",
    "ConsoleConfig",
    "Node",
    "DirectoryNode",
    "FileNode",
    "resolve_absolute",
    "resolve_node",
]
