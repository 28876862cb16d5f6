"""vfstree: In-memory directory tree standing in for a real filesystem."""

from .base import Content, InvalidNameError, NodeMetadata, NodeType, PathAddressable
from .config import TreeConfig, connect_tree
from .directory import Directory
from .file import File
from .memory import TreeFS

__all__ = [
    "connect_tree",
    "Content",
    "Directory",
    "File",
    "InvalidNameError",
    "NodeMetadata",
    "NodeType",
    "PathAddressable",
    "TreeConfig",
    "TreeFS",
]
