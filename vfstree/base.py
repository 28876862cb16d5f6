"""Base node capability and metadata.

Defines the contract shared by directories and files in the tree, plus the
error raised for names the tree cannot hold.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

SEPARATOR = "/"


class InvalidNameError(ValueError):
    """Raised when a node name cannot be stored in the tree."""


class NodeType(enum.Enum):
    DIR = "dir"
    FILE = "file"


@dataclass
class NodeMetadata:
    """Snapshot of a node's size, timestamps and link count.

    Attributes:
        size: Size in bytes (0 for directories).
        created_at: ISO 8601 timestamp when the node was created (UTC).
        modified_at: ISO 8601 timestamp when the node was last modified (UTC).
        is_dir: True if this is a directory, False for files.
        links: Hard link count; for a directory, 2 plus its subdirectories.
    """

    size: int
    created_at: str
    modified_at: str
    is_dir: bool = False
    links: int = 1

    @property
    def st_size(self) -> int:
        return self.size

    @property
    def st_mode(self) -> int:
        return 0o040755 if self.is_dir else 0o100644

    @property
    def st_nlink(self) -> int:
        return self.links

    @property
    def st_mtime(self) -> float:
        return _parse_ts(self.modified_at)

    @property
    def st_ctime(self) -> float:
        return _parse_ts(self.created_at)


@runtime_checkable
class PathAddressable(Protocol):
    """What a directory needs from each of its children.

    ``applies_to`` is the prefix contract path resolution relies on: it
    is true when ``path`` is exactly the node's name, or the node's name
    followed by the separator and anything else.
    """

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> NodeType: ...

    def rename(self, new_name: str) -> None: ...

    def applies_to(self, path: str) -> bool: ...

    def size(self) -> int: ...

    def stat(self) -> NodeMetadata: ...


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _parse_ts(iso_str: str) -> float:
    try:
        return datetime.fromisoformat(iso_str).timestamp()
    except ValueError:
        return 0.0


class Content:
    """Shared base for every node in the tree."""

    def __init__(self, name: str, type: NodeType):
        self._name = name
        self._type = type
        self.created_at = _now_iso()
        self.modified_at = self.created_at

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> NodeType:
        return self._type

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> NodeType:
        return self._type

    def is_dir(self) -> bool:
        return self._type is NodeType.DIR

    def rename(self, new_name: str) -> None:
        """Change the stored name. Does not touch any other node."""
        self._name = new_name

    def applies_to(self, path: str) -> bool:
        """Check whether ``path`` names this node or something below it."""
        if path == self._name:
            return True
        return path.startswith(self._name + SEPARATOR)

    def size(self) -> int:
        raise NotImplementedError

    def links(self) -> int:
        return 1

    def touch(self) -> None:
        self.modified_at = _now_iso()

    def stat(self) -> NodeMetadata:
        return NodeMetadata(
            size=self.size(),
            created_at=self.created_at,
            modified_at=self.modified_at,
            is_dir=self.is_dir(),
            links=self.links(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
