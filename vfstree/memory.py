"""Path-based filesystem facade over a directory tree."""

from __future__ import annotations

import errno as _errno
import logging
import posixpath

from .base import SEPARATOR, NodeMetadata, PathAddressable
from .config import TreeConfig
from .directory import Directory
from .file import File

logger = logging.getLogger(__name__)


class TreeFS:
    """In-memory filesystem backed by a :class:`Directory` tree.

    Every path is resolved from the root directory with
    :meth:`Directory.get_child`, so the tree itself is the only source of
    truth. Paths are absolute or relative to the root; there is no
    working directory.

    Example:
        >>> fs = TreeFS()
        >>> fs.write("/src/main.py", b"print('hi')")
        >>> fs.list("/src")
        ['main.py']
        >>> fs.du("/")
        11
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self.config = config if config is not None else TreeConfig()
        self.root = Directory(self.config.root_name)
        self._max_size_bytes: int | None = (
            self.config.max_size_mb * 1024 * 1024
            if self.config.max_size_mb is not None
            else None
        )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, path: str) -> PathAddressable | None:
        """Return the node at ``path``, or None if nothing is there."""
        rel = self._normalize(path)
        if not rel:
            return self.root
        return self.root.get_child(self.root.name + SEPARATOR + rel)

    def exists(self, path: str) -> bool:
        return self.get(path) is not None

    def isdir(self, path: str) -> bool:
        return isinstance(self.get(path), Directory)

    def isfile(self, path: str) -> bool:
        return isinstance(self.get(path), File)

    def list(self, path: str = "/") -> list[str]:
        """List immediate children of a directory in insertion order."""
        return [child.name for child in self._directory(path)]

    def listdir(self, path: str = "/") -> list[str]:
        return self.list(path)

    def stat(self, path: str) -> NodeMetadata:
        return self._node(path).stat()

    def getsize(self, path: str) -> int:
        node = self._node(path)
        if isinstance(node, Directory):
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        return node.size()

    def du(self, path: str = "/") -> int:
        """Total bytes of all files under a directory."""
        return self._directory(path).size_summarized()

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def read(self, path: str) -> bytes:
        node = self._node(path)
        if not isinstance(node, File):
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        return node.content

    def write(self, path: str, content: bytes) -> None:
        """Create or overwrite a file. The parent directory must exist.

        Raises:
            TypeError: If content is not bytes.
            IsADirectoryError: If ``path`` is a directory.
            OSError: If the write would exceed the configured size limit.
        """
        if not isinstance(content, bytes):
            raise TypeError(f"Expected bytes, got {type(content).__name__}")
        parent_path, name = self._split(path)
        parent = self._directory(parent_path)
        existing = self._lookup(parent, name)
        if isinstance(existing, Directory):
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)

        self._check_size_limit(existing.size() if existing else 0, len(content))

        if isinstance(existing, File):
            existing.set_content(content)
        else:
            parent.add_child(File(name, content))
        logger.debug("wrote %d bytes to %s", len(content), path)

    def remove(self, path: str) -> None:
        parent_path, name = self._split(path)
        parent = self._directory(parent_path)
        node = self._lookup(parent, name)
        if node is None:
            raise FileNotFoundError(_errno.ENOENT, "No such file", path)
        if isinstance(node, Directory):
            raise IsADirectoryError(_errno.EISDIR, "Is a directory", path)
        parent.remove_child(name)

    # -------------------------------------------------------------------------
    # Directories
    # -------------------------------------------------------------------------

    def mkdir(self, path: str, *, parents: bool = False, exist_ok: bool = False) -> None:
        if parents:
            self.makedirs(path, exist_ok=exist_ok)
            return
        parent_path, name = self._split(path)
        parent = self._directory(parent_path)
        existing = self._lookup(parent, name)
        if existing is not None:
            if exist_ok and isinstance(existing, Directory):
                return
            raise FileExistsError(_errno.EEXIST, "File exists", path)
        parent.add_child(Directory(name))
        logger.debug("created directory %s", path)

    def makedirs(self, path: str, *, exist_ok: bool = True) -> None:
        rel = self._normalize(path)
        if not rel:
            if not exist_ok:
                raise FileExistsError(_errno.EEXIST, "File exists", path)
            return
        parts = rel.split(SEPARATOR)
        current = ""
        for i, part in enumerate(parts):
            current += SEPARATOR + part
            last = i == len(parts) - 1
            self.mkdir(current, exist_ok=exist_ok or not last)

    def rmdir(self, path: str) -> None:
        parent_path, name = self._split(path)
        parent = self._directory(parent_path)
        node = self._directory(path)
        if len(node):
            raise OSError(_errno.ENOTEMPTY, "Directory not empty", path)
        parent.remove_child(name)
        logger.debug("removed directory %s", path)

    def rename(self, src: str, dst: str) -> None:
        """Move a node to a new path.

        An existing destination file is replaced when the source is a
        file; any other existing destination is an error.
        """
        src_parent_path, src_name = self._split(src)
        dst_parent_path, dst_name = self._split(dst)
        src_parent = self._directory(src_parent_path)
        node = self._node(src)
        dst_parent = self._directory(dst_parent_path)

        src_rel = self._normalize(src)
        dst_rel = self._normalize(dst)
        if dst_rel == src_rel:
            return
        if dst_rel.startswith(src_rel + SEPARATOR):
            raise OSError(_errno.EINVAL, "Cannot move a directory into itself", dst)

        existing = self._lookup(dst_parent, dst_name)
        if existing is not None:
            if isinstance(existing, File) and isinstance(node, File):
                dst_parent.remove_child(dst_name)
            else:
                raise FileExistsError(_errno.EEXIST, "File exists", dst)

        src_parent.remove_child(src_name)
        node.rename(dst_name)
        dst_parent.add_child(node)
        logger.debug("renamed %s -> %s", src, dst)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _normalize(self, path: str) -> str:
        """Normalize a path to root-relative form ("" for the root)."""
        return posixpath.normpath(SEPARATOR + path).lstrip(SEPARATOR)

    def _split(self, path: str) -> tuple[str, str]:
        rel = self._normalize(path)
        if not rel:
            raise OSError(_errno.EPERM, "Operation not permitted on root", path)
        parent, _, name = rel.rpartition(SEPARATOR)
        return parent, name

    def _lookup(self, parent: Directory, name: str) -> PathAddressable | None:
        # qualify with the parent's name so a child sharing it still resolves
        return parent.get_child(parent.name + SEPARATOR + name)

    def _node(self, path: str) -> PathAddressable:
        node = self.get(path)
        if node is None:
            raise FileNotFoundError(_errno.ENOENT, "No such file or directory", path)
        return node

    def _directory(self, path: str) -> Directory:
        node = self._node(path)
        if not isinstance(node, Directory):
            raise NotADirectoryError(_errno.ENOTDIR, "Not a directory", path)
        return node

    def _check_size_limit(self, existing_size: int, new_content_size: int) -> None:
        if self._max_size_bytes is None:
            return
        new_total = self.root.size_summarized() - existing_size + new_content_size
        if new_total > self._max_size_bytes:
            raise OSError(
                f"VFS size limit exceeded: {new_total / 1024 / 1024:.1f}MB > "
                f"{self._max_size_bytes / 1024 / 1024:.1f}MB"
            )
