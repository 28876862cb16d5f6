"""Leaf node holding file content."""

from __future__ import annotations

from .base import Content, NodeType


def _check_bytes(content: bytes) -> None:
    if not isinstance(content, bytes):
        raise TypeError(f"Expected bytes, got {type(content).__name__}")


class File(Content):
    """A file in the tree.

    Content is held as ``bytes``. Text callers encode as UTF-8 before
    calling :meth:`set_content`.
    """

    def __init__(self, name: str, content: bytes = b""):
        super().__init__(name, NodeType.FILE)
        _check_bytes(content)
        self._content = content

    @property
    def content(self) -> bytes:
        return self._content

    def set_content(self, content: bytes) -> None:
        """Replace the file content.

        Raises:
            TypeError: If content is not bytes.
        """
        _check_bytes(content)
        self._content = content
        self.touch()

    def size(self) -> int:
        return len(self._content)
