"""Directory node: child storage, path lookup and traversal."""

from __future__ import annotations

import logging
from typing import Iterator

from .base import SEPARATOR, Content, InvalidNameError, NodeType, PathAddressable

logger = logging.getLogger(__name__)


def _check_name(name: str) -> None:
    if SEPARATOR in name:
        raise InvalidNameError(f"Directory name can not contain {SEPARATOR}: {name!r}")


class Directory(Content):
    """A directory holding an ordered list of child nodes.

    Children are kept in insertion order. Names are not required to be
    unique; lookups return the first match.

    Lookups take a path relative to this directory, optionally prefixed
    with the directory's own name::

        >>> root = Directory("root")
        >>> sub = Directory("sub")
        >>> root.add_child(sub)
        >>> root.get_child("root/sub") is root.get_child("sub") is sub
        True

    The directory is also a single-cursor iterator over its children
    (``rewind``/``current``/``key``/``next``/``valid``). Iterating with
    ``for`` uses a snapshot instead and does not move that cursor.
    """

    def __init__(self, name: str):
        _check_name(name)
        super().__init__(name, NodeType.DIR)
        self._children: list[PathAddressable] = []
        self._cursor = 0

    def rename(self, new_name: str) -> None:
        """Rename the directory.

        Raises:
            InvalidNameError: If ``new_name`` contains the separator.
        """
        _check_name(new_name)
        super().rename(new_name)

    # -------------------------------------------------------------------------
    # Size
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Always 0. Use :meth:`size_summarized` for the subtree total."""
        return 0

    def links(self) -> int:
        return 2 + sum(isinstance(child, Directory) for child in self._children)

    def size_summarized(self) -> int:
        """Total size in bytes of every file below this directory."""
        total = 0
        for child in self._children:
            if isinstance(child, Directory):
                total += child.size_summarized()
            else:
                total += child.size()
        return total

    # -------------------------------------------------------------------------
    # Children
    # -------------------------------------------------------------------------

    def add_child(self, child: PathAddressable) -> None:
        self._children.append(child)
        self.touch()
        logger.debug("added %r to %r", child, self)

    def remove_child(self, name: str) -> bool:
        """Remove the first child that ``name`` applies to.

        Returns:
            True if a child was removed, False if nothing matched.
        """
        for index, child in enumerate(self._children):
            if child.applies_to(name):
                del self._children[index]
                # keep the cursor on the same child
                if index < self._cursor:
                    self._cursor -= 1
                self.touch()
                logger.debug("removed %r from %r", child, self)
                return True
        return False

    def has_child(self, name: str) -> bool:
        return self.get_child(name) is not None

    def get_child(self, name: str) -> PathAddressable | None:
        """Resolve ``name`` to a child or descendant.

        ``name`` may be a bare child name, a nested path such as
        ``"sub/file"``, or either of those prefixed with this directory's
        own name. Each level strips one segment and hands the rest to the
        child it applies to.

        Returns:
            The matching node, or None if nothing in the subtree matches.
        """
        child_name = self._real_child_name(name)
        for child in self._children:
            if child.name == child_name:
                return child
            # one resolution per level; a miss falls through to later siblings
            if isinstance(child, Directory) and child.applies_to(child_name):
                found = child.get_child(child_name)
                if found is not None:
                    return found
        return None

    def _real_child_name(self, name: str) -> str:
        if self.applies_to(name):
            return name[len(self._name) + 1 :]
        return name

    def get_children(self) -> list[PathAddressable]:
        """Snapshot of the children in insertion order."""
        return list(self._children)

    # -------------------------------------------------------------------------
    # Cursor iteration
    # -------------------------------------------------------------------------

    def rewind(self) -> None:
        self._cursor = 0

    def current(self) -> PathAddressable | None:
        if self.valid():
            return self._children[self._cursor]
        return None

    def key(self) -> str | None:
        child = self.current()
        if child is None:
            return None
        return child.name

    def next(self) -> None:
        if self._cursor < len(self._children):
            self._cursor += 1

    def valid(self) -> bool:
        return 0 <= self._cursor < len(self._children)

    # -------------------------------------------------------------------------
    # Python container protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[PathAddressable]:
        return iter(self.get_children())

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_child(name)
