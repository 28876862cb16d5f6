"""Configuration for an in-memory tree.

Provides the TreeConfig dataclass and the connect_tree factory function.
"""

from dataclasses import dataclass

from .base import SEPARATOR


@dataclass
class TreeConfig:
    """Configuration for a :class:`~vfstree.memory.TreeFS`.

    Attributes:
        root_name: Name of the root directory node.
        max_size_mb: Maximum total size of all files in megabytes.
            None means unlimited.
    """

    root_name: str = "root"
    max_size_mb: int | None = None


def connect_tree(**kwargs) -> TreeConfig:
    """Build a tree configuration.

    Args:
        **kwargs: Any of the :class:`TreeConfig` fields.

    Returns:
        TreeConfig for TreeFS initialization.

    Raises:
        ValueError: On unknown arguments, a root name containing the
            separator, or a negative size limit.

    Examples:
        >>> connect_tree()
        TreeConfig(root_name='root', max_size_mb=None)
        >>> connect_tree(root_name="sandbox", max_size_mb=5)
        TreeConfig(root_name='sandbox', max_size_mb=5)
    """
    root_name = kwargs.pop("root_name", "root")
    max_size_mb = kwargs.pop("max_size_mb", None)

    if kwargs:
        raise ValueError(f"Unexpected arguments for tree: {list(kwargs.keys())}")

    if not root_name or SEPARATOR in root_name:
        raise ValueError(f"Invalid root name: {root_name!r}")

    if max_size_mb is not None and max_size_mb < 0:
        raise ValueError(f"max_size_mb must be non-negative, got {max_size_mb}")

    return TreeConfig(root_name=root_name, max_size_mb=max_size_mb)
