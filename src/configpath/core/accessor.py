"""
Configuration accessor module.

Resolves slash-delimited paths such as 'a/b/0/c' against a configuration
tree. Mapping nodes are indexed by key, list nodes by non-negative integer
segments. Anything that cannot be resolved yields ABSENT rather than an
exception.
"""

from typing import Any, List

SEPARATOR = '/'


class _Absent:
    """Marker for a path that does not resolve to a value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'ABSENT'


ABSENT = _Absent()


def split_path(path: str) -> List[str]:
    """
    Split a path into segments.

    One leading separator is dropped, so '/a/b' and 'a/b' are equivalent.
    An empty path gives a single empty segment.
    """
    if path.startswith(SEPARATOR):
        path = path[1:]
    return path.split(SEPARATOR)


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def resolve(tree: Any, path: str) -> Any:
    """
    Walk a configuration tree along a path.

    Args:
        tree: Root of the configuration tree
        path: Slash-delimited path

    Returns:
        The value at the path, or ABSENT if any segment is missing, indexes a
        list out of range or with a non-numeric segment, descends into a
        scalar, or if the final value is None
    """
    node = tree
    for segment in split_path(path):
        if isinstance(node, dict):
            if segment not in node:
                return ABSENT
            node = node[segment]
        elif isinstance(node, (list, tuple)) and _is_index(segment):
            index = int(segment)
            if index >= len(node):
                return ABSENT
            node = node[index]
        else:
            return ABSENT

    if node is None:
        return ABSENT
    return node
