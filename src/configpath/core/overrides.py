"""
Override layer for configuration lookups.

Overrides are keyed by the literal path string they were set with. No
normalization happens: 'a/b' and '/a/b' are two different overrides.
"""

from typing import Any, Dict, List


class _NotPresent:
    """Marker for a path that has no override."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NOT_PRESENT'


NOT_PRESENT = _NotPresent()


class OverrideLayer:
    """
    Flat mapping from path string to override value.

    None is a valid override value and is distinct from having no override.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}

    def set(self, path: str, value: Any):
        """Set (or replace) the override for an exact path string."""
        self._values[path] = value

    def lookup(self, path: str) -> Any:
        """Get the override for a path, or NOT_PRESENT if there is none."""
        if path in self._values:
            return self._values[path]
        return NOT_PRESENT

    def clear(self):
        """Remove all overrides."""
        self._values.clear()

    def paths(self) -> List[str]:
        return list(self._values)

    def __contains__(self, path: str) -> bool:
        return path in self._values

    def __len__(self) -> int:
        return len(self._values)
