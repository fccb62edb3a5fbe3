"""
Configuration merger module.

Folds decoded configuration trees into one, with later sources taking
precedence ("right precedent"). Mappings present on both sides are merged
recursively; any other collision is settled by the right-hand value.
"""

from copy import deepcopy
from typing import Any, Iterable


def merge(left: Any, right: Any) -> Any:
    """
    Merge two configuration values.

    Nested dictionaries are merged key by key. Everything else (lists,
    scalars, None, or a dict colliding with a non-dict) is replaced entirely
    by the right-hand value.

    Args:
        left: Earlier (lower precedence) value
        right: Later (higher precedence) value

    Returns:
        New merged value; neither input is modified
    """
    if not (isinstance(left, dict) and isinstance(right, dict)):
        return deepcopy(right)

    result = deepcopy(left)

    for key, value in right.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def merge_all(values: Iterable[Any]) -> Any:
    """
    Fold values left to right through merge().

    Returns an empty dict when there are no values.
    """
    result: Any = {}
    for value in values:
        result = merge(result, value)
    return result


def merge_sources(sources: Iterable[Any]) -> Any:
    """Fold (identifier, value) pairs in order. The result may be a non-dict."""
    return merge_all(value for _, value in sources)
