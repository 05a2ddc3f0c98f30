"""
Module `lookup` — safe access to nested harvest and file data.

Main functions:
- get_path(obj, "a.b.c") -> value or ABSENT
    Walks mappings (and attributes of model objects) without ever raising; a missing
    step yields the ABSENT sentinel, which is distinct from an explicit `None`.

- deep_equal(left, right) -> bool
    Structural equality over JSON-like values: mapping key order is irrelevant,
    sequence order matters, `True` is not `1`. ABSENT equals only ABSENT.

- is_present(value) -> bool
    False for ABSENT, None and empty strings/collections.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class _Absent:
    """Marker for a property that does not exist."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT: Any = _Absent()


def get_path(obj: Any, path: str) -> Any:
    """
    Resolves a dotted property path on nested mappings or objects.

    Returns ABSENT as soon as a step is missing or the current value cannot be
    navigated (e.g. a string or a list).
    """
    current = obj
    for key in path.split("."):
        if current is ABSENT or current is None:
            return ABSENT
        if isinstance(current, Mapping):
            if key not in current:
                return ABSENT
            current = current[key]
        elif isinstance(current, BaseModel) and key in type(current).model_fields:
            current = getattr(current, key)
        else:
            return ABSENT
    return current


def is_present(value: Any) -> bool:
    if value is ABSENT or value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return True


def deep_equal(left: Any, right: Any) -> bool:
    if left is ABSENT or right is ABSENT:
        return left is right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[k], right[k]) for k in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))
    # bool is an int subclass: keep True and 1 apart
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False
    return left == right
