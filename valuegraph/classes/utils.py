"""
Utility functions for valuegraph.

This module provides the shared helpers used across the package: the
canonical key that gives node values their identity, and the set
intersection used by the similarity measures.
"""

import dataclasses
from typing import Any, Hashable, Set, TypeVar

T = TypeVar("T")


class _Tag:
    """Marker distinguishing container kinds inside canonical keys."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


_LIST = _Tag("list")
_DICT = _Tag("dict")
_DATACLASS = _Tag("dataclass")


def canonical_key(value: Any) -> Hashable:
    """
    Return a hashable key that is equal for values that compare equal.

    Containers are converted recursively before anything is hashed, so a
    value keys the same way whether it sits at the top level or inside
    another container. Each kind maps onto the hashable type it compares
    equal to: sets onto ``frozenset``, bytearrays onto ``bytes``, tuples
    (named tuples included) onto plain tuples. Lists and dicts have no
    hashable equal and are tagged, which keeps ``[1, 2]`` apart from
    ``(1, 2)``. Other hashable values are their own key.

    Args:
        value: Any node value

    Returns:
        A hashable key

    Raises:
        TypeError: If the value is unhashable and not a supported container
    """
    if isinstance(value, list):
        return (_LIST, tuple(canonical_key(item) for item in value))
    if isinstance(value, tuple):
        return tuple(canonical_key(item) for item in value)
    if isinstance(value, dict):
        return (_DICT, frozenset((canonical_key(k), canonical_key(v)) for k, v in value.items()))
    if isinstance(value, (set, frozenset)):
        return frozenset(canonical_key(item) for item in value)
    if isinstance(value, bytearray):
        return bytes(value)

    try:
        hash(value)
    except TypeError:
        pass
    else:
        return value

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        items = tuple(
            (field.name, canonical_key(getattr(value, field.name)))
            for field in dataclasses.fields(value)
            if field.compare
        )
        return (_DATACLASS, type(value), items)

    raise TypeError(f"Unsupported node value of type {type(value).__name__}: cannot derive an identity key")


def set_intersection(first: Set[T], second: Set[T]) -> Set[T]:
    """Intersect two sets, iterating over the smaller one."""
    if len(first) > len(second):
        first, second = second, first
    return {item for item in first if item in second}

