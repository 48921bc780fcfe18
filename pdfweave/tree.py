"""Nodes of PDF name trees and number trees."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _entry_key(key: Any) -> str:
    if isinstance(key, bool):
        raise TypeError("tree keys must be strings or integers, not booleans")
    if isinstance(key, str):
        return "Names"
    if isinstance(key, int):
        return "Nums"
    raise TypeError(f"tree keys must be strings or integers, not {type(key).__name__}")


def _key_kind(keys: Iterable[Any]) -> str:
    kinds = {_entry_key(key) for key in keys}
    if not kinds:
        raise ValueError("at least one key is needed to tell a name tree from a number tree")
    if len(kinds) > 1:
        raise TypeError("tree keys must all be strings or all be integers")
    return kinds.pop()


class Tree:
    """A name-tree or number-tree node held as an indirect dictionary.

    String keys make a name tree ("Names"), integer keys a number tree ("Nums").
    """

    def __init__(self, object_number: int) -> None:
        self.object_number = object_number
        self.dictionary: dict[str, Any] = {}

    def _add(self, key: str, value: Any) -> None:
        if key in self.dictionary:
            raise ValueError(f"tree node already has a {key} entry")
        self.dictionary[key] = value

    def set_kids(self, kids: Iterable[int]) -> None:
        """Set the object numbers of the child nodes."""
        self._add("Kids", list(kids))

    def set_entries(self, entries: Iterable[tuple[Any, Any]]) -> None:
        """Set the key/value pairs of a leaf, flattened into one array."""
        pairs = list(entries)
        key_name = _key_kind(key for key, _ in pairs)
        self._add(key_name, [item for pair in pairs for item in pair])

    def set_limits(self, least: Any, greatest: Any) -> None:
        """Set the least and greatest keys found under this node."""
        _key_kind((least, greatest))
        self._add("Limits", [least, greatest])