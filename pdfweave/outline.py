"""Document outline (bookmarks) for navigation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

from .util import Name


class OutlineItemFlags(IntFlag):
    NORMAL = 0
    ITALIC = 1
    BOLD = 2


@dataclass
class OutlineItem:
    """One bookmark, possibly with nested bookmarks beneath it."""

    title: str
    destination: Any = None
    children: list["OutlineItem"] = field(default_factory=list)
    is_open: bool = True
    color: Any = None
    flags: OutlineItemFlags = OutlineItemFlags.NORMAL

    def add_child(self, child: "OutlineItem") -> None:
        self.children.append(child)

    def with_open(self, is_open: bool) -> "OutlineItem":
        self.is_open = is_open
        return self

    def with_color(self, rgb: Any) -> "OutlineItem":
        self.color = rgb
        return self

    def with_flags(self, flags: OutlineItemFlags) -> "OutlineItem":
        self.flags = flags
        return self

    def count_descendants(self) -> int:
        return sum(1 + child.count_descendants() for child in self.children)


@dataclass
class OutlineDictionaries:
    """The outline root as (object number, dictionary) and the item dictionaries."""

    outline_dict: tuple[int, dict[str, Any]] | None = None
    item_dicts: list[tuple[int, dict[str, Any]]] = field(default_factory=list)


@dataclass
class DocumentOutline:
    """The root-level bookmarks of a document."""

    items: list[OutlineItem] = field(default_factory=list)

    def add_item(self, item: OutlineItem) -> None:
        self.items.append(item)

    def is_empty(self) -> bool:
        return not self.items

    def total_count(self) -> int:
        return sum(1 + item.count_descendants() for item in self.items)

    def to_dicts(self, allocate_id: Callable[[], int]) -> OutlineDictionaries:
        """Allocate object numbers and build the outline root dictionary.

        The root is numbered first, then every item depth-first.
        """
        if not self.items:
            return OutlineDictionaries()
        outline_id = allocate_id()
        item_ids = list(_allocate_ids(self.items, allocate_id))
        outline = {
            "Type": Name("Outlines"),
            "First": item_ids[0],
            "Last": item_ids[len(self.items) - 1],
            "Count": self.total_count(),
        }
        return OutlineDictionaries(outline_dict=(outline_id, outline), item_dicts=[])


def _allocate_ids(items: list[OutlineItem], allocate_id: Callable[[], int]):
    for item in items:
        yield allocate_id()
        yield from _allocate_ids(item.children, allocate_id)