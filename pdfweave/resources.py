"""Resource categories and the named-resource dictionary of a content stream."""

from __future__ import annotations

from enum import Enum


class ResourceCategory(Enum):
    """A resource type key in a resource dictionary."""

    COLOR_SPACE = "ColorSpace"
    EXT_G_STATE = "ExtGState"
    FONT = "Font"
    PATTERN = "Pattern"
    PROPERTIES = "Properties"
    SHADING = "Shading"
    X_OBJECT = "XObject"
    PROC_SET = "ProcSet"

    def prefix(self) -> str:
        """Prefix used when generating resource names in this category."""
        return _PREFIXES[self]

    def __str__(self) -> str:
        return self.value


_PREFIXES = {
    ResourceCategory.COLOR_SPACE: "CS",
    ResourceCategory.EXT_G_STATE: "GS",
    ResourceCategory.FONT: "F",
    ResourceCategory.PATTERN: "P",
    ResourceCategory.PROPERTIES: "Pr",
    ResourceCategory.SHADING: "Sh",
    ResourceCategory.X_OBJECT: "Im",
    ResourceCategory.PROC_SET: "PS",
}

STANDARD_RESOURCE_CATEGORIES = tuple(category.value for category in ResourceCategory)


class NamedResources:
    """Maps generated resource names to object numbers, grouped by category."""

    def __init__(self) -> None:
        self._dictionary: dict[str, dict[str, int]] = {}

    def add(self, category: ResourceCategory, object_id: int) -> str:
        """Register an object under a new name in the category and return that name."""
        name = f"{category.prefix()}{self.category_count(category)}"
        self._dictionary.setdefault(category.value, {})[name] = object_id
        return name

    def get(self, category: ResourceCategory) -> dict[str, int] | None:
        entries = self._dictionary.get(category.value)
        return dict(entries) if entries is not None else None

    def contains(self, category: ResourceCategory) -> bool:
        return category.value in self._dictionary

    def category_count(self, category: ResourceCategory) -> int:
        return len(self._dictionary.get(category.value, {}))

    def is_empty(self) -> bool:
        return not self._dictionary

    def __len__(self) -> int:
        return len(self._dictionary)

    def to_dict(self) -> dict[str, dict[str, int]]:
        """A copy of the resource dictionary, keyed by category name."""
        return {key: dict(value) for key, value in self._dictionary.items()}