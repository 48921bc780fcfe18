"""Pages and the page tree."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .page_size import PageSize
from .util import Name, Stream


class Page:
    """A leaf of the page tree with its own content stream."""

    def __init__(self, object_number: int, content_object_number: int, content: bytes) -> None:
        self.object_number = object_number
        self.dictionary: dict[str, Any] = {
            "Type": Name("Page"),
            "Contents": Stream(content=bytes(content), object_number=content_object_number),
        }

    def with_page_size(self, page_size: PageSize) -> "Page":
        self.dictionary["MediaBox"] = page_size.rect_to_pdf_array()
        return self


class PageTree:
    """An intermediate or root node of the page tree.

    Object numbers for new nodes, pages and content streams come from allocate_id.
    """

    def __init__(self, allocate_id: Callable[[], int], object_number: int | None = None) -> None:
        self._allocate_id = allocate_id
        self.object_number = allocate_id() if object_number is None else object_number
        self.dictionary: dict[str, Any] = {"Type": Name("Pages"), "Kids": [], "Count": 0}
        self.children: list[Page | PageTree] = []

    def with_default_page_size(self, page_size: PageSize) -> "PageTree":
        self.dictionary["MediaBox"] = page_size.rect_to_pdf_array()
        return self

    def make_page(self, content: bytes) -> Page:
        page_number = self._allocate_id()
        return Page(page_number, self._allocate_id(), content)

    def make_tree(self) -> "PageTree":
        return PageTree(self._allocate_id)

    def add_tree(self, tree: "PageTree") -> None:
        """Attach a subtree; add it only after its own pages are in place."""
        if "Kids" not in self.dictionary:
            raise ValueError("parent page tree must have a Kids array")
        self._set_parent(tree.dictionary)
        self._add_kid(tree)

    def add_page(self, page: Page) -> None:
        self._set_parent(page.dictionary)
        self.dictionary["Count"] = self.dictionary.get("Count", 0) + 1
        self._add_kid(page)

    def add_page_using(self, content: bytes) -> None:
        self.add_page(self.make_page(content))

    def update_counts(self) -> int:
        """Recount the pages under this node and its subtrees; return the total."""
        count = 0
        for child in self.children:
            count += 1 if isinstance(child, Page) else child.update_counts()
        self.dictionary["Count"] = count
        return count

    def _set_parent(self, dictionary: dict[str, Any]) -> None:
        if "Parent" in dictionary:
            raise ValueError("node already has a Parent entry")
        dictionary["Parent"] = self.object_number

    def _add_kid(self, kid: Page | PageTree) -> None:
        kids = self.dictionary.get("Kids")
        if not isinstance(kids, list):
            raise ValueError("Kids entry is not an array")
        self.children.append(kid)
        kids.append(kid.object_number)