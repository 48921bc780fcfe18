"""Standard and custom page sizes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .util import Dims

MM_TO_POINTS = 2.8346456693
IN_TO_POINTS = 72.0


class _Unit(Enum):
    POINTS = 1.0
    INCHES = IN_TO_POINTS
    MM = MM_TO_POINTS


@dataclass(frozen=True)
class PageSize:
    """A page size: one of the named sizes or custom dimensions in some unit."""

    label: str
    width: float
    height: float
    unit: _Unit

    A0: ClassVar["PageSize"]
    A1: ClassVar["PageSize"]
    A2: ClassVar["PageSize"]
    A3: ClassVar["PageSize"]
    A4: ClassVar["PageSize"]
    A5: ClassVar["PageSize"]
    LETTER: ClassVar["PageSize"]
    LEGAL: ClassVar["PageSize"]

    @staticmethod
    def default() -> "PageSize":
        return PageSize.A4

    @staticmethod
    def custom_points(width: float, height: float) -> "PageSize":
        return PageSize("CustomPoints", width, height, _Unit.POINTS)

    @staticmethod
    def custom_inches(width: float, height: float) -> "PageSize":
        return PageSize("CustomInches", width, height, _Unit.INCHES)

    @staticmethod
    def custom_mm(width: float, height: float) -> "PageSize":
        return PageSize("CustomMm", width, height, _Unit.MM)

    def dims_points(self) -> Dims:
        """Width and height in points; negative custom sizes clamp to zero."""
        factor = self.unit.value
        return Dims(max(self.width, 0.0) * factor, max(self.height, 0.0) * factor)

    def rect_to_pdf_array(self) -> list[float]:
        dims = self.dims_points()
        return [0.0, 0.0, dims.width, dims.height]


PageSize.A0 = PageSize("A0", 841.0, 1189.0, _Unit.MM)
PageSize.A1 = PageSize("A1", 594.0, 841.0, _Unit.MM)
PageSize.A2 = PageSize("A2", 420.0, 594.0, _Unit.MM)
PageSize.A3 = PageSize("A3", 297.0, 420.0, _Unit.MM)
PageSize.A4 = PageSize("A4", 210.0, 297.0, _Unit.MM)
PageSize.A5 = PageSize("A5", 148.0, 210.0, _Unit.MM)
PageSize.LETTER = PageSize("Letter", 8.5, 11.0, _Unit.INCHES)
PageSize.LEGAL = PageSize("Legal", 8.5, 14.0, _Unit.INCHES)