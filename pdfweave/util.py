"""Geometry primitives, PDF value types and number formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class Name(str):
    """A PDF name object such as /Type; the slash is not part of the value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Name({str.__repr__(self)})"


@dataclass
class Stream:
    """A PDF stream: a dictionary of entries plus raw content bytes."""

    dictionary: dict = field(default_factory=dict)
    content: bytes = b""
    object_number: int | None = None


def format_number(value: float) -> str:
    """Format a number compactly for a content stream.

    Integral values lose their fractional part, others keep at most six
    decimals with trailing zeros removed.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not PDF numbers")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot write non-finite number {value!r}")
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


@dataclass(frozen=True)
class Posn:
    """A point; in PDF space y grows upwards from the bottom."""

    x: float
    y: float

    def to_stream_string(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True)
class Line:
    start: Posn
    end: Posn

    def as_pdf_array(self) -> list[float]:
        return [self.start.x, self.start.y, self.end.x, self.end.y]


@dataclass(frozen=True)
class Dims:
    width: float
    height: float

    def to_stream_string(self) -> str:
        return f"{format_number(self.width)} {format_number(self.height)}"


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its lower-left and upper-right corners."""

    x1: float
    y1: float
    x2: float
    y2: float

    def as_pdf_array(self) -> list[float]:
        return [self.x1, self.y1, self.x2, self.y2]

    def to_stream_string(self) -> str:
        return " ".join(format_number(v) for v in self.as_pdf_array())


@dataclass(frozen=True)
class Matrix:
    """A PDF transformation matrix [a b c d e f]."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def as_pdf_array(self) -> list[float]:
        return [self.a, self.b, self.c, self.d, self.e, self.f]

    def to_stream_string(self) -> str:
        return " ".join(format_number(v) for v in self.as_pdf_array())


class WindingRule(Enum):
    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class CompressionMethod(Enum):
    NONE = "none"
    FLATE = "flate"

    def filter_names(self) -> str:
        """Abbreviated filter names used for inline image data."""
        if self is CompressionMethod.FLATE:
            return "/A85 /Fl"
        return "/A85"


class StrokeOrFill(Enum):
    STROKE = "stroke"
    FILL = "fill"