"""Tiling patterns."""

from __future__ import annotations

import hashlib
from enum import IntEnum

from .util import Matrix, Name, Rectangle, Stream


class PatternType(IntEnum):
    TILING = 1
    SHADING = 2


class TilingType(IntEnum):
    CONSTANT_SPACING = 1
    NO_DISTORTION = 2
    FASTER_TILING = 3


class PaintType(IntEnum):
    COLORED = 1
    UNCOLORED = 2


def _plain(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


class TilingPattern:
    """A tiling pattern: a content stream repeated at fixed steps."""

    def __init__(
        self,
        bbox: Rectangle,
        x_step: float,
        y_step: float,
        paint_type: PaintType,
        tiling_type: TilingType,
        content: bytes,
    ) -> None:
        self.x_step = x_step
        self.y_step = y_step
        self.paint_type = paint_type
        self.stream = Stream(
            dictionary={
                "Type": Name("Pattern"),
                "BBox": bbox.as_pdf_array(),
                "XStep": x_step,
                "YStep": y_step,
                "PaintType": int(paint_type),
                "TilingType": int(tiling_type),
            },
            content=bytes(content),
        )

    def with_matrix(self, matrix: Matrix) -> "TilingPattern":
        if "Matrix" in self.stream.dictionary:
            raise ValueError("pattern already has a Matrix entry")
        self.stream.dictionary["Matrix"] = matrix.as_pdf_array()
        return self

    def cache_key(self) -> str:
        """A key equal for patterns with the same steps, paint type and content."""
        digest = hashlib.sha256(self.stream.content).hexdigest()
        return (
            f"tiling:{_plain(self.x_step)}:{_plain(self.y_step)}:"
            f"{int(self.paint_type)}:{digest}"
        )