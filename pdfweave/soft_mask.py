"""Soft masks for transparency."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .util import Name, Stream


class MaskSubType(Enum):
    LUMINOSITY = "Luminosity"
    ALPHA = "Alpha"

    def __str__(self) -> str:
        return self.value


class SoftMask:
    """A soft-mask dictionary built over a transparency group stream."""

    def __init__(self, sub_type: MaskSubType, stream: Stream) -> None:
        self.dictionary: dict[str, Any] = {"S": Name(sub_type.value), "G": stream}

    def _add(self, key: str, value: Any) -> None:
        if key in self.dictionary:
            raise ValueError(f"soft mask already has a {key} entry")
        self.dictionary[key] = value

    def typed(self) -> "SoftMask":
        self._add("Type", Name("Mask"))
        return self

    def with_backdrop(self, backdrop: list) -> "SoftMask":
        self._add("BG", backdrop)
        return self

    def with_function(self, function: dict) -> "SoftMask":
        self._add("TR", function)
        return self

    def with_function_identity(self) -> "SoftMask":
        self._add("TR", Name("Identity"))
        return self