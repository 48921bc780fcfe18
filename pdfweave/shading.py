"""Shading dictionaries for smooth colour transitions."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ShadingType(IntEnum):
    FUNCTION = 1
    AXIAL = 2
    RADIAL = 3
    FREE_FORM_GOURAUD = 4
    LATTICE_GOURAUD = 5
    COONS_PATCH = 6
    TENSOR_PATCH = 7


class ShadingBase:
    """Entries common to every shading type."""

    shading_type: ShadingType

    def __init__(self, color_space: Any) -> None:
        self.dictionary: dict[str, Any] = {}
        self._add("ShadingType", int(self.shading_type))
        self._add("ColorSpace", color_space)

    def _add(self, key: str, value: Any) -> None:
        if key in self.dictionary:
            raise ValueError(f"shading already has a {key} entry")
        self.dictionary[key] = value

    def with_background(self, background: Any):
        self._add("Background", background)
        return self

    def with_bbox(self, bbox: Any):
        self._add("BBox", bbox)
        return self

    def with_anti_alias(self, value: bool):
        self._add("AntiAlias", bool(value))
        return self


class FunctionShading(ShadingBase):
    """Type 1: colour defined by a function of x and y."""

    shading_type = ShadingType.FUNCTION

    def __init__(self, color_space: Any, function: dict) -> None:
        super().__init__(color_space)
        self._add("Function", function)

    def with_domain(self, domain: list) -> "FunctionShading":
        self._add("Domain", domain)
        return self

    def with_matrix(self, matrix: list) -> "FunctionShading":
        self._add("Matrix", matrix)
        return self


class AxialShading(ShadingBase):
    """Type 2: colour varies along an axis."""

    shading_type = ShadingType.AXIAL

    def __init__(self, color_space: Any, coords: list, function: dict) -> None:
        super().__init__(color_space)
        self._add("Coords", coords)
        self._add("Function", function)

    def with_domain(self, domain: list) -> "AxialShading":
        self._add("Domain", domain)
        return self

    def with_extend(self, extend: list) -> "AxialShading":
        self._add("Extend", extend)
        return self


class RadialShading(ShadingBase):
    """Type 3: colour varies between two circles."""

    shading_type = ShadingType.RADIAL

    def __init__(self, color_space: Any, function: dict) -> None:
        super().__init__(color_space)
        self._add("Function", function)

    def with_domain(self, domain: list) -> "RadialShading":
        self._add("Domain", domain)
        return self

    def with_extend(self, extend: list) -> "RadialShading":
        self._add("Extend", extend)
        return self


class FreeFormGouraudShading(ShadingBase):
    """Type 4: free-form triangle mesh."""

    shading_type = ShadingType.FREE_FORM_GOURAUD

    def __init__(
        self,
        color_space: Any,
        bits_per_coordinate: int,
        bits_per_component: int,
        bits_per_flag: int,
        decode: list,
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCoordinate", bits_per_coordinate)
        self._add("BitsPerComponent", bits_per_component)
        self._add("BitsPerFlag", bits_per_flag)
        self._add("Decode", decode)

    def with_function(self, function: dict) -> "FreeFormGouraudShading":
        self._add("Function", function)
        return self


class LatticeGouraudShading(ShadingBase):
    """Type 5: lattice-form triangle mesh."""

    shading_type = ShadingType.LATTICE_GOURAUD

    def __init__(
        self,
        color_space: Any,
        bits_per_coordinate: int,
        bits_per_component: int,
        vertices_per_row: int,
        decode: list,
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCoordinate", bits_per_coordinate)
        self._add("BitsPerComponent", bits_per_component)
        self._add("VerticesPerRow", vertices_per_row)
        self._add("Decode", decode)

    def with_function(self, function: dict) -> "LatticeGouraudShading":
        self._add("Function", function)
        return self


class _PatchShading(ShadingBase):
    def __init__(
        self,
        color_space: Any,
        bits_per_coordinate: int,
        bits_per_component: int,
        bits_per_flag: int,
    ) -> None:
        super().__init__(color_space)
        self._add("BitsPerCoordinate", bits_per_coordinate)
        self._add("BitsPerComponent", bits_per_component)
        self._add("BitsPerFlag", bits_per_flag)


class CoonsPatchShading(_PatchShading):
    """Type 6: Coons patch mesh."""

    shading_type = ShadingType.COONS_PATCH

    def with_decode(self, decode: list) -> "CoonsPatchShading":
        self._add("Decode", decode)
        return self

    def with_function(self, function: dict) -> "CoonsPatchShading":
        self._add("Function", function)
        return self


class TensorPatchShading(_PatchShading):
    """Type 7: tensor-product patch mesh."""

    shading_type = ShadingType.TENSOR_PATCH

    def with_decode(self, decode: list) -> "TensorPatchShading":
        self._add("Decode", decode)
        return self

    def with_function(self, function: dict) -> "TensorPatchShading":
        self._add("Function", function)
        return self