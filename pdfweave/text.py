"""Standard fonts, approximate text measurement and line wrapping."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class StandardFont(Enum):
    """The standard fonts every PDF reader provides."""

    HELVETICA = "Helvetica"
    HELVETICA_BOLD = "Helvetica-Bold"
    HELVETICA_OBLIQUE = "Helvetica-Oblique"
    HELVETICA_BOLD_OBLIQUE = "Helvetica-BoldOblique"
    TIMES_ROMAN = "Times-Roman"
    TIMES_BOLD = "Times-Bold"
    TIMES_ITALIC = "Times-Italic"
    TIMES_BOLD_ITALIC = "Times-BoldItalic"
    COURIER = "Courier"
    COURIER_BOLD = "Courier-Bold"
    COURIER_OBLIQUE = "Courier-Oblique"
    COURIER_BOLD_OBLIQUE = "Courier-BoldOblique"

    def pdf_name(self) -> str:
        return self.value

    def measure_text(self, text: str, size: float) -> float:
        """Approximate width of text in points, from an average glyph width.

        The length counted is that of the UTF-8 encoding.
        """
        return len(text.encode("utf-8")) * size * _WIDTH_FACTORS[self]

    @staticmethod
    def from_family(family: str | None, weight: int, italic: bool) -> "StandardFont":
        """Pick a standard font by family name, weight and slant.

        Weights of 700 and above are bold; unknown families fall back to Helvetica.
        """
        lowered = family.lower() if family is not None else None
        if lowered is not None and ("times" in lowered or "serif" in lowered):
            group = "times"
        elif lowered is not None and any(k in lowered for k in ("courier", "mono", "console")):
            group = "courier"
        else:
            group = "helvetica"
        return _VARIANTS[(group, weight >= 700, italic)]


_WIDTH_FACTORS = {
    StandardFont.HELVETICA: 0.5,
    StandardFont.HELVETICA_OBLIQUE: 0.5,
    StandardFont.HELVETICA_BOLD: 0.55,
    StandardFont.HELVETICA_BOLD_OBLIQUE: 0.55,
    StandardFont.TIMES_ROMAN: 0.46,
    StandardFont.TIMES_ITALIC: 0.46,
    StandardFont.TIMES_BOLD: 0.5,
    StandardFont.TIMES_BOLD_ITALIC: 0.5,
    StandardFont.COURIER: 0.6,
    StandardFont.COURIER_BOLD: 0.6,
    StandardFont.COURIER_OBLIQUE: 0.6,
    StandardFont.COURIER_BOLD_OBLIQUE: 0.6,
}

_VARIANTS = {
    ("times", True, True): StandardFont.TIMES_BOLD_ITALIC,
    ("times", True, False): StandardFont.TIMES_BOLD,
    ("times", False, True): StandardFont.TIMES_ITALIC,
    ("times", False, False): StandardFont.TIMES_ROMAN,
    ("courier", True, True): StandardFont.COURIER_BOLD_OBLIQUE,
    ("courier", True, False): StandardFont.COURIER_BOLD,
    ("courier", False, True): StandardFont.COURIER_OBLIQUE,
    ("courier", False, False): StandardFont.COURIER,
    ("helvetica", True, True): StandardFont.HELVETICA_BOLD_OBLIQUE,
    ("helvetica", True, False): StandardFont.HELVETICA_BOLD,
    ("helvetica", False, True): StandardFont.HELVETICA_OBLIQUE,
    ("helvetica", False, False): StandardFont.HELVETICA,
}


class WrapMode(Enum):
    NO_WRAP = "none"
    WORD_WRAP = "word"
    CHAR_WRAP = "char"


def wrap_text(
    text: str, max_width: float, font: StandardFont, size: float, mode: WrapMode
) -> list[str]:
    """Break text into lines no wider than max_width where possible.

    A single word or character wider than max_width still gets a line of its
    own. The result always holds at least one line.
    """
    if mode is WrapMode.NO_WRAP:
        return [text]
    if mode is WrapMode.WORD_WRAP:
        return _wrap_units(text.split(), " ", max_width, font, size)
    return _wrap_units(list(text), "", max_width, font, size)


def _wrap_units(
    units: Iterable[str], separator: str, max_width: float, font: StandardFont, size: float
) -> list[str]:
    lines: list[str] = []
    current = ""
    for unit in units:
        candidate = f"{current}{separator}{unit}" if current else unit
        if font.measure_text(candidate, size) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = unit
    if current:
        lines.append(current)
    return lines or [""]