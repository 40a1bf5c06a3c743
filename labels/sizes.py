"""
labels.sizes - Physical label presets and their layout constants.

Pixel sizes assume 96 dpi; the SVG viewBox uses them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LabelSize(str, Enum):
    S38X25 = "38x25"
    S50X30 = "50x30"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LabelDimensions:
    width_mm: float
    height_mm: float
    width_px: int
    height_px: int


@dataclass(frozen=True)
class LabelLayout:
    padding: int
    barcode_height: int
    font_size: int
    price_font_size: int
    max_name_chars: int


LABEL_DIMENSIONS: dict[LabelSize, LabelDimensions] = {
    LabelSize.S38X25: LabelDimensions(38, 25, 144, 95),
    LabelSize.S50X30: LabelDimensions(50, 30, 189, 113),
}

LABEL_LAYOUTS: dict[LabelSize, LabelLayout] = {
    LabelSize.S38X25: LabelLayout(padding=4, barcode_height=30, font_size=8,
                                  price_font_size=10, max_name_chars=18),
    LabelSize.S50X30: LabelLayout(padding=6, barcode_height=40, font_size=10,
                                  price_font_size=12, max_name_chars=24),
}


def parse_size(size) -> LabelSize:
    """Accept a LabelSize or its "WxH" string; ValueError otherwise."""
    try:
        return LabelSize(size)
    except ValueError:
        valid = ", ".join(s.value for s in LabelSize)
        raise ValueError(f"Invalid label size {size!r}. Valid: {valid}") from None


def get_label_dimensions(size) -> dict:
    """Physical size in millimetres."""
    dims = LABEL_DIMENSIONS[parse_size(size)]
    return {"width_mm": dims.width_mm, "height_mm": dims.height_mm}
