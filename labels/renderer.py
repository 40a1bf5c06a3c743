"""
labels.renderer - Single price label as SVG.

Layout, top to bottom: Code 128 bars, the raw barcode text, the product
name (truncated to the size's character budget) and the formatted price.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from barcodes.code128 import bar_runs, encode_code128
from labels.currency import CurrencyFormat, format_currency
from labels.document import Group, Rect, SvgDocument, Text, escape_xml
from labels.sizes import LABEL_DIMENSIONS, LABEL_LAYOUTS, LabelSize, parse_size

ELLIPSIS = ".."


@dataclass(frozen=True)
class LabelRequest:
    barcode: str
    product_name: str
    price: int
    size: LabelSize = LabelSize.S38X25

    def __post_init__(self):
        # Accept "38x25" as well as LabelSize.S38X25
        object.__setattr__(self, "size", parse_size(self.size))


def truncate_text(text: str, max_chars: int) -> str:
    """Cut *text* to *max_chars*, the last two replaced by '..' when cut."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars - len(ELLIPSIS)] + ELLIPSIS


def display_name(request: LabelRequest) -> str:
    return truncate_text(request.product_name, LABEL_LAYOUTS[request.size].max_name_chars)


def barcode_bars(text: str, width: float, height: float) -> Group:
    """Bars of the Code 128 symbol for *text*, scaled to *width*."""
    group = Group()
    pattern = encode_code128(text)
    if not pattern:
        return group

    module = width / len(pattern)
    for start, run in bar_runs(pattern):
        group.add(Rect(start * module, 0, run * module, height))
    return group


def build_label(request: LabelRequest,
                currency: Optional[CurrencyFormat] = None) -> SvgDocument:
    """Drawing primitives for one label."""
    dims = LABEL_DIMENSIONS[request.size]
    layout = LABEL_LAYOUTS[request.size]

    barcode_width = dims.width_px - layout.padding * 2
    barcode_y = layout.padding
    barcode_text_y = barcode_y + layout.barcode_height + layout.font_size + 2
    name_y = barcode_text_y + layout.font_size + 4
    price_y = name_y + layout.price_font_size + 2
    center_x = dims.width_px / 2

    bars = barcode_bars(request.barcode, barcode_width, layout.barcode_height)
    bars.dx, bars.dy = layout.padding, barcode_y

    doc = SvgDocument(dims.width_px, dims.height_px)
    doc.add(Rect(0, 0, "100%", "100%", fill="white"))
    doc.add(bars)
    doc.add(Text(center_x, barcode_text_y, request.barcode,
                 font_size=layout.font_size, font_family="monospace"))
    doc.add(Text(center_x, name_y, display_name(request),
                 font_size=layout.font_size, bold=True))
    doc.add(Text(center_x, price_y, format_currency(request.price, currency),
                 font_size=layout.price_font_size, bold=True))
    return doc


def render_label(request: LabelRequest,
                 currency: Optional[CurrencyFormat] = None) -> str:
    """SVG markup for one label."""
    return build_label(request, currency).to_svg()


def validate_label_content(fragment: str, request: LabelRequest,
                           currency: Optional[CurrencyFormat] = None) -> bool:
    """
    True when *fragment* carries the barcode, the (truncated) product
    name and the formatted price, each in escaped form.
    """
    required = (
        request.barcode,
        display_name(request),
        format_currency(request.price, currency),
    )
    return all(escape_xml(value) in fragment for value in required)
