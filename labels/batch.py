"""
labels.batch - Many labels in one printable HTML page.

Each item is rendered once and repeated *quantity* times, in item order.
The page targets A4 with 5 mm margins; label borders show on screen and
disappear when printed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from labels.currency import CurrencyFormat
from labels.renderer import LabelRequest, render_label
from labels.sizes import LABEL_DIMENSIONS, parse_size

logger = logging.getLogger(__name__)

PAGE_WIDTH_MM = 210
PAGE_MARGIN_MM = 5
BODY_PADDING_MM = 5
LABEL_GAP_MM = 2
CONTENT_WIDTH_MM = PAGE_WIDTH_MM - 2 * (PAGE_MARGIN_MM + BODY_PADDING_MM)
HTML_MEDIA_TYPE = "text/html"


@dataclass(frozen=True)
class LabelBatchItem:
    product_id: str
    barcode: str
    product_name: str
    price: int
    quantity: int = 1

    def __post_init__(self):
        if (isinstance(self.quantity, bool) or not isinstance(self.quantity, int)
                or self.quantity < 1):
            raise ValueError(
                f"quantity must be a positive integer, got {self.quantity!r} "
                f"for product {self.product_id}"
            )


@dataclass(frozen=True)
class PrintDocument:
    content: str
    media_type: str
    filename: str
    label_count: int
    labels_per_row: int

    def encode(self) -> bytes:
        return self.content.encode("utf-8")


def labels_per_row(width_mm: float) -> int:
    """Columns whose labels and gaps fit inside the padded A4 content box."""
    return max(1, int((CONTENT_WIDTH_MM + LABEL_GAP_MM) // (width_mm + LABEL_GAP_MM)))


def expand_labels(items: Iterable[LabelBatchItem], size,
                  currency: Optional[CurrencyFormat] = None) -> list[str]:
    """One SVG per printed label, item order kept, no de-duplication."""
    size = parse_size(size)
    labels = []
    for item in items:
        svg = render_label(
            LabelRequest(item.barcode, item.product_name, item.price, size),
            currency,
        )
        labels.extend([svg] * item.quantity)
    return labels


def assemble_batch(items: Iterable[LabelBatchItem], size,
                   currency: Optional[CurrencyFormat] = None,
                   today: Optional[date] = None) -> PrintDocument:
    """Render every label of *items* into one self-contained HTML page."""
    size = parse_size(size)
    dims = LABEL_DIMENSIONS[size]
    per_row = labels_per_row(dims.width_mm)
    labels = expand_labels(items, size, currency)

    blocks = "\n    ".join(f'<div class="label">{svg}</div>' for svg in labels)
    html = f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>Barcode Labels</title>
  <style>
    @page {{
      size: A4;
      margin: {PAGE_MARGIN_MM}mm;
    }}
    body {{
      margin: 0;
      padding: {BODY_PADDING_MM}mm;
      font-family: Arial, sans-serif;
    }}
    .labels-container {{
      display: grid;
      grid-template-columns: repeat({per_row}, {dims.width_mm}mm);
      gap: {LABEL_GAP_MM}mm;
    }}
    .label {{
      width: {dims.width_mm}mm;
      height: {dims.height_mm}mm;
      border: 0.5px dashed #ccc;
      box-sizing: border-box;
      page-break-inside: avoid;
      break-inside: avoid;
    }}
    .label svg {{
      width: 100%;
      height: 100%;
    }}
    @media print {{
      .label {{
        border: none;
      }}
    }}
  </style>
</head>
<body>
  <div class="labels-container">
    {blocks}
  </div>
</body>
</html>"""

    today = today or date.today()
    logger.info(f"Assembled {len(labels)} labels ({size}, {per_row} per row)")
    return PrintDocument(
        content=html,
        media_type=HTML_MEDIA_TYPE,
        filename=f"barcode-labels-{today.isoformat()}.html",
        label_count=len(labels),
        labels_per_row=per_row,
    )
