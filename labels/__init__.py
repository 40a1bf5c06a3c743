"""
labels - Printable price labels.

Public API:
    render_label(request)                 → SVG string
    validate_label_content(svg, request)  → bool
    assemble_batch(items, size)           → PrintDocument (text/html)
"""

from labels.sizes import (                                         # noqa: F401
    LabelSize, LABEL_DIMENSIONS, LABEL_LAYOUTS, get_label_dimensions, parse_size,
)
from labels.currency import CurrencyFormat, DEFAULT_CURRENCY, format_currency  # noqa: F401
from labels.document import SvgDocument, escape_xml                 # noqa: F401
from labels.renderer import (                                      # noqa: F401
    LabelRequest, build_label, render_label, truncate_text, validate_label_content,
)
from labels.batch import LabelBatchItem, PrintDocument, assemble_batch  # noqa: F401
