"""
LabelKit - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path

from labels.currency import CurrencyFormat


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("LABELKIT_DB", f"sqlite:///{BASE_DIR / 'labelkit.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("LABELKIT_HOST", "0.0.0.0")
PORT   = int(os.environ.get("LABELKIT_PORT", "5000"))
DEBUG  = os.environ.get("LABELKIT_DEBUG", "0") == "1"
SECRET = os.environ.get("LABELKIT_SECRET", "labelkit-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LABELKIT_LOG_LEVEL", "INFO").upper()

# ── Barcodes ───────────────────────────────────────────────────────────
INTERNAL_PREFIX = os.environ.get("LABELKIT_INTERNAL_PREFIX", "INT")

# ── Price formatting (default: Indonesian rupiah) ──────────────────────
CURRENCY = CurrencyFormat(
    symbol        = os.environ.get("LABELKIT_CURRENCY_SYMBOL", "Rp"),
    separator     = os.environ.get("LABELKIT_CURRENCY_SEPARATOR", "\u00a0"),
    thousands_sep = os.environ.get("LABELKIT_THOUSANDS_SEP", "."),
    decimal_sep   = os.environ.get("LABELKIT_DECIMAL_SEP", ","),
    decimals      = int(os.environ.get("LABELKIT_CURRENCY_DECIMALS", "0")),
)

# ── Labels ─────────────────────────────────────────────────────────────
DEFAULT_LABEL_SIZE   = "38x25"
MAX_LABELS_PER_BATCH = 2000

# ── Pagination ─────────────────────────────────────────────────────────
API_MAX_LIMIT     = 1000
API_DEFAULT_LIMIT = 100
