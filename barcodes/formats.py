"""
barcodes.formats - Symbology detection and validation.

Precedence (first match wins):
    1. empty / whitespace        → unrecognised
    2. PREFIX + 8-10 digits      → INTERNAL
    3. 13 / 8 / 12 digits with a
       correct check digit       → EAN13 / EAN8 / UPCA
    4. ASCII only (≤ 127)        → CODE128
    5. anything else             → unrecognised

A numeric string of standard length whose check digit is wrong falls
through to step 4 and is reported as CODE128, not rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from barcodes.checksum import ean8_check_digit, ean13_check_digit, upca_check_digit

DEFAULT_INTERNAL_PREFIX = "INT"

EMPTY_BARCODE_ERROR = "barcode must not be empty"
UNRECOGNIZED_FORMAT_ERROR = (
    "format not recognized, supported: EAN-13, EAN-8, UPC-A, Code128"
)

_DIGITS = re.compile(r"[0-9]+")
_INTERNAL_SUFFIX = re.compile(r"[0-9]{8,10}")


class Symbology(str, Enum):
    EAN13 = "EAN13"
    EAN8 = "EAN8"
    UPCA = "UPCA"
    CODE128 = "CODE128"
    INTERNAL = "INTERNAL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    format: Optional[Symbology] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.is_valid and (self.format is None or self.error is not None):
            raise ValueError("valid result needs a format and no error")
        if not self.is_valid and (self.format is not None or not self.error):
            raise ValueError("invalid result needs an error and no format")

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "format": self.format.value if self.format else None,
            "error": self.error,
        }


# ── Predicates ─────────────────────────────────────────────────────────

def _is_digits(barcode: str, length: int) -> bool:
    return len(barcode) == length and _DIGITS.fullmatch(barcode) is not None


def is_valid_ean13(barcode: str) -> bool:
    return _is_digits(barcode, 13) and barcode[12] == ean13_check_digit(barcode[:12])


def is_valid_ean8(barcode: str) -> bool:
    return _is_digits(barcode, 8) and barcode[7] == ean8_check_digit(barcode[:7])


def is_valid_upca(barcode: str) -> bool:
    return _is_digits(barcode, 12) and barcode[11] == upca_check_digit(barcode[:11])


def is_valid_code128(barcode: str) -> bool:
    """Non-empty and every character within ASCII 0-127."""
    return bool(barcode) and all(ord(ch) <= 127 for ch in barcode)


def is_valid_internal_code(barcode: str,
                           prefix: str = DEFAULT_INTERNAL_PREFIX) -> bool:
    if not barcode.startswith(prefix):
        return False
    return _INTERNAL_SUFFIX.fullmatch(barcode[len(prefix):]) is not None


# ── Detection ──────────────────────────────────────────────────────────

def detect(barcode: str,
           internal_prefix: str = DEFAULT_INTERNAL_PREFIX) -> Optional[Symbology]:
    """Classify *barcode*; None when no supported symbology fits."""
    if not barcode or not barcode.strip():
        return None

    if is_valid_internal_code(barcode, internal_prefix):
        return Symbology.INTERNAL

    if _DIGITS.fullmatch(barcode):
        if is_valid_ean13(barcode):
            return Symbology.EAN13
        if is_valid_ean8(barcode):
            return Symbology.EAN8
        if is_valid_upca(barcode):
            return Symbology.UPCA

    if is_valid_code128(barcode):
        return Symbology.CODE128

    return None


def validate(barcode: str,
             internal_prefix: str = DEFAULT_INTERNAL_PREFIX) -> ValidationResult:
    """Structured verdict for *barcode*.  Never raises."""
    if not barcode or not barcode.strip():
        return ValidationResult(False, error=EMPTY_BARCODE_ERROR)

    fmt = detect(barcode, internal_prefix)
    if fmt is None:
        return ValidationResult(False, error=UNRECOGNIZED_FORMAT_ERROR)
    return ValidationResult(True, format=fmt)
