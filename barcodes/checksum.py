"""
barcodes.checksum - Modulo-10 check digits for the retail symbologies.

EAN-13   12 data digits, weights 1,3,1,3 … from the left.
EAN-8     7 data digits, weights 3,1,3,1 … from the left.
UPC-A    11 data digits, weights 3,1,3,1 … from the left.

Every function demands the exact data length and ASCII digits only;
anything else raises ValueError.
"""

from __future__ import annotations

import re

# name → (data length, weight at even index, weight at odd index)
_RULES: dict[str, tuple[int, int, int]] = {
    "EAN13": (12, 1, 3),
    "EAN8":  (7, 3, 1),
    "UPCA":  (11, 3, 1),
}

_LABELS = {"EAN13": "EAN-13", "EAN8": "EAN-8", "UPCA": "UPC-A"}


def _check_digit(kind: str, digits: str) -> str:
    length, even_w, odd_w = _RULES[kind]
    if not isinstance(digits, str) or not re.fullmatch(rf"[0-9]{{{length}}}", digits):
        raise ValueError(
            f"{_LABELS[kind]} check digit calculation requires exactly "
            f"{length} digits, got {digits!r}"
        )
    total = sum(
        int(ch) * (even_w if i % 2 == 0 else odd_w)
        for i, ch in enumerate(digits)
    )
    return str((10 - total % 10) % 10)


def ean13_check_digit(digits: str) -> str:
    """Check digit for 12 EAN-13 data digits."""
    return _check_digit("EAN13", digits)


def ean8_check_digit(digits: str) -> str:
    """Check digit for 7 EAN-8 data digits."""
    return _check_digit("EAN8", digits)


def upca_check_digit(digits: str) -> str:
    """Check digit for 11 UPC-A data digits."""
    return _check_digit("UPCA", digits)


def checksum(kind, digits: str) -> str:
    """
    Dispatch on symbology.  *kind* may be a Symbology member or its name
    ("EAN13", "EAN8", "UPCA").  Other symbologies carry no mod-10 digit
    and raise ValueError.
    """
    name = getattr(kind, "value", kind)
    if name not in _RULES:
        raise ValueError(f"Check digit calculation not supported for format: {name}")
    return _check_digit(name, digits)
