"""
labels.currency - Price formatting for printed labels.

One function, parameterised by a CurrencyFormat, so a different market
only needs a different format object.  The default mirrors the rupiah
convention: "Rp 15.000" (non-breaking space, dot thousands, no decimals).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str = "Rp"
    separator: str = "\u00a0"
    thousands_sep: str = "."
    decimal_sep: str = ","
    decimals: int = 0


DEFAULT_CURRENCY = CurrencyFormat()


def format_currency(amount, fmt: Optional[CurrencyFormat] = None) -> str:
    fmt = fmt or DEFAULT_CURRENCY
    value = Decimal(str(amount))
    quant = Decimal(1).scaleb(-fmt.decimals)
    value = value.quantize(quant, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    whole, _, frac = f"{abs(value):.{fmt.decimals}f}".partition(".")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    number = fmt.thousands_sep.join(groups)
    if fmt.decimals:
        number = f"{number}{fmt.decimal_sep}{frac}"

    return f"{sign}{fmt.symbol}{fmt.separator}{number}"
