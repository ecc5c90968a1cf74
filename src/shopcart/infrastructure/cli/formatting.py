"""Display helpers for the CLI; the domain never formats amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def money(amount: Decimal) -> str:
    """``Decimal("1234.5")`` -> ``"$1,234.50"``."""
    return f"${amount.quantize(CENT, rounding=ROUND_HALF_UP):,.2f}"
