from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def whole_units(amount: float) -> int:
    """Round to whole currency units, halves away from zero."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
