from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


_CENT = Decimal("0.01")


def format_usd_cents(cents: int | None) -> str:
    amount = (Decimal(str(cents or 0)) / Decimal("100")).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_price(cents: int | None, interval: str | None = None) -> str:
    amount = format_usd_cents(cents)
    if not interval:
        return amount
    return f"{amount}/{interval}"
