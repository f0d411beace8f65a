from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    price_cents: int | None
    interval: str | None
    features: tuple[str, ...]
    stripe_price_id: str | None
