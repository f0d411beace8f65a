from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StartCheckoutInput:
    price_id: str | None
    customer_email: str
    success_url: str
    cancel_url: str


@dataclass(frozen=True)
class StartCheckoutOutput:
    redirect_url: str | None
    message: str | None


@dataclass(frozen=True)
class CheckoutSessionResult:
    url: str | None
    detail: str | None
