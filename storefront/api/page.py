from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.entities.google import Location
from storefront.domain.entities.view_state import LoadStatus, ViewState
from storefront.domain.services.currency import format_price, format_usd_cents


CHECKOUT_BANNERS = {
    "success": "Subscription started. Check your email for the receipt.",
    "canceled": "Checkout canceled.",
}


@dataclass(frozen=True)
class PlanCard:
    id: str
    name: str
    amount: str
    price_label: str
    interval: str | None
    features: tuple[str, ...]
    price_id: str | None


@dataclass(frozen=True)
class StorefrontPage:
    view_id: str
    title: str
    email: str
    plans: tuple[PlanCard, ...]
    plans_loading: bool
    submitting: bool
    google_ready: bool
    google_url: str | None
    locations_connected: bool
    locations: tuple[Location, ...]
    locations_loading: bool
    alerts: tuple[str, ...]
    banner: str | None


def checkout_banner(*, success: str | None, canceled: str | None) -> str | None:
    if success == "true":
        return CHECKOUT_BANNERS["success"]
    if canceled == "true":
        return CHECKOUT_BANNERS["canceled"]
    return None


def build_storefront_page(
    state: ViewState,
    *,
    view_id: str,
    title: str,
    alerts: tuple[str, ...] = (),
    banner: str | None = None,
) -> StorefrontPage:
    return StorefrontPage(
        view_id=view_id,
        title=title,
        email=state.email,
        plans=tuple(
            PlanCard(
                id=plan.id,
                name=plan.name,
                amount=format_usd_cents(plan.price_cents),
                price_label=format_price(plan.price_cents, plan.interval),
                interval=plan.interval,
                features=plan.features,
                price_id=plan.stripe_price_id,
            )
            for plan in state.plans
        ),
        plans_loading=state.plans_status is LoadStatus.PENDING,
        submitting=state.checkout.is_submitting,
        google_ready=state.google.ready,
        google_url=state.google.url,
        locations_connected=state.locations.connected,
        locations=state.locations.visible_locations,
        locations_loading=state.locations_status is LoadStatus.PENDING,
        alerts=alerts,
        banner=banner,
    )
