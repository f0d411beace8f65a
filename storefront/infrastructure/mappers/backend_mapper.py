from __future__ import annotations

from storefront.application.dto.checkout import CheckoutSessionResult
from storefront.domain.entities.google import GoogleAuthInfo, Location, LocationsView
from storefront.domain.entities.plan import Plan
from storefront.infrastructure.clients.storefront_payloads import (
    CheckoutSessionPayload,
    GoogleLocationsPayload,
    GoogleOauthUrlPayload,
    PlanPayload,
)


def map_payload_to_plan(payload: PlanPayload) -> Plan:
    return Plan(
        id=str(payload.id),
        name=payload.name,
        price_cents=payload.price_cents,
        interval=payload.interval,
        features=tuple(payload.features or ()),
        stripe_price_id=payload.stripe_price_id,
    )


def map_payload_to_google_auth(payload: GoogleOauthUrlPayload) -> GoogleAuthInfo:
    return GoogleAuthInfo(ready=payload.ready, url=payload.url or None)


def map_payload_to_locations(payload: GoogleLocationsPayload) -> LocationsView:
    return LocationsView(
        connected=payload.connected,
        locations=tuple(
            Location(name=item.name, store_code=item.store_code) for item in payload.locations
        ),
    )


def map_payload_to_checkout_session(payload: CheckoutSessionPayload) -> CheckoutSessionResult:
    return CheckoutSessionResult(url=payload.url or None, detail=payload.detail or None)
