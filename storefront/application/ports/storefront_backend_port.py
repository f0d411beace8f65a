from __future__ import annotations

from typing import Protocol

from storefront.application.dto.checkout import CheckoutSessionResult
from storefront.domain.entities.google import GoogleAuthInfo, LocationsView
from storefront.domain.entities.plan import Plan


class StorefrontBackendPort(Protocol):
    async def list_plans(self) -> list[Plan]:
        ...

    async def get_google_oauth_url(self) -> GoogleAuthInfo:
        ...

    async def list_google_locations(self) -> LocationsView:
        ...

    async def create_checkout_session(
        self,
        *,
        price_id: str | None,
        customer_email: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSessionResult:
        ...
