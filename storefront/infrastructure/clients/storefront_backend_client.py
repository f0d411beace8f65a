from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from storefront.application.dto.checkout import CheckoutSessionResult
from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.domain.entities.google import GoogleAuthInfo, LocationsView
from storefront.domain.entities.plan import Plan
from storefront.domain.exceptions import BackendUnavailableError
from storefront.infrastructure.clients.storefront_payloads import (
    CheckoutSessionPayload,
    GoogleLocationsPayload,
    GoogleOauthUrlPayload,
    PlanPayload,
)
from storefront.infrastructure.mappers.backend_mapper import (
    map_payload_to_checkout_session,
    map_payload_to_google_auth,
    map_payload_to_locations,
    map_payload_to_plan,
)


logger = logging.getLogger(__name__)

PLANS_PATH = "/api/plans"
GOOGLE_OAUTH_URL_PATH = "/api/google/oauth/url"
GOOGLE_LOCATIONS_PATH = "/api/google/locations"
CHECKOUT_SESSION_PATH = "/api/stripe/create-checkout-session"

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpStorefrontBackendClient(StorefrontBackendPort):
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    async def list_plans(self) -> list[Plan]:
        payload = await self._request_json("GET", PLANS_PATH)
        if not isinstance(payload, list):
            logger.warning(
                "storefront_backend: malformed_payload path=%s type=%s",
                PLANS_PATH,
                type(payload).__name__,
            )
            raise BackendUnavailableError(f"Malformed response from {PLANS_PATH}.")

        plans: list[Plan] = []
        for index, item in enumerate(payload):
            try:
                model = PlanPayload.model_validate(item)
            except ValidationError as exc:
                logger.warning(
                    "storefront_backend: plan_skipped index=%s errors=%s",
                    index,
                    exc.error_count(),
                )
                continue
            plans.append(map_payload_to_plan(model))
        return plans

    async def get_google_oauth_url(self) -> GoogleAuthInfo:
        payload = await self._request_json("GET", GOOGLE_OAUTH_URL_PATH)
        model = self._validate(GoogleOauthUrlPayload, payload, GOOGLE_OAUTH_URL_PATH)
        return map_payload_to_google_auth(model)

    async def list_google_locations(self) -> LocationsView:
        payload = await self._request_json("GET", GOOGLE_LOCATIONS_PATH)
        model = self._validate(GoogleLocationsPayload, payload, GOOGLE_LOCATIONS_PATH)
        return map_payload_to_locations(model)

    async def create_checkout_session(
        self,
        *,
        price_id: str | None,
        customer_email: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSessionResult:
        body = {
            "price_id": price_id,
            "customer_email": customer_email,
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        payload = await self._request_json("POST", CHECKOUT_SESSION_PATH, json=body)
        model = self._validate(CheckoutSessionPayload, payload, CHECKOUT_SESSION_PATH)
        return map_payload_to_checkout_session(model)

    async def _request_json(self, method: str, path: str, *, json: dict | None = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=json)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning(
                "storefront_backend: request_failed method=%s path=%s error=%s",
                method,
                path,
                exc,
            )
            raise BackendUnavailableError(f"{method} {path} failed.") from exc

    def _validate(self, model: type[ModelT], payload: Any, path: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise self._malformed(path, exc) from exc

    @staticmethod
    def _malformed(path: str, exc: ValidationError) -> BackendUnavailableError:
        logger.warning(
            "storefront_backend: malformed_payload path=%s errors=%s",
            path,
            exc.error_count(),
        )
        return BackendUnavailableError(f"Malformed response from {path}.")
