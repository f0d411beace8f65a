from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from storefront.api.browser import BrowserChannel
from storefront.api.view_registry import ViewRegistry, ViewSession
from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.application.use_cases.load_google_auth import LoadGoogleAuthUseCase
from storefront.application.use_cases.load_locations import LoadLocationsUseCase
from storefront.application.use_cases.load_plans import LoadPlansUseCase
from storefront.application.use_cases.start_checkout import StartCheckoutUseCase
from storefront.application.views.storefront_view import StorefrontView
from storefront.infrastructure.clients.storefront_backend_client import HttpStorefrontBackendClient
from storefront.shared.config import get_settings


def _request_origin(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


@lru_cache(maxsize=1)
def get_view_registry() -> ViewRegistry:
    return ViewRegistry(capacity=get_settings().view_capacity)


def get_page_origin(request: Request) -> str:
    settings = get_settings()
    return settings.app_origin or _request_origin(request)


def get_storefront_backend(request: Request) -> StorefrontBackendPort:
    settings = get_settings()
    return HttpStorefrontBackendClient(
        base_url=settings.backend_url or _request_origin(request),
        timeout_seconds=settings.backend_timeout_seconds,
    )


def open_storefront_view(
    *,
    registry: ViewRegistry,
    backend: StorefrontBackendPort,
    origin: str,
) -> ViewSession:
    channel = BrowserChannel()
    view = StorefrontView(
        load_plans=LoadPlansUseCase(backend_port=backend),
        load_google_auth=LoadGoogleAuthUseCase(backend_port=backend),
        load_locations=LoadLocationsUseCase(backend_port=backend),
        start_checkout=StartCheckoutUseCase(backend_port=backend),
        navigator=channel,
        notifier=channel,
        origin=origin,
    )
    return registry.open(view=view, channel=channel)
