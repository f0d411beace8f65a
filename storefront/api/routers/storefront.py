from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from storefront.api.deps import (
    get_page_origin,
    get_storefront_backend,
    get_view_registry,
    open_storefront_view,
)
from storefront.api.page import build_storefront_page, checkout_banner
from storefront.api.view_registry import ViewRegistry, ViewSession
from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.application.views.storefront_view import CheckoutOutcome
from storefront.domain.services.checkout import COULD_NOT_START_MESSAGE
from storefront.shared.config import get_settings


logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter()


async def _mounted_view(
    *,
    registry: ViewRegistry,
    backend: StorefrontBackendPort,
    origin: str,
) -> ViewSession:
    session = open_storefront_view(registry=registry, backend=backend, origin=origin)
    session.view.mount()
    session.view.mount_locations()
    await session.view.settled()
    return session


def _render(
    request: Request,
    session: ViewSession,
    *,
    alerts: tuple[str, ...] = (),
    banner: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    page = build_storefront_page(
        session.view.state,
        view_id=session.view_id,
        title=get_settings().title,
        alerts=alerts,
        banner=banner,
    )
    return templates.TemplateResponse(request, "index.html", {"page": page}, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def storefront_page(
    request: Request,
    success: str | None = None,
    canceled: str | None = None,
    registry: ViewRegistry = Depends(get_view_registry),
    backend: StorefrontBackendPort = Depends(get_storefront_backend),
    origin: str = Depends(get_page_origin),
):
    session = await _mounted_view(registry=registry, backend=backend, origin=origin)
    return _render(request, session, banner=checkout_banner(success=success, canceled=canceled))


@router.post("/subscribe")
async def subscribe(
    request: Request,
    view_id: str = Form(""),
    email: str = Form(""),
    price_id: str = Form(""),
    registry: ViewRegistry = Depends(get_view_registry),
    backend: StorefrontBackendPort = Depends(get_storefront_backend),
    origin: str = Depends(get_page_origin),
):
    session = registry.get(view_id)
    if session is None:
        logger.info("storefront_router: unknown_view view_id=%s", view_id or "-")
        session = await _mounted_view(registry=registry, backend=backend, origin=origin)

    session.view.set_email(email)
    outcome = await session.view.subscribe(price_id or None)
    if outcome is CheckoutOutcome.BLOCKED:
        output = await session.view.pending_checkout()
        if output is None:
            return _render(request, session, status_code=409)
        if output.redirect_url:
            return RedirectResponse(output.redirect_url, status_code=303)
        return _render(request, session, alerts=(output.message or COULD_NOT_START_MESSAGE,))

    effects = session.channel.drain()
    if effects.redirect_url:
        return RedirectResponse(effects.redirect_url, status_code=303)
    return _render(request, session, alerts=effects.alerts)
