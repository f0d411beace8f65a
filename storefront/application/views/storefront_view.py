from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Awaitable

from storefront.application.dto.checkout import StartCheckoutInput, StartCheckoutOutput
from storefront.application.ports.navigator_port import NavigatorPort
from storefront.application.ports.notifier_port import NotifierPort
from storefront.application.use_cases.load_google_auth import LoadGoogleAuthUseCase
from storefront.application.use_cases.load_locations import LoadLocationsUseCase
from storefront.application.use_cases.load_plans import LoadPlansUseCase
from storefront.application.use_cases.start_checkout import StartCheckoutUseCase
from storefront.domain.entities.view_state import (
    CheckoutSettled,
    CheckoutSubmitted,
    EmailChanged,
    GoogleAuthLoaded,
    LocationsLoaded,
    PlansLoaded,
    ViewEvent,
    ViewState,
)
from storefront.domain.exceptions import MissingEmailError
from storefront.domain.services.checkout import (
    COULD_NOT_START_MESSAGE,
    CheckoutReturnUrls,
    require_email,
)
from storefront.domain.services.view_state import apply_event


logger = logging.getLogger(__name__)


class CheckoutOutcome(str, Enum):
    REDIRECTED = "redirected"
    NOTIFIED = "notified"
    BLOCKED = "blocked"


class StorefrontView:
    """Pricing and Google Business Profile page for one page load.

    ``mount`` and ``mount_locations`` schedule the loads as tasks owned by the
    view; they are never cancelled and each one only writes its own slot of
    :class:`ViewState`. ``subscribe`` is guarded so at most one checkout
    request is in flight.
    """

    def __init__(
        self,
        *,
        load_plans: LoadPlansUseCase,
        load_google_auth: LoadGoogleAuthUseCase,
        load_locations: LoadLocationsUseCase,
        start_checkout: StartCheckoutUseCase,
        navigator: NavigatorPort,
        notifier: NotifierPort,
        origin: str,
    ):
        self._load_plans = load_plans
        self._load_google_auth = load_google_auth
        self._load_locations = load_locations
        self._start_checkout = start_checkout
        self._navigator = navigator
        self._notifier = notifier
        self._return_urls = CheckoutReturnUrls.from_origin(origin)
        self._state = ViewState()
        self._mounted = False
        self._locations_mounted = False
        self._tasks: list[asyncio.Task] = []
        self._checkout: asyncio.Future | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def return_urls(self) -> CheckoutReturnUrls:
        return self._return_urls

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        self._spawn(self._fetch_plans())
        self._spawn(self._fetch_google_auth())

    def mount_locations(self) -> None:
        if self._locations_mounted:
            return
        self._locations_mounted = True
        self._spawn(self._fetch_locations())

    async def settled(self) -> None:
        pending = [task for task in self._tasks if not task.done()]
        if pending:
            await asyncio.gather(*pending)

    def set_email(self, email: str) -> None:
        self._dispatch(EmailChanged(email=email))

    async def pending_checkout(self) -> StartCheckoutOutput | None:
        """Wait for the checkout started by the last accepted ``subscribe``.

        Returns ``None`` when no checkout was ever started on this view.
        """
        if self._checkout is None:
            return None
        return await asyncio.shield(self._checkout)

    async def subscribe(self, price_id: str | None) -> CheckoutOutcome:
        if self._state.checkout.is_submitting:
            logger.info("storefront_view: checkout_blocked price_id=%s", price_id)
            return CheckoutOutcome.BLOCKED

        try:
            email = require_email(self._state.email)
        except MissingEmailError as exc:
            self._notifier.alert(message=str(exc))
            return CheckoutOutcome.NOTIFIED

        self._dispatch(CheckoutSubmitted())
        checkout = asyncio.get_running_loop().create_future()
        self._checkout = checkout
        output: StartCheckoutOutput | None = None
        try:
            output = await self._start_checkout.execute(
                StartCheckoutInput(
                    price_id=price_id,
                    customer_email=email,
                    success_url=self._return_urls.success_url,
                    cancel_url=self._return_urls.cancel_url,
                )
            )
        finally:
            self._dispatch(CheckoutSettled(error=output.message if output else None))
            if not checkout.done():
                checkout.set_result(output)

        if output.redirect_url:
            self._navigator.redirect(url=output.redirect_url)
            return CheckoutOutcome.REDIRECTED
        self._notifier.alert(message=output.message or COULD_NOT_START_MESSAGE)
        return CheckoutOutcome.NOTIFIED

    def _spawn(self, coro: Awaitable[None]) -> None:
        self._tasks.append(asyncio.ensure_future(coro))

    def _dispatch(self, event: ViewEvent) -> None:
        self._state = apply_event(self._state, event)

    async def _fetch_plans(self) -> None:
        plans = await self._load_plans.execute()
        self._dispatch(PlansLoaded(plans=plans))

    async def _fetch_google_auth(self) -> None:
        info = await self._load_google_auth.execute()
        self._dispatch(GoogleAuthLoaded(info=info))

    async def _fetch_locations(self) -> None:
        view = await self._load_locations.execute()
        self._dispatch(LocationsLoaded(view=view))
