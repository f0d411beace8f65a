from __future__ import annotations

from dataclasses import replace

from storefront.domain.entities.view_state import (
    CheckoutPhase,
    CheckoutSettled,
    CheckoutState,
    CheckoutSubmitted,
    EmailChanged,
    GoogleAuthLoaded,
    LoadStatus,
    LocationsLoaded,
    PlansLoaded,
    ViewEvent,
    ViewState,
)
from storefront.domain.exceptions import CheckoutInFlightError, CheckoutStateError


def apply_event(state: ViewState, event: ViewEvent) -> ViewState:
    """Return the state that results from applying ``event`` to ``state``.

    Load events only touch their own slot, so the three loaders may settle in
    any order. Checkout events drive the guard through
    ``idle -> submitting -> idle | failed``; a second submit while one is in
    flight raises :class:`CheckoutInFlightError` instead of producing a state.
    """
    if isinstance(event, PlansLoaded):
        return replace(state, plans=tuple(event.plans), plans_status=LoadStatus.SETTLED)
    if isinstance(event, GoogleAuthLoaded):
        return replace(state, google=event.info, google_status=LoadStatus.SETTLED)
    if isinstance(event, LocationsLoaded):
        return replace(state, locations=event.view, locations_status=LoadStatus.SETTLED)
    if isinstance(event, EmailChanged):
        return replace(state, email=event.email)
    if isinstance(event, CheckoutSubmitted):
        if state.checkout.is_submitting:
            raise CheckoutInFlightError("A checkout request is already in flight.")
        return replace(state, checkout=CheckoutState(phase=CheckoutPhase.SUBMITTING))
    if isinstance(event, CheckoutSettled):
        if not state.checkout.is_submitting:
            raise CheckoutStateError("No checkout request is in flight.")
        if event.error:
            return replace(state, checkout=CheckoutState(phase=CheckoutPhase.FAILED, error=event.error))
        return replace(state, checkout=CheckoutState())
    raise TypeError(f"Unsupported view event: {event!r}")
