from __future__ import annotations


class DomainError(Exception):
    """Base for storefront domain errors."""


class BackendUnavailableError(DomainError):
    """The backend could not be reached or answered with an unusable response."""


class MissingEmailError(DomainError):
    """Checkout was requested without a customer email."""


class CheckoutStateError(DomainError):
    """Checkout guard received a transition that is not allowed from its phase."""


class CheckoutInFlightError(CheckoutStateError):
    """A checkout request is already being submitted for this view."""
