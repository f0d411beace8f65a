from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.entities.google import (
    GOOGLE_NOT_READY,
    LOCATIONS_DISCONNECTED,
    GoogleAuthInfo,
    LocationsView,
)
from storefront.domain.entities.plan import Plan


class LoadStatus(str, Enum):
    PENDING = "pending"
    SETTLED = "settled"


class CheckoutPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckoutState:
    phase: CheckoutPhase = CheckoutPhase.IDLE
    error: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.phase is CheckoutPhase.SUBMITTING


@dataclass(frozen=True)
class ViewState:
    plans: tuple[Plan, ...] = ()
    plans_status: LoadStatus = LoadStatus.PENDING
    google: GoogleAuthInfo = GOOGLE_NOT_READY
    google_status: LoadStatus = LoadStatus.PENDING
    locations: LocationsView = LOCATIONS_DISCONNECTED
    locations_status: LoadStatus = LoadStatus.PENDING
    email: str = ""
    checkout: CheckoutState = field(default_factory=CheckoutState)


@dataclass(frozen=True)
class PlansLoaded:
    plans: tuple[Plan, ...]


@dataclass(frozen=True)
class GoogleAuthLoaded:
    info: GoogleAuthInfo


@dataclass(frozen=True)
class LocationsLoaded:
    view: LocationsView


@dataclass(frozen=True)
class EmailChanged:
    email: str


@dataclass(frozen=True)
class CheckoutSubmitted:
    pass


@dataclass(frozen=True)
class CheckoutSettled:
    error: str | None = None


ViewEvent = (
    PlansLoaded
    | GoogleAuthLoaded
    | LocationsLoaded
    | EmailChanged
    | CheckoutSubmitted
    | CheckoutSettled
)
