from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GoogleAuthInfo:
    ready: bool
    url: str | None = None


@dataclass(frozen=True)
class Location:
    name: str
    store_code: str | None


@dataclass(frozen=True)
class LocationsView:
    connected: bool
    locations: tuple[Location, ...]

    @property
    def visible_locations(self) -> tuple[Location, ...]:
        # A disconnected account shows nothing, whatever the backend listed.
        if not self.connected:
            return ()
        return self.locations


GOOGLE_NOT_READY = GoogleAuthInfo(ready=False)
LOCATIONS_DISCONNECTED = LocationsView(connected=False, locations=())
