from __future__ import annotations

import logging

from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.domain.entities.google import LOCATIONS_DISCONNECTED, LocationsView
from storefront.domain.exceptions import BackendUnavailableError


logger = logging.getLogger(__name__)


class LoadLocationsUseCase:
    def __init__(self, *, backend_port: StorefrontBackendPort):
        self._backend_port = backend_port

    async def execute(self) -> LocationsView:
        try:
            return await self._backend_port.list_google_locations()
        except BackendUnavailableError as exc:
            logger.warning("load_locations: fallback_to_disconnected error=%s", exc)
            return LOCATIONS_DISCONNECTED
        except Exception:  # noqa: BLE001
            logger.exception("load_locations: fallback_to_disconnected unexpected_error")
            return LOCATIONS_DISCONNECTED
