from __future__ import annotations

import logging

from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.domain.entities.plan import Plan
from storefront.domain.exceptions import BackendUnavailableError


logger = logging.getLogger(__name__)


class LoadPlansUseCase:
    def __init__(self, *, backend_port: StorefrontBackendPort):
        self._backend_port = backend_port

    async def execute(self) -> tuple[Plan, ...]:
        try:
            plans = await self._backend_port.list_plans()
        except BackendUnavailableError as exc:
            logger.warning("load_plans: fallback_to_empty error=%s", exc)
            return ()
        except Exception:  # noqa: BLE001
            logger.exception("load_plans: fallback_to_empty unexpected_error")
            return ()
        return tuple(plans)
