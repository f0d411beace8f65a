from __future__ import annotations

import logging

from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.domain.entities.google import GOOGLE_NOT_READY, GoogleAuthInfo
from storefront.domain.exceptions import BackendUnavailableError


logger = logging.getLogger(__name__)


class LoadGoogleAuthUseCase:
    def __init__(self, *, backend_port: StorefrontBackendPort):
        self._backend_port = backend_port

    async def execute(self) -> GoogleAuthInfo:
        try:
            info = await self._backend_port.get_google_oauth_url()
        except BackendUnavailableError as exc:
            logger.warning("load_google_auth: fallback_to_not_ready error=%s", exc)
            return GOOGLE_NOT_READY
        except Exception:  # noqa: BLE001
            logger.exception("load_google_auth: fallback_to_not_ready unexpected_error")
            return GOOGLE_NOT_READY
        if info.ready and not info.url:
            logger.info("load_google_auth: ready_without_url")
        return info
