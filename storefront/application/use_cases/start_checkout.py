from __future__ import annotations

import logging

from storefront.application.dto.checkout import StartCheckoutInput, StartCheckoutOutput
from storefront.application.ports.storefront_backend_port import StorefrontBackendPort
from storefront.domain.exceptions import BackendUnavailableError
from storefront.domain.services.checkout import (
    COULD_NOT_START_MESSAGE,
    ERROR_STARTING_MESSAGE,
    require_email,
)


logger = logging.getLogger(__name__)


class StartCheckoutUseCase:
    def __init__(self, *, backend_port: StorefrontBackendPort):
        self._backend_port = backend_port

    async def execute(self, command: StartCheckoutInput) -> StartCheckoutOutput:
        email = require_email(command.customer_email)
        try:
            result = await self._backend_port.create_checkout_session(
                price_id=command.price_id,
                customer_email=email,
                success_url=command.success_url,
                cancel_url=command.cancel_url,
            )
        except BackendUnavailableError as exc:
            logger.warning("start_checkout: request_failed price_id=%s error=%s", command.price_id, exc)
            return StartCheckoutOutput(redirect_url=None, message=ERROR_STARTING_MESSAGE)
        except Exception:  # noqa: BLE001
            logger.exception("start_checkout: unexpected_error price_id=%s", command.price_id)
            return StartCheckoutOutput(redirect_url=None, message=ERROR_STARTING_MESSAGE)

        if result.url:
            logger.info("start_checkout: session_created price_id=%s", command.price_id)
            return StartCheckoutOutput(redirect_url=result.url, message=None)

        logger.info("start_checkout: session_missing_url price_id=%s detail=%s", command.price_id, result.detail)
        return StartCheckoutOutput(redirect_url=None, message=result.detail or COULD_NOT_START_MESSAGE)
