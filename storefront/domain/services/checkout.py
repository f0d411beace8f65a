from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import MissingEmailError


ENTER_EMAIL_MESSAGE = "Enter your email to continue"
COULD_NOT_START_MESSAGE = "Could not start checkout"
ERROR_STARTING_MESSAGE = "Error starting checkout"


@dataclass(frozen=True)
class CheckoutReturnUrls:
    success_url: str
    cancel_url: str

    @classmethod
    def from_origin(cls, origin: str) -> CheckoutReturnUrls:
        base = origin.rstrip("/")
        return cls(
            success_url=f"{base}/?success=true",
            cancel_url=f"{base}/?canceled=true",
        )


def require_email(email: str | None) -> str:
    if not email:
        raise MissingEmailError(ENTER_EMAIL_MESSAGE)
    return email
