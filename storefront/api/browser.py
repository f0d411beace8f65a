from __future__ import annotations

from dataclasses import dataclass

from storefront.application.ports.navigator_port import NavigatorPort
from storefront.application.ports.notifier_port import NotifierPort


@dataclass(frozen=True)
class BrowserEffects:
    redirect_url: str | None
    alerts: tuple[str, ...]


class BrowserChannel(NavigatorPort, NotifierPort):
    """Collects what the view asked the browser to do until the response is built."""

    def __init__(self):
        self._redirect_url: str | None = None
        self._alerts: list[str] = []

    def redirect(self, *, url: str) -> None:
        self._redirect_url = url

    def alert(self, *, message: str) -> None:
        self._alerts.append(message)

    def drain(self) -> BrowserEffects:
        effects = BrowserEffects(redirect_url=self._redirect_url, alerts=tuple(self._alerts))
        self._redirect_url = None
        self._alerts = []
        return effects
