from __future__ import annotations

from typing import Protocol


class NavigatorPort(Protocol):
    def redirect(self, *, url: str) -> None:
        ...
