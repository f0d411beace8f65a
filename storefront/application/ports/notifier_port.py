from __future__ import annotations

from typing import Protocol


class NotifierPort(Protocol):
    def alert(self, *, message: str) -> None:
        ...
