from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import logging
import uuid

from storefront.api.browser import BrowserChannel
from storefront.application.views.storefront_view import StorefrontView


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewSession:
    view_id: str
    view: StorefrontView
    channel: BrowserChannel


class ViewRegistry:
    def __init__(self, *, capacity: int):
        self._capacity = max(1, capacity)
        self._sessions: OrderedDict[str, ViewSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, *, view: StorefrontView, channel: BrowserChannel) -> ViewSession:
        session = ViewSession(view_id=uuid.uuid4().hex, view=view, channel=channel)
        self._sessions[session.view_id] = session
        while len(self._sessions) > self._capacity:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.debug("view_registry: evicted view_id=%s", evicted_id)
        return session

    def get(self, view_id: str | None) -> ViewSession | None:
        if not view_id:
            return None
        session = self._sessions.get(view_id)
        if session is not None:
            self._sessions.move_to_end(view_id)
        return session
