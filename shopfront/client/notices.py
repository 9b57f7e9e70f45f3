from __future__ import annotations

import time
from dataclasses import dataclass, field
from itertools import count
from typing import Callable, List

from shopfront.constants import NOTICE_INFO, NOTICE_TTL_SECONDS

_ids = count(1)


@dataclass
class Notice:
    message: str
    type: str = NOTICE_INFO
    created_at: float = 0.0
    id: int = field(default_factory=lambda: next(_ids))


class NoticeBoard:
    """Transient, dismissable notices shown above the page."""

    def __init__(self, ttl: float = NOTICE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self.clock = clock
        self._notices: List[Notice] = []
        self._listeners: List[Callable[[], None]] = []

    def on_change(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    def show(self, message: str, type: str = NOTICE_INFO) -> Notice:
        notice = Notice(message=message, type=type, created_at=self.clock())
        # новые сверху, как prepend в body
        self._notices.insert(0, notice)
        self._notify()
        return notice

    def active(self) -> List[Notice]:
        now = self.clock()
        self._notices = [n for n in self._notices if now - n.created_at < self.ttl]
        return list(self._notices)

    def dismiss(self, notice_id: int) -> None:
        self._notices = [n for n in self._notices if n.id != notice_id]
        self._notify()
