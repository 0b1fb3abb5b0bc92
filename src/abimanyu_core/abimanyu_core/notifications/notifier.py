from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from ..common.datetime_utils import Clock, SystemClock
from ..core.constants import NOTIFICATION_FEED_SIZE
from ..core.enums import NotificationLevel

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


class Notifier(Protocol):
    """Fire-and-forget user notifications (toasts in the web client)."""

    def notify(self, level: NotificationLevel, message: str) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


class LoggingNotifier:
    """Writes notifications to the log and keeps the latest ones for the feed endpoint."""

    def __init__(self, *, clock: Optional[Clock] = None, maxlen: int = NOTIFICATION_FEED_SIZE):
        self._clock = clock or SystemClock()
        self._feed: deque[Notification] = deque(maxlen=maxlen)

    def notify(self, level: NotificationLevel, message: str) -> None:
        level = NotificationLevel(level)
        logger.log(_LOG_LEVELS[level], "[%s] %s", level.value, message)
        self._feed.append(Notification(level=level, message=message, created_at=self._clock.now()))

    def recent(self, limit: int = 20) -> list[Notification]:
        items = list(self._feed)[-int(limit):] if limit > 0 else []
        items.reverse()
        return items
