# notifications.py
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    id: str
    title: str
    detail: str
    kind: str
    created_at: datetime


class NotificationChannel:
    def __init__(self, duration=None, clock=None):
        seconds = config.NOTIFICATION_DURATION_SECONDS if duration is None else duration
        self.duration = timedelta(seconds=seconds)
        self.clock = clock or datetime.now
        self._items = []

    def notify(self, title, detail="", kind="success"):
        if kind not in config.NOTIFICATION_KINDS:
            raise ValueError(f"Unknown notification kind: {kind}")
        note = Notification(
            id=uuid.uuid4().hex[:12],
            title=title,
            detail=detail,
            kind=kind,
            created_at=self.clock(),
        )
        self._items.append(note)
        log = logger.warning if kind == "error" else logger.info
        log("%s: %s", title, detail)
        return note.id

    def dismiss(self, notification_id):
        before = len(self._items)
        self._items = [n for n in self._items if n.id != notification_id]
        return len(self._items) != before

    def expire(self):
        now = self.clock()
        self._items = [n for n in self._items if now - n.created_at < self.duration]

    def active(self):
        self.expire()
        return list(self._items)

    def __iter__(self):
        self.expire()
        yield from list(self._items)

    def __len__(self):
        return len(self.active())


def unseen(notifications, shown):
    """Entries not yet in ``shown``. Marks them seen and forgets ids no longer active."""
    shown.intersection_update(n.id for n in notifications)
    fresh = [n for n in notifications if n.id not in shown]
    shown.update(n.id for n in fresh)
    return fresh
