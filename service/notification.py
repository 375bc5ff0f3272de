from collections import deque
from typing import Deque, List

from schema.contact import Notification
from util.enum import NotificationLevel


class NotificationCenter:
    """Queue of toasts waiting to be shown to one visitor."""

    def __init__(self):
        self._pending: Deque[Notification] = deque()

    def notify_success(self, message: str) -> None:
        self._pending.append(
            Notification(level=NotificationLevel.success, message=message)
        )

    def notify_failure(self, message: str) -> None:
        self._pending.append(
            Notification(level=NotificationLevel.error, message=message)
        )

    def drain(self) -> List[Notification]:
        """Return queued toasts and forget them, so each is shown once"""
        notifications = list(self._pending)
        self._pending.clear()
        return notifications

    def __len__(self) -> int:
        return len(self._pending)
