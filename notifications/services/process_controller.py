from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from notifications.errors import get_error_details
from notifications.models.notification import NotificationType


class ProcessNotificationController(QObject):
    """Tracks a long-running operation shown by a process notification.

    The notification only carries the controller; callers drive it directly
    and widgets repaint on ``stateChanged``.
    """

    stateChanged = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.title = ""
        self.message: Optional[str] = None
        self.status = NotificationType.INFO
        self.exception: Optional[BaseException] = None

    def init(self, title: str, message: Optional[str] = None) -> None:
        self.title = title
        self.message = message
        self.status = NotificationType.LOADING
        self.exception = None
        self.stateChanged.emit()

    def resolve(self, title: str, message: Optional[str] = None) -> None:
        self.title = title
        self.message = message
        self.status = NotificationType.SUCCESS
        self.stateChanged.emit()

    def reject(
        self,
        exception: BaseException,
        title: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        details = get_error_details(exception)
        self.title = title or details["name"]
        self.message = message or details["message"]
        self.exception = exception
        self.status = NotificationType.ERROR
        self.stateChanged.emit()

    def set_info(self, title: str, message: Optional[str] = None) -> None:
        self.title = title
        self.message = message
        self.status = NotificationType.INFO
        self.stateChanged.emit()

    @property
    def is_finished(self) -> bool:
        return self.status in (NotificationType.SUCCESS, NotificationType.ERROR)
