from .notifier import (
    DELAY_DELETING,
    NotificationService,
    ProcessNotificationContainer,
    get_notifier,
)
from .process_controller import ProcessNotificationController
from .scheduler import NotificationScheduler

__all__ = [
    "DELAY_DELETING",
    "NotificationService",
    "ProcessNotificationContainer",
    "get_notifier",
    "ProcessNotificationController",
    "NotificationScheduler",
]
