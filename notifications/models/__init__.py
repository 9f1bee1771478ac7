from .notification import (
    Notification,
    NotificationOptions,
    NotificationState,
    NotificationType,
    ProcessExtraProps,
)

__all__ = [
    "Notification",
    "NotificationOptions",
    "NotificationState",
    "NotificationType",
    "ProcessExtraProps",
]
