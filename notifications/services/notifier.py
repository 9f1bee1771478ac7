from __future__ import annotations

import dataclasses
import logging
import time
from typing import Any, Callable, List, NamedTuple, Optional, Protocol

from PySide6.QtCore import QObject, Signal

from notifications.errors import PersistentQuotaExceeded, get_error_details, has_details
from notifications.models.notification import (
    Notification,
    NotificationOptions,
    NotificationState,
    NotificationType,
)
from notifications.settings import NotificationSettings
from utils.ordered_map import OrderedMap
from .process_controller import ProcessNotificationController
from .scheduler import NotificationScheduler

logger = logging.getLogger(__name__)

DELAY_DELETING = 1000  # ms a closing notification stays around for its exit animation


class SettingsProvider(Protocol):
    def get_value(self, name: str) -> int: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, func: Callable, *args, **kwargs) -> Any: ...

    def cancel_all(self) -> None: ...


class ProcessNotificationContainer(NamedTuple):
    controller: ProcessNotificationController
    notification: Notification


def _log_to_console(exception: BaseException) -> None:
    logger.error("%s: %s", type(exception).__name__, exception, exc_info=exception)


class NotificationService(QObject):
    """Owns the live notifications and their limits and close timing.

    Non-persistent notifications share a pool of ``notificationsPool`` slots;
    creating one more evicts the oldest. Persistent notifications are never
    evicted, instead creation fails once ``maxPersistentAllow`` are alive.
    """

    notificationCreated = Signal(object)
    notificationRemoved = Signal(int)
    deleteDelayChanged = Signal(int, int)  # id, delay in ms
    showDetailsRequested = Signal(int)

    _instance: "NotificationService | None" = None

    def __init__(
        self,
        settings: SettingsProvider | None = None,
        scheduler: Scheduler | None = None,
        diagnostic_sink: Callable[[BaseException], None] | None = None,
        delete_delay_ms: int = DELAY_DELETING,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings if settings is not None else NotificationSettings()
        self.scheduler = scheduler if scheduler is not None else NotificationScheduler(self)
        self.diagnostic_sink = diagnostic_sink or _log_to_console
        self.delete_delay_ms = delete_delay_ms
        self.notifications: OrderedMap[int, Notification] = OrderedMap(lambda n: n.id)
        self._next_id = 0

    # ---- Singleton helpers -------------------------------------------------
    @classmethod
    def instance(cls) -> "NotificationService":
        if cls._instance is None:
            cls._instance = NotificationService()
        return cls._instance

    # ---- Views -------------------------------------------------------------
    @property
    def visible_notifications(self) -> List[Notification]:
        return [n for n in self.notifications.values if not n.is_silent]

    def get(self, notification_id: int) -> Optional[Notification]:
        return self.notifications.get(notification_id)

    # ---- Creation ----------------------------------------------------------
    def notify(self, options: NotificationOptions, type: NotificationType) -> Notification:
        if options.persistent:
            limit = self.settings.get_value("maxPersistentAllow")
            persistent = [n for n in self.notifications.values if n.persistent]
            if len(persistent) >= limit:
                raise PersistentQuotaExceeded(limit)

        notification_id = self._next_id
        self._next_id += 1

        notification = Notification(
            id=notification_id,
            title=options.title,
            message=options.message,
            details=options.details,
            type=type,
            is_silent=bool(options.is_silent),
            persistent=bool(options.persistent),
            custom_component=options.custom_component,
            extra_props=options.extra_props if options.extra_props is not None else {},
            timestamp=options.timestamp if options.timestamp is not None else int(time.time() * 1000),
            state=NotificationState(delete_delay=0),
            _close=self.close,
            _show_details=self.show_details,
        )
        self.notifications.add_value(notification)
        logger.debug("[notifications] created #%s (%s) %r", notification_id, type.value, options.title)
        self.notificationCreated.emit(notification)

        self._evict_overflow()
        return notification

    def _evict_overflow(self) -> None:
        pool = self.settings.get_value("notificationsPool")
        transient = [n for n in self.notifications.values if not n.persistent]
        if len(transient) <= pool:
            return
        if not transient:
            # only reachable with a pool size below zero
            logger.error("[notifications] pool of %s exceeded but nothing is evictable", pool)
            return
        oldest = transient[0]
        logger.debug("[notifications] pool of %s exceeded, evicting #%s", pool, oldest.id)
        self._remove(oldest.id)

    def custom_notification(
        self,
        component: Callable[..., Any],
        props: Any = None,
        options: NotificationOptions | None = None,
        type: NotificationType | None = None,
    ) -> Notification:
        base = options if options is not None else NotificationOptions(title="")
        opts = dataclasses.replace(
            base,
            custom_component=component,
            extra_props=props if props is not None else {},
        )
        return self.notify(opts, type if type is not None else NotificationType.CUSTOM)

    def process_notification(
        self,
        component: Callable[..., Any],
        props: dict | None = None,
        options: NotificationOptions | None = None,
    ) -> ProcessNotificationContainer:
        props = dict(props or {})
        controller = props.get("state")
        if controller is None:
            controller = ProcessNotificationController()
        props["state"] = controller

        base = options if options is not None else NotificationOptions(title="")
        notification = self.notify(
            dataclasses.replace(base, extra_props=props, custom_component=component),
            NotificationType.CUSTOM,
        )
        controller.init(notification.title, notification.message)
        return ProcessNotificationContainer(controller, notification)

    def log_info(self, options: NotificationOptions) -> Notification:
        return self.notify(options, NotificationType.INFO)

    def log_success(self, options: NotificationOptions) -> Notification:
        return self.notify(options, NotificationType.SUCCESS)

    def log_error(self, options: NotificationOptions) -> Notification:
        return self.notify(options, NotificationType.ERROR)

    def log_exception(
        self,
        exception: BaseException,
        title: str | None = None,
        message: str | None = None,
        silent: bool = False,
    ) -> Optional[Notification]:
        notification = None
        if not silent:
            details = get_error_details(exception)
            notification = self.log_error(
                NotificationOptions(
                    title=title or details["name"],
                    message=message or details["message"],
                    details=exception if has_details(exception) else None,
                )
            )
        self.diagnostic_sink(exception)
        return notification

    # ---- Closing -----------------------------------------------------------
    def close(self, notification_id: int, delay_deleting: bool = True) -> None:
        if not delay_deleting:
            self._remove(notification_id)
            return

        notification = self.notifications.get(notification_id)
        if notification is None:
            return
        notification.state.delete_delay = self.delete_delay_ms
        self.deleteDelayChanged.emit(notification_id, self.delete_delay_ms)
        self.scheduler.schedule(self.delete_delay_ms, self._remove, notification_id)

    def show_details(self, notification_id: int) -> None:
        if notification_id in self.notifications:
            self.showDetailsRequested.emit(notification_id)

    def clear(self) -> None:
        for notification_id in self.notifications.keys:
            self._remove(notification_id)

    def dispose(self) -> None:
        self.scheduler.cancel_all()
        self.notifications.remove_all()

    def _remove(self, notification_id: int) -> None:
        if notification_id not in self.notifications:
            return
        self.notifications.remove(notification_id)
        self.notificationRemoved.emit(notification_id)


# convenient alias
get_notifier = NotificationService.instance
