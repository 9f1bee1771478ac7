from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

TProps = TypeVar("TProps")


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    LOADING = "loading"
    CUSTOM = "custom"


@dataclass
class NotificationOptions(Generic[TProps]):
    """What a caller supplies when asking for a new notification."""

    title: str
    message: Optional[str] = None
    details: Any = None
    is_silent: bool = False
    persistent: bool = False
    custom_component: Optional[Callable[..., Any]] = None
    extra_props: Optional[TProps] = None
    timestamp: Optional[int] = None  # epoch ms


@dataclass
class NotificationState:
    # non-zero only while the notification is animating out
    delete_delay: int = 0


@dataclass
class Notification(Generic[TProps]):
    """A live notification owned by :class:`NotificationService`.

    ``extra_props`` is never inspected by the service; it is stored and handed
    to ``custom_component`` by whatever renders the notification.
    """

    id: int
    title: str
    message: Optional[str]
    type: NotificationType
    timestamp: int
    details: Any = None
    is_silent: bool = False
    persistent: bool = False
    custom_component: Optional[Callable[..., Any]] = None
    extra_props: Optional[TProps] = None
    state: NotificationState = field(default_factory=NotificationState)
    _close: Optional[Callable[[int, bool], None]] = field(default=None, repr=False, compare=False)
    _show_details: Optional[Callable[[int], None]] = field(default=None, repr=False, compare=False)

    def close(self, delay_deleting: bool = True) -> None:
        if self._close is not None:
            self._close(self.id, delay_deleting)

    def show_details(self) -> None:
        if self._show_details is not None:
            self._show_details(self.id)


ProcessExtraProps = Dict[str, Any]
