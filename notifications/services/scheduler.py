from __future__ import annotations

from typing import Callable, List

from PySide6.QtCore import QObject, QTimer


class NotificationScheduler(QObject):
    """Runs delayed callbacks on the Qt event loop.

    Timers fire on the thread that owns the scheduler, so callbacks never
    race the GUI thread's own access to notification state.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timers: List[QTimer] = []

    def schedule(self, delay_ms: int, func: Callable, *args, **kwargs) -> QTimer:
        timer = QTimer(self)
        timer.setSingleShot(True)

        def _fire() -> None:
            self._forget(timer)
            func(*args, **kwargs)

        timer.timeout.connect(_fire)
        timer.start(max(0, int(delay_ms)))
        self._timers.append(timer)
        return timer

    def pending(self) -> int:
        return len(self._timers)

    def cancel_all(self) -> None:
        for t in self._timers:
            t.stop()
            t.deleteLater()
        self._timers.clear()

    def _forget(self, timer: QTimer) -> None:
        try:
            self._timers.remove(timer)
        except ValueError:
            return
        timer.deleteLater()
