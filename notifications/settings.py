"""Numeric limits for the notification service.

Values come from (highest priority first) environment variables, an optional
JSON settings file and the built-in defaults. ``get_value`` reads the current
value every time so changes made at runtime apply to the next notification.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, int] = {
    "maxPersistentAllow": 5,
    "notificationsPool": 15,
}

ENV_OVERRIDES: Dict[str, str] = {
    "maxPersistentAllow": "NOTIFICATIONS_MAX_PERSISTENT",
    "notificationsPool": "NOTIFICATIONS_POOL",
}


class NotificationSettings:
    def __init__(self, filename: Optional[str] = None, defaults: Optional[Dict[str, int]] = None) -> None:
        self.filename = filename
        self.defaults = dict(DEFAULTS if defaults is None else defaults)
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if not self.filename or not os.path.exists(self.filename):
            self.settings = {}
            return
        try:
            with open(self.filename, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Failed to decode JSON from %s; using default notification limits", self.filename)
            self.settings = {}
            return
        self.settings = data if isinstance(data, dict) else {}

    def save(self) -> None:
        if not self.filename:
            return
        with open(self.filename, "w") as f:
            json.dump(self.settings, f, indent=4)

    def get_value(self, name: str) -> int:
        env_name = ENV_OVERRIDES.get(name)
        raw = os.environ.get(env_name) if env_name else None
        if raw is None:
            raw = self.settings.get(name, self.defaults.get(name))
        if raw is None:
            raise KeyError(f"unknown notification setting {name!r}")
        try:
            return int(raw)
        except (TypeError, ValueError):
            logger.warning("Invalid value %r for %s; falling back to default", raw, name)
            return int(self.defaults[name])

    def set_value(self, name: str, value: int) -> None:
        self.settings[name] = int(value)
        self.save()


__all__ = ["NotificationSettings", "DEFAULTS", "ENV_OVERRIDES"]
