from __future__ import annotations

import logging
import threading

LOGGER = logging.getLogger(__name__)

FLAG_VALUE = "true"


class SettingsStore:
    """Holds raw string properties and boolean flags."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._properties: dict[str, str] = {}
        self._flags: set[str] = set()

    def add_property(self, key: str, value: str) -> None:
        if not key:
            raise ValueError("Setting key must not be empty")
        with self._lock:
            self._properties[key] = value

    def add_flag(self, flag: str) -> None:
        if not flag:
            raise ValueError("Flag name must not be empty")
        with self._lock:
            self._flags.add(flag)

    def clear(self) -> SettingsStore:
        with self._lock:
            LOGGER.debug("Clearing %s properties and %s flags", len(self._properties), len(self._flags))
            self._properties.clear()
            self._flags.clear()
        return self

    def find_value(self, key: str) -> str | None:
        """Return the raw value for ``key``; flags read as ``"true"``."""
        with self._lock:
            value = self._properties.get(key)
            if value is not None:
                return value
            if key in self._flags:
                return FLAG_VALUE
        return None

    def properties(self) -> dict[str, str]:
        with self._lock:
            return dict(self._properties)

    def flags(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._flags)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._properties or key in self._flags

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties.keys() | self._flags)
