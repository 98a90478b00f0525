from __future__ import annotations

from typing import Protocol


class SettingsSink(Protocol):
    def add_property(self, key: str, value: str) -> None:
        ...

    def add_flag(self, flag: str) -> None:
        ...


class SettingsSource(Protocol):
    """Protocol for anything that loads settings into a store."""

    def load(self, sink: SettingsSink) -> None:
        ...
