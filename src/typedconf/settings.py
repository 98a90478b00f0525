"""Typed access to settings held in a :class:`SettingsStore`.

``Settings`` is the primary API: construct one, load it, read from it.
The module-level functions at the bottom delegate to one process-wide
instance created on first use; call :func:`reset_global` between tests.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from typedconf.binding import Declaration, Group
from typedconf.coerce import (
    parse_boolean,
    parse_double,
    parse_float,
    parse_int,
    parse_long,
    parse_string,
)
from typedconf.errors import InvalidSettingError, MissingSettingError
from typedconf.store import SettingsStore

if TYPE_CHECKING:
    from typedconf.sources.base import SettingsSource

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Settings:
    """Typed getters and deferred bindings over a settings store."""

    def __init__(self, store: SettingsStore | None = None):
        self._store = store if store is not None else SettingsStore()

    def add_property(self, key: str, value: str) -> None:
        self._store.add_property(key, value)

    def add_flag(self, flag: str) -> None:
        self._store.add_flag(flag)

    def add_source(self, source: SettingsSource) -> Settings:
        LOGGER.debug("Loading settings from %s", source)
        source.load(self._store)
        return self

    def clear(self) -> Settings:
        self._store.clear()
        return self

    def properties(self) -> dict[str, str]:
        return self._store.properties()

    def flags(self) -> frozenset[str]:
        return self._store.flags()

    def resolve(self, key: str, parser: Callable[[str], T], default: T | None = None) -> T:
        """Look up ``key`` and parse it, falling back to ``default``.

        ``None`` means no default: an absent key raises
        :class:`MissingSettingError`. A present value that ``parser`` rejects
        raises :class:`InvalidSettingError` whether or not a default exists.
        """
        value = self._store.find_value(key)
        if value is None:
            if default is None:
                raise MissingSettingError(key)
            return default
        try:
            return parser(value)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise InvalidSettingError(key, value) from exc

    def get_string(self, key: str, default: str | None = None) -> str:
        return self.resolve(key, parse_string, default)

    def get_int(self, key: str, default: int | None = None) -> int:
        return self.resolve(key, parse_int, default)

    def get_long(self, key: str, default: int | None = None) -> int:
        return self.resolve(key, parse_long, default)

    def get_float(self, key: str, default: float | None = None) -> float:
        return self.resolve(key, parse_float, default)

    def get_double(self, key: str, default: float | None = None) -> float:
        return self.resolve(key, parse_double, default)

    def get_boolean(self, key: str, default: bool | None = None) -> bool:
        return self.resolve(key, parse_boolean, default)

    def get_flag(self, key: str) -> bool:
        return self.get_boolean(key, False)

    def declare(
        self,
        parser: Callable[[str], T],
        *,
        default: T | None = None,
        name: str | None = None,
        group: Group | None = None,
    ) -> Declaration[T]:
        return Declaration(self, parser, default=default, name=name, group=group)

    def string_setting(
        self, default: str | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[str]:
        return self.declare(parse_string, default=default, name=name, group=group)

    def int_setting(
        self, default: int | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[int]:
        return self.declare(parse_int, default=default, name=name, group=group)

    def long_setting(
        self, default: int | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[int]:
        return self.declare(parse_long, default=default, name=name, group=group)

    def float_setting(
        self, default: float | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[float]:
        return self.declare(parse_float, default=default, name=name, group=group)

    def double_setting(
        self, default: float | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[float]:
        return self.declare(parse_double, default=default, name=name, group=group)

    def boolean_setting(
        self, default: bool | None = None, name: str | None = None, group: Group | None = None
    ) -> Declaration[bool]:
        return self.declare(parse_boolean, default=default, name=name, group=group)


_default_settings: Settings | None = None
_default_lock = threading.Lock()


def default_settings() -> Settings:
    """Return the process-wide settings, creating them on first use."""
    global _default_settings

    with _default_lock:
        if _default_settings is None:
            LOGGER.debug("Creating process-wide settings")
            _default_settings = Settings()
        return _default_settings


def reset_global() -> None:
    """Drop the process-wide settings; the next access starts empty."""
    global _default_settings

    with _default_lock:
        _default_settings = None


def add_property(key: str, value: str) -> None:
    default_settings().add_property(key, value)


def add_flag(flag: str) -> None:
    default_settings().add_flag(flag)


def clear() -> Settings:
    return default_settings().clear()


def get_string(key: str, default: str | None = None) -> str:
    return default_settings().get_string(key, default)


def get_int(key: str, default: int | None = None) -> int:
    return default_settings().get_int(key, default)


def get_long(key: str, default: int | None = None) -> int:
    return default_settings().get_long(key, default)


def get_float(key: str, default: float | None = None) -> float:
    return default_settings().get_float(key, default)


def get_double(key: str, default: float | None = None) -> float:
    return default_settings().get_double(key, default)


def get_boolean(key: str, default: bool | None = None) -> bool:
    return default_settings().get_boolean(key, default)


def get_flag(key: str) -> bool:
    return default_settings().get_flag(key)
