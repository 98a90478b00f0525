"""
typedconf: typed getters and deferred bindings over string settings.
"""

from __future__ import annotations

from .binding import Binding, Declaration, Group
from .errors import InvalidSettingError, MissingSettingError, SettingsError
from .settings import (
    Settings,
    add_flag,
    add_property,
    clear,
    default_settings,
    get_boolean,
    get_double,
    get_flag,
    get_float,
    get_int,
    get_long,
    get_string,
    reset_global,
)
from .store import SettingsStore

__all__ = [
    "Binding",
    "Declaration",
    "Group",
    "InvalidSettingError",
    "MissingSettingError",
    "Settings",
    "SettingsError",
    "SettingsStore",
    "add_flag",
    "add_property",
    "clear",
    "default_settings",
    "get_boolean",
    "get_double",
    "get_flag",
    "get_float",
    "get_int",
    "get_long",
    "get_string",
    "reset_global",
]
