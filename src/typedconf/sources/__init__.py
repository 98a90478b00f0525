"""
Loaders that populate a settings store from the environment, files and argv.
"""

from __future__ import annotations

from .base import SettingsSink, SettingsSource
from .command_line import CommandLineSource
from .environment import DotenvSource, EnvironmentSource
from .properties import PropertiesFileSource, parse_properties

__all__ = [
    "CommandLineSource",
    "DotenvSource",
    "EnvironmentSource",
    "PropertiesFileSource",
    "SettingsSink",
    "SettingsSource",
    "parse_properties",
]
