from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from typedconf.errors import SettingsError
from typedconf.sources.base import SettingsSink

LOGGER = logging.getLogger(__name__)


class EnvironmentSource:
    """Loads environment variables as properties, names kept verbatim."""

    def __init__(self, environ: Mapping[str, str] | None = None, *, prefix: str | None = None):
        self._environ = environ
        self._prefix = prefix

    def load(self, sink: SettingsSink) -> None:
        environ = os.environ if self._environ is None else self._environ
        loaded = 0
        for name, value in environ.items():
            if self._prefix:
                if not name.startswith(self._prefix):
                    continue
                name = name[len(self._prefix):]
                if not name:
                    continue
            sink.add_property(name, value)
            loaded += 1
        LOGGER.debug("Loaded %s environment variables", loaded)

    def __repr__(self) -> str:
        return f"EnvironmentSource(prefix={self._prefix!r})"


class DotenvSource:
    """Loads a ``.env`` file; bare ``KEY`` lines become flags."""

    def __init__(self, path: Path):
        self._path = path

    def load(self, sink: SettingsSink) -> None:
        path = self._path.expanduser()
        if not path.is_file():
            raise SettingsError(f"Env file not found: {path}")
        values = dotenv_values(dotenv_path=path, interpolate=True)
        for key, value in values.items():
            if value is None:
                sink.add_flag(key)
            else:
                sink.add_property(key, value)
        LOGGER.debug("Loaded %s entries from %s", len(values), path)

    def __repr__(self) -> str:
        return f"DotenvSource({str(self._path)!r})"
