"""Reader for Java-style ``.properties`` files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from typedconf.errors import SettingsError
from typedconf.sources.base import SettingsSink

LOGGER = logging.getLogger(__name__)

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesFileSource:
    """Loads ``key=value`` pairs from a properties file."""

    def __init__(self, path: Path, *, encoding: str = "utf-8"):
        self._path = path
        self._encoding = encoding

    def load(self, sink: SettingsSink) -> None:
        path = self._path.expanduser()
        try:
            text = path.read_text(encoding=self._encoding)
        except FileNotFoundError as exc:
            raise SettingsError(f"Properties file not found: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsError(f"Cannot read properties file {path}: {exc}") from exc
        count = 0
        for key, value in parse_properties(text):
            if not key:
                LOGGER.debug("Skipping entry without a key in %s", path)
                continue
            sink.add_property(key, value)
            count += 1
        LOGGER.debug("Loaded %s properties from %s", count, path)

    def __repr__(self) -> str:
        return f"PropertiesFileSource({str(self._path)!r})"


def parse_properties(text: str) -> Iterator[tuple[str, str]]:
    for line in _logical_lines(text):
        yield _split_entry(line)


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in text.splitlines():
        stripped = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not stripped or stripped[0] in "#!":
                continue
            current = stripped
        else:
            current = pending + stripped
        if _ends_with_continuation(current):
            pending = current[:-1]
            continue
        pending = None
        yield current
    if pending is not None:
        yield pending


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    while index < length and line[index] in _WHITESPACE:
        index += 1
    if index < length and line[index] in _SEPARATORS:
        index += 1
        while index < length and line[index] in _WHITESPACE:
            index += 1
    return _unescape(key), _unescape(line[index:])


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            out.append(char)
            index += 1
            continue
        escaped = text[index + 1]
        if escaped == "u":
            digits = text[index + 2:index + 6]
            if len(digits) != 4:
                raise SettingsError(f"Malformed \\u escape in properties entry: {text!r}")
            try:
                out.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise SettingsError(f"Malformed \\u escape in properties entry: {text!r}") from exc
            index += 6
            continue
        out.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return "".join(out)
