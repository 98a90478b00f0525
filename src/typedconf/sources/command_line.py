from __future__ import annotations

import logging
from typing import Sequence

from typedconf.sources.base import SettingsSink

LOGGER = logging.getLogger(__name__)


class CommandLineSource:
    """Turns ``--key value`` style arguments into settings.

    ``--key=value`` and ``--key value`` set properties. ``--key`` followed by
    another option (or nothing) sets a flag, as does each letter of ``-abc``.
    Everything after a bare ``--`` is ignored.
    """

    def __init__(self, args: Sequence[str]):
        self._args = list(args)

    def load(self, sink: SettingsSink) -> None:
        args = self._args
        index = 0
        while index < len(args):
            arg = args[index]
            index += 1
            if arg == "--":
                LOGGER.debug("Ignoring %s arguments after --", len(args) - index)
                break
            if arg.startswith("--"):
                name, sep, value = arg[2:].partition("=")
                if not name:
                    LOGGER.debug("Ignoring malformed argument %r", arg)
                    continue
                if sep:
                    sink.add_property(name, value)
                elif index < len(args) and not _is_option(args[index]):
                    sink.add_property(name, args[index])
                    index += 1
                else:
                    sink.add_flag(name)
            elif _is_option(arg):
                for letter in arg[1:]:
                    sink.add_flag(letter)
            else:
                LOGGER.debug("Ignoring positional argument %r", arg)

    def __repr__(self) -> str:
        return f"CommandLineSource({len(self._args)} args)"


def _is_option(arg: str) -> bool:
    # "-" alone and negative numbers are values, not options.
    if not arg.startswith("-") or arg == "-":
        return False
    return not arg[1:2].isdigit()
