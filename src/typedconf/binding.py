"""Deferred, group-aware setting bindings.

A :class:`Declaration` records how a setting should be read (parser, default,
explicit name, group). Binding it fixes the effective key and, for required
settings, checks right away that the key resolves. The resulting
:class:`Binding` re-reads the store on every ``get()``.

Declarations also work as class attributes::

    db = Group("db")

    class DatabaseConfig:
        host = settings.string_setting(group=db)
        port = settings.int_setting(group=db, default=5432)

The attribute name is supplied to the declaration through ``__set_name__``
when the class body is executed, which is when required keys are checked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from typedconf.settings import Settings

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Group:
    """Namespace prefix for bound settings."""

    def __init__(self, name: str, parent: Group | None = None):
        if not name:
            raise ValueError("Group name must not be empty")
        self.name = name
        self.parent = parent

    @property
    def full_name(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.full_name}.{self.name}"

    def key_for(self, name: str) -> str:
        return f"{self.full_name}.{name}"

    def __repr__(self) -> str:
        return f"Group({self.full_name!r})"


class Binding(Generic[T]):
    """A setting bound to its effective key."""

    def __init__(self, settings: Settings, key: str, parser: Callable[[str], T], default: T | None):
        self._settings = settings
        self._parser = parser
        self._default = default
        self.key = key

    @property
    def optional(self) -> bool:
        return self._default is not None

    def get(self) -> T:
        return self._settings.resolve(self.key, self._parser, self._default)

    def __repr__(self) -> str:
        return f"Binding(key={self.key!r}, optional={self.optional})"


class Declaration(Generic[T]):
    def __init__(
        self,
        settings: Settings,
        parser: Callable[[str], T],
        *,
        default: T | None = None,
        name: str | None = None,
        group: Group | None = None,
    ):
        self._settings = settings
        self._parser = parser
        self._default = default
        self._name = name
        self._group = group
        self._bound: Binding[T] | None = None

    def effective_key(self, field_name: str | None = None) -> str:
        name = self._name or field_name
        if not name:
            raise ValueError("Setting declaration needs an explicit name or a field name")
        if self._group is not None:
            return self._group.key_for(name)
        return name

    def bind(self, field_name: str | None = None) -> Binding[T]:
        """Fix the effective key and fail fast when a required key is absent."""
        binding = Binding(self._settings, self.effective_key(field_name), self._parser, self._default)
        if not binding.optional:
            binding.get()
        LOGGER.debug("Bound setting %s (optional=%s)", binding.key, binding.optional)
        return binding

    def __set_name__(self, owner: type, name: str) -> None:
        self._bound = self.bind(name)

    def __get__(self, instance: Any, owner: type | None = None) -> T:
        if self._bound is None:
            raise RuntimeError("Setting declaration was read before being bound to a name")
        return self._bound.get()
