from __future__ import annotations

import pytest

import typedconf
from typedconf import MissingSettingError, default_settings, reset_global


def test_default_instance_is_shared() -> None:
    assert default_settings() is default_settings()
    typedconf.add_property("app.name", "demo")
    assert default_settings().get_string("app.name") == "demo"


def test_module_getters_delegate() -> None:
    typedconf.add_property("i", "1")
    typedconf.add_property("l", "10000000000")
    typedconf.add_property("f", "1.5")
    typedconf.add_property("d", "2.5")
    typedconf.add_property("b", "yes")
    typedconf.add_flag("fl")

    assert typedconf.get_string("i") == "1"
    assert typedconf.get_int("i") == 1
    assert typedconf.get_long("l") == 10_000_000_000
    assert typedconf.get_float("f") == 1.5
    assert typedconf.get_double("d") == 2.5
    assert typedconf.get_boolean("b") is True
    assert typedconf.get_flag("fl") is True
    assert typedconf.get_int("absent", 9) == 9


def test_clear_resets_global_state() -> None:
    typedconf.add_property("A", "1")
    assert typedconf.clear() is default_settings()
    with pytest.raises(MissingSettingError):
        typedconf.get_string("A")


def test_reset_global_creates_fresh_instance() -> None:
    first = default_settings()
    first.add_property("leak", "x")
    reset_global()
    second = default_settings()
    assert second is not first
    assert second.get_string("leak", "clean") == "clean"
