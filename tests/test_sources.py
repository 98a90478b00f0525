from __future__ import annotations

from pathlib import Path

import pytest

from typedconf import Settings, SettingsError
from typedconf.sources import (
    CommandLineSource,
    DotenvSource,
    EnvironmentSource,
    PropertiesFileSource,
    parse_properties,
)


def test_environment_source_reads_mapping() -> None:
    settings = Settings().add_source(EnvironmentSource({"DB_HOST": "localhost", "PORT": "80"}))
    assert settings.get_string("DB_HOST") == "localhost"
    assert settings.get_int("PORT") == 80


def test_environment_source_prefix_is_stripped() -> None:
    environ = {"APP_PORT": "8080", "APP_": "ignored", "OTHER": "x"}
    settings = Settings().add_source(EnvironmentSource(environ, prefix="APP_"))
    assert settings.properties() == {"PORT": "8080"}


def test_environment_source_defaults_to_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPEDCONF_TEST_VALUE", "42")
    settings = Settings().add_source(EnvironmentSource())
    assert settings.get_int("TYPEDCONF_TEST_VALUE") == 42


def test_dotenv_source_properties_and_flags(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "DB_HOST=localhost\n"
        "DB_URL=postgres://${DB_HOST}:5432/app\n"
        "QUOTED='two words'\n"
        "DEBUG\n",
        encoding="utf-8",
    )
    settings = Settings().add_source(DotenvSource(env_file))
    assert settings.get_string("DB_HOST") == "localhost"
    assert settings.get_string("DB_URL") == "postgres://localhost:5432/app"
    assert settings.get_string("QUOTED") == "two words"
    assert settings.get_flag("DEBUG") is True
    assert settings.flags() == frozenset({"DEBUG"})


def test_dotenv_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SettingsError):
        Settings().add_source(DotenvSource(tmp_path / "missing.env"))


def test_properties_syntax_variants() -> None:
    text = (
        "# comment\n"
        "! also a comment\n"
        "\n"
        "db.host = localhost\n"
        "db.port:5432\n"
        "name Jane Doe\n"
        "empty\n"
        "path=C:\\\\temp\\\\dir\n"
        "tab=a\\tb\n"
        "unicode=caf\\u00e9\n"
        "with\\ space=yes\n"
        "multi=one, \\\n"
        "      two, \\\n"
        "      three\n"
        "   indented=ok\n"
    )
    entries = dict(parse_properties(text))
    assert entries == {
        "db.host": "localhost",
        "db.port": "5432",
        "name": "Jane Doe",
        "empty": "",
        "path": "C:\\temp\\dir",
        "tab": "a\tb",
        "unicode": "café",
        "with space": "yes",
        "multi": "one, two, three",
        "indented": "ok",
    }


def test_properties_value_keeps_trailing_separator_chars() -> None:
    assert dict(parse_properties("url=http://host:80/a=b\n")) == {"url": "http://host:80/a=b"}


def test_properties_malformed_unicode_escape() -> None:
    with pytest.raises(SettingsError):
        list(parse_properties("bad=\\u12\n"))


def test_properties_file_source(tmp_path: Path) -> None:
    path = tmp_path / "app.properties"
    path.write_text("retries=7\nratio=0.5\n", encoding="utf-8")
    settings = Settings().add_source(PropertiesFileSource(path))
    assert settings.get_int("retries") == 7
    assert settings.get_double("ratio") == 0.5


def test_properties_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SettingsError):
        Settings().add_source(PropertiesFileSource(tmp_path / "nope.properties"))


def test_command_line_source() -> None:
    args = [
        "--db.host=localhost",
        "--db.port",
        "5432",
        "--verbose",
        "-xy",
        "--offset",
        "-3",
        "positional",
        "--dry-run",
        "--",
        "--ignored=1",
    ]
    settings = Settings().add_source(CommandLineSource(args))
    assert settings.get_string("db.host") == "localhost"
    assert settings.get_int("db.port") == 5432
    assert settings.get_int("offset") == -3
    assert settings.flags() == frozenset({"verbose", "x", "y", "dry-run"})
    assert settings.get_string("ignored", "absent") == "absent"


def test_later_sources_win() -> None:
    settings = (
        Settings()
        .add_source(EnvironmentSource({"port": "1"}))
        .add_source(CommandLineSource(["--port=2"]))
    )
    assert settings.get_int("port") == 2
