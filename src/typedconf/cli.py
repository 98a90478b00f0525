from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer

from typedconf.coerce import PARSERS
from typedconf.errors import SettingsError
from typedconf.settings import Settings
from typedconf.sources import DotenvSource, EnvironmentSource, PropertiesFileSource

app = typer.Typer(help="typedconf CLI: read typed settings from env, .env and .properties files")
LOGGER = logging.getLogger(__name__)


class ValueType(str, Enum):
    string = "string"
    int = "int"
    long = "long"
    float = "float"
    double = "double"
    boolean = "boolean"
    flag = "flag"


class DumpFormat(str, Enum):
    properties = "properties"
    json = "json"


def main() -> None:
    """Allow `python -m typedconf` execution."""
    app()


@app.callback()
def load(
    ctx: typer.Context,
    properties: Optional[list[Path]] = typer.Option(
        None,
        "--properties",
        "-p",
        help="Properties file to load (repeatable, later files win).",
    ),
    env_file: Optional[list[Path]] = typer.Option(
        None,
        "--env-file",
        "-e",
        help=".env file to load (repeatable). Bare KEY lines become flags.",
    ),
    use_env: bool = typer.Option(False, "--env/--no-env", help="Load process environment variables first."),
    assignments: Optional[list[str]] = typer.Option(
        None,
        "--set",
        "-s",
        help="Inline KEY=VALUE override (repeatable).",
    ),
    flags: Optional[list[str]] = typer.Option(None, "--flag", "-f", help="Inline flag (repeatable)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
) -> None:
    """Load settings; sources are applied in order env, env files, properties, --set, --flag."""
    _configure_logging(verbose)
    settings = Settings()
    try:
        if use_env:
            settings.add_source(EnvironmentSource())
        for path in env_file or []:
            settings.add_source(DotenvSource(path))
        for path in properties or []:
            settings.add_source(PropertiesFileSource(path))
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for assignment in assignments or []:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got: {assignment}", param_hint="--set")
        settings.add_property(key, value)
    for flag in flags or []:
        if not flag:
            raise typer.BadParameter("Flag name must not be empty", param_hint="--flag")
        settings.add_flag(flag)
    LOGGER.debug("Loaded %s properties and %s flags", len(settings.properties()), len(settings.flags()))
    ctx.obj = settings


@app.command("get")
def get_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Setting key, e.g. db.port."),
    value_type: ValueType = typer.Option(ValueType.string, "--type", "-t", help="Type to coerce the value to."),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Fallback when the key is absent."),
) -> None:
    """Print one setting coerced to the requested type."""
    settings: Settings = ctx.obj
    try:
        value = _resolve(settings, key, value_type, default)
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(_format_value(value))


@app.command("dump")
def dump(
    ctx: typer.Context,
    output_format: DumpFormat = typer.Option(DumpFormat.properties, "--format", help="Output format."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output."),
) -> None:
    """Print every loaded property and flag."""
    settings: Settings = ctx.obj
    properties = settings.properties()
    flags = sorted(settings.flags())
    if not properties and not flags:
        typer.secho("No settings loaded.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    if output_format is DumpFormat.json:
        payload = {"properties": properties, "flags": flags}
        typer.echo(json.dumps(payload, indent=2 if pretty else None))
        return
    for key, value in properties.items():
        typer.echo(f"{key}={value}")
    for flag in flags:
        if flag not in properties:
            typer.echo(f"{flag}=true")


def _resolve(settings: Settings, key: str, value_type: ValueType, default_text: str | None) -> Any:
    if value_type is ValueType.flag:
        if default_text is not None:
            raise typer.BadParameter("Flags cannot take a default", param_hint="--default")
        return settings.get_flag(key)

    parser = PARSERS[value_type.value]
    default = None
    if default_text is not None:
        try:
            default = parser(default_text)
        except ValueError as exc:
            raise typer.BadParameter(
                f"Default {default_text!r} is not a valid {value_type.value}", param_hint="--default"
            ) from exc
    return settings.resolve(key, parser, default)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
