"""Configuration management commands."""

from __future__ import annotations

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from taskcli.errors import TaskError, ValidationError
from taskcli.models.config import ConfigKey
from taskcli.services.config import ConfigService, parse_key
from taskcli.storage.service import DEFAULT_CONFIG_PATH, StorageService

console = Console()
err_console = Console(stderr=True)

CONFIG_USAGE = "task config <set|get|list>"
SET_USAGE = "task config set <key> <value>"
GET_USAGE = "task config get <key>"
UNSET = "(unset)"
RULE = "━" * 34
# Trailing arguments are ignored rather than rejected
LENIENT_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}

USER_KEYS = (ConfigKey.USER_NAME, ConfigKey.USER_EMAIL, ConfigKey.USER_GITHUB)
DEFAULT_KEYS = (ConfigKey.DEFAULTS_PRIORITY, ConfigKey.DEFAULTS_SORT)


def _usage(usage: str) -> NoReturn:
    err_console.print(f"Usage: {usage}", markup=False)
    raise typer.Exit(code=1)


def _fail(exc: TaskError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(exc.message)}")
    raise typer.Exit(code=1) from exc


class ConfigGroup(TyperGroup):
    """Config group that answers unknown or missing subcommands with usage."""

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if not ctx.resilient_parsing and self.get_command(ctx, args[0]) is None:
            _usage(CONFIG_USAGE)
        return super().resolve_command(ctx, args)


config_app = typer.Typer(
    name="config",
    help="Manage CLI configuration",
    cls=ConfigGroup,
)


def get_config_service(ctx: typer.Context) -> ConfigService:
    """Build a ConfigService for the config file selected on the command line."""
    obj: dict[str, Any] = ctx.obj or {}
    return ConfigService(StorageService(obj.get("config_file", DEFAULT_CONFIG_PATH)))


def handle_set(key: str, value: str, service: ConfigService) -> None:
    """Validate and store a config value, then confirm it.

    Exits with status 1 on a validation error. Other errors propagate.
    """
    try:
        service.set(parse_key(key), value)
    except ValidationError as exc:
        _fail(exc)

    console.print(
        f"[green]✓[/green] Saved [cyan]{escape(key)}[/cyan] = [green]{escape(value)}[/green]"
    )


def handle_get(key: str, service: ConfigService) -> None:
    """Print a config value, or a notice when it is unset."""
    try:
        value = service.get(parse_key(key))
    except ValidationError as exc:
        _fail(exc)

    if value is None:
        console.print(f"[yellow]Not set:[/yellow] {escape(key)}")
        return
    console.print(value, markup=False, highlight=False, soft_wrap=True)


def handle_list(service: ConfigService) -> None:
    """Print every config key with its current value."""
    try:
        config = service.load()
    except TaskError as exc:
        _fail(exc)

    def _line(key: ConfigKey) -> str:
        value = config.get_value(key) or UNSET
        return f"  {key.value + ':':<19}{escape(value)}"

    console.print()
    console.print("[bold]Configuration[/bold]")
    console.print(RULE)
    console.print("[bold magenta]User settings[/bold magenta]")
    for key in USER_KEYS:
        console.print(_line(key), highlight=False)
    console.print()
    console.print("[bold magenta]Default settings[/bold magenta]")
    for key in DEFAULT_KEYS:
        console.print(_line(key), highlight=False)
    console.print(RULE)
    console.print(f"Config file: [dim]{escape(str(service.storage.config_path))}[/dim]")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Get, set and list configuration values."""
    if ctx.invoked_subcommand is None:
        _usage(CONFIG_USAGE)


@config_app.command("set", context_settings=LENIENT_ARGS, add_help_option=False)
def config_set(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Configuration key to set"),
    value: str | None = typer.Argument(None, help="Value to set"),
) -> None:
    """Set a configuration value.

    Examples:
        task config set user.name "Jane Doe"
        task config set defaults.priority high
    """
    if not key or not value:
        _usage(SET_USAGE)
    handle_set(key, value, get_config_service(ctx))


@config_app.command("get", context_settings=LENIENT_ARGS, add_help_option=False)
def config_get(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Configuration key to read"),
) -> None:
    """Show a single configuration value."""
    if not key:
        _usage(GET_USAGE)
    handle_get(key, get_config_service(ctx))


@config_app.command("list", context_settings=LENIENT_ARGS)
def config_list(ctx: typer.Context) -> None:
    """Display the current configuration."""
    handle_list(get_config_service(ctx))
