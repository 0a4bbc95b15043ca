"""Main CLI application using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from taskcli import __version__
from taskcli.cli.commands.config import config_app
from taskcli.errors import TaskError
from taskcli.storage.service import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


class TaskGroup(TyperGroup):
    """Root command group.

    Unknown options and commands exit with status 1 instead of a usage error,
    and TaskErrors a command does not handle itself are reported without a
    traceback.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        if not ctx.resilient_parsing:
            _check_root_options(self.get_params(ctx), args)
        return super().parse_args(ctx, args)

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if not ctx.resilient_parsing and self.get_command(ctx, args[0]) is None:
            err_console.print(f"Command not implemented: {args[0]}", markup=False)
            raise typer.Exit(code=1)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: typer.Context) -> Any:
        try:
            return super().invoke(ctx)
        except TaskError as exc:
            logger.debug("Unhandled error", exc_info=True)
            err_console.print(
                f"[red]An unexpected error occurred:[/red] {escape(str(exc))}"
            )
            raise typer.Exit(code=1) from exc


def _check_root_options(params: list[Any], args: list[str]) -> None:
    """Exit with status 1 on an option the root command does not define."""
    takes_value: dict[str, bool] = {}
    for param in params:
        for opt in (*param.opts, *param.secondary_opts):
            takes_value[opt] = not getattr(param, "is_flag", True)

    remaining = iter(args)
    for arg in remaining:
        if arg == "--" or not arg.startswith("-"):
            return
        name, has_inline_value = arg.split("=", 1)[0], "=" in arg
        if name not in takes_value:
            err_console.print(f"Unknown option: {name}", markup=False)
            raise typer.Exit(code=1)
        if takes_value[name] and not has_inline_value:
            next(remaining, None)


app = typer.Typer(
    name="task",
    help="task - Manage tasks and their settings from the command line",
    add_completion=False,
    cls=TaskGroup,
)

# Register subcommands
app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"taskcli version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
    config_file: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config-file",
        help="Path to the JSON config file",
    ),
) -> None:
    """task CLI - Manage tasks and their settings."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger("taskcli").setLevel(level)

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file

    if ctx.invoked_subcommand is None:
        err_console.print("No command given. Available commands: config", markup=False)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
