"""topology-schema CLI - Main entrypoint."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from topology_schema import __version__
from topology_schema.cli.commands import exchange_cmd
from topology_schema.config import load_config
from topology_schema.exceptions import ConfigurationError
from topology_schema.logging import configure_logging

app = typer.Typer(
    name="topology-schema",
    help="Generate JSON Schemas for RabbitMQ topology exchange entries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.add_typer(exchange_cmd.app, name="exchange", help="Exchange schema commands")


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    *,
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to a TOML config file"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
) -> None:
    """topology-schema CLI.

    Global flags are parsed here; the loaded configuration is stored on
    `ctx.obj` for subcommands.
    """
    if version:
        console.print(
            f"[bold blue]topology-schema[/bold blue] version [green]{__version__}[/green]"
        )
        raise typer.Exit()

    try:
        settings = load_config(config)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    level = settings.logging.level
    if quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    configure_logging(
        level=level,
        format=settings.logging.format,
        use_color=settings.logging.use_color,
        include_timestamp=settings.logging.include_timestamp,
    )

    if ctx.obj is None:
        ctx.obj = {}
    ctx.obj.update({"config": settings, "quiet": quiet, "verbose": verbose})

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
