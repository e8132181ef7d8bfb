"""Exchange schema commands for the topology-schema CLI."""

from pathlib import Path
from typing import Annotated, Literal, cast

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from topology_schema.config import TopologySchemaConfig, get_default_config
from topology_schema.exceptions import TopologySchemaError
from topology_schema.exchange_types import ROUTING_PATTERN_RULES, ExchangeType
from topology_schema.generator import (
    generate_all_exchange_schemas,
    generate_exchange_schema,
    render_schema,
    schema_filename,
)
from topology_schema.logging import get_logger

app = typer.Typer()
console = Console()
logger = get_logger(__name__)

_FORMATS = ("json", "yaml")


def _get_config(ctx: typer.Context) -> TopologySchemaConfig:
    """Return the configuration loaded by the root callback, or defaults."""
    if ctx.obj and "config" in ctx.obj:
        return cast("TopologySchemaConfig", ctx.obj["config"])
    return get_default_config()


def _check_format(format: str) -> Literal["json", "yaml"]:
    if format not in _FORMATS:
        console.print(f"[red]Error:[/red] format must be one of: {', '.join(_FORMATS)}")
        raise typer.Exit(1)
    return cast("Literal['json', 'yaml']", format)


def _fail(error: TopologySchemaError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    console.print("[yellow]Hint:[/yellow] Use 'topology-schema exchange types' to list types")
    return typer.Exit(1)


@app.command("show")
def show_schema(
    ctx: typer.Context,
    exchange_type: Annotated[str, typer.Argument(help="Exchange type (e.g., topic)")],
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (json, yaml); defaults to the configured format",
        ),
    ] = None,
) -> None:
    """Print the JSON Schema for one exchange type.

    Examples
    --------
    topology-schema exchange show direct
    topology-schema exchange show x-lvc --format yaml
    """
    output = _get_config(ctx).output
    fmt = _check_format(format or output.format)

    try:
        schema = generate_exchange_schema(exchange_type)
    except TopologySchemaError as e:
        raise _fail(e) from e

    text = cast("str", render_schema(schema, fmt, indent=output.indent))
    if console.is_terminal:
        syntax = Syntax(text, fmt, theme="monokai", line_numbers=False)
        console.print(Panel(syntax, title=f"Schema: {schema['id']}", border_style="blue"))
    else:
        typer.echo(text)


@app.command("export")
def export_schemas(
    ctx: typer.Context,
    out_dir: Annotated[
        Path | None,
        typer.Option(
            "--out-dir",
            "-o",
            help="Directory to write schema files to; defaults to the configured directory",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="File format (json, yaml)"),
    ] = None,
    exchange_types: Annotated[
        list[str] | None,
        typer.Option(
            "--type",
            "-t",
            help="Exchange type to export (repeatable); defaults to the configured types",
        ),
    ] = None,
) -> None:
    """Write one schema file per exchange type.

    Examples
    --------
    topology-schema exchange export
    topology-schema exchange export --out-dir schemas --type direct --type topic
    """
    output = _get_config(ctx).output
    fmt = _check_format(format or output.format)
    directory = out_dir or Path(output.directory)

    try:
        schemas = generate_all_exchange_schemas(exchange_types or output.exchange_types)
    except TopologySchemaError as e:
        raise _fail(e) from e

    directory.mkdir(parents=True, exist_ok=True)
    for schema in schemas.values():
        path = directory / schema_filename(schema, fmt)
        text = cast("str", render_schema(schema, fmt, indent=output.indent))
        path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
        logger.info("Wrote {schema_id} to {path}", schema_id=schema["id"], path=path)
        console.print(f"[green]✓[/green] {schema['id']} -> {escape(str(path))}")

    console.print(f"Exported {len(schemas)} schema(s) to {escape(str(directory))}")


@app.command("types")
def list_types() -> None:
    """List supported exchange types.

    Examples
    --------
    topology-schema exchange types
    """
    table = Table(title="Exchange Types", show_header=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Schema id", style="green", no_wrap=True)
    table.add_column("Binding routing pattern", style="white")

    for exchange_type in ExchangeType:
        rule = ROUTING_PATTERN_RULES[exchange_type]
        table.add_row(
            exchange_type.value,
            f"{exchange_type.value}Exchange",
            escape(rule.pattern) if rule else "-",
        )

    console.print(table)
