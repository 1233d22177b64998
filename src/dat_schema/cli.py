"""Command-line interface for dat-schema.

This module provides a CLI for checking schema documents, displaying the
resolved tables and enumerations, exporting them as JSON and splitting a
document into one file per table.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table as RichTable
from typing_extensions import Annotated

from dat_schema.config import Config
from dat_schema.errors import SchemaError
from dat_schema.reader import analyze, load_sources
from dat_schema.schema.base import SchemaFile, SchemaTable, TableColumn
from dat_schema.splitter import write_split

app = typer.Typer(
    name="dat-schema",
    help="Validate and inspect GraphQL-SDL table schemas",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

PathsArgument = Annotated[
    Optional[List[Path]],
    typer.Argument(help="Schema files or directories (configured schema_dir if omitted)"),
]


def configure_logging(level: str) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_config(ctx: typer.Context) -> Config:
    """Return the configuration prepared by the top-level callback."""
    return ctx.ensure_object(Config)


def load_schema(ctx: typer.Context, paths: Optional[List[Path]]) -> SchemaFile:
    """Analyze the given paths, exiting with status 1 on the first error.

    Args:
        ctx: The typer context holding the configuration
        paths: Files or directories, or None for the configured schema_dir

    Returns:
        The resolved schema
    """
    config = get_config(ctx)
    try:
        sources = load_sources(paths or [config.schema_dir], config.file_pattern)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not sources:
        err_console.print("[red]Error:[/red] No schema files found.")
        raise typer.Exit(1)

    result = analyze(sources, max_workers=config.max_workers)
    if not result.ok:
        print_error(result.error)
        raise typer.Exit(1)
    return result.unwrap()


def print_error(error: SchemaError) -> None:
    """Print a schema error with its source excerpt and wrapped cause."""
    err_console.print(f"[red]Error ({error.kind}):[/red] {escape(str(error))}")
    if isinstance(error.cause, SchemaError):
        err_console.print(f"[yellow]Caused by ({error.cause.kind}):[/yellow] {escape(str(error.cause))}")


def format_column_type(column: TableColumn) -> str:
    """Format a column type the way it would be declared, e.g. `[foreignrow]`."""
    return f"[{column.type}]" if column.array else str(column.type)


def format_reference(column: TableColumn) -> str:
    """Format the reference target of a column as `Table` or `Table.column`."""
    if column.references is None:
        return ""
    if column.references.column is None:
        return column.references.table
    return f"{column.references.table}.{column.references.column}"


def format_table(table: SchemaTable) -> RichTable:
    """Build a rich table describing the columns of a schema table."""
    title = table.name
    if table.tags:
        title += f" ({', '.join(table.tags)})"

    rich_table = RichTable(title=escape(title))
    rich_table.add_column("Column Name", style="cyan")
    rich_table.add_column("Type", style="magenta")
    rich_table.add_column("Flags", style="yellow")
    rich_table.add_column("References", style="green")
    rich_table.add_column("Files")

    for column in table.columns:
        flags = [flag for flag in ("unique", "localized") if getattr(column, flag)]
        files = list(column.files or ())
        if column.file:
            files.insert(0, column.file)
        rich_table.add_row(
            escape(column.name or "_"),
            escape(format_column_type(column)),
            ", ".join(flags),
            escape(format_reference(column)),
            escape(" ".join(files)),
        )

    return rich_table


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    workers: Annotated[
        Optional[int],
        typer.Option("--workers", "-w", min=1, help="Threads used to resolve tables and enums"),
    ] = None,
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = Config()
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    # Override config values if provided via CLI
    if workers:
        config.max_workers = workers
    if verbose:
        config.log_level = "DEBUG"

    configure_logging(config.log_level)
    ctx.obj = config


@app.command()
def check(ctx: typer.Context, paths: PathsArgument = None) -> None:
    """Check schema documents and report the first error.

    Example:
        dat-schema check schema/

        dat-schema check _Core.graphql Leagues.graphql
    """
    schema_file = load_schema(ctx, paths)
    console.print(
        f"[green]✓[/green] {len(schema_file.tables)} tables, "
        f"{len(schema_file.enumerations)} enumerations"
    )


@app.command()
def show(
    ctx: typer.Context,
    paths: PathsArgument = None,
    table: Annotated[
        Optional[str], typer.Option("--table", "-t", help="Only show this table")
    ] = None,
) -> None:
    """Display resolved tables and enumerations.

    Example:
        dat-schema show schema/ --table BaseItemTypes
    """
    schema_file = load_schema(ctx, paths)

    if table is not None:
        schema_table = schema_file.get_table(table)
        if schema_table is None:
            err_console.print(f"[red]Error:[/red] Unknown table {escape(table)!r}.")
            raise typer.Exit(1)
        console.print(format_table(schema_table))
        return

    for schema_table in schema_file.tables:
        console.print(format_table(schema_table))

    if schema_file.enumerations:
        enum_table = RichTable(title="Enumerations")
        enum_table.add_column("Name", style="cyan")
        enum_table.add_column("Indexing", style="magenta")
        enum_table.add_column("Enumerators")
        for enumeration in schema_file.enumerations:
            enum_table.add_row(
                escape(enumeration.name),
                str(enumeration.indexing),
                escape(", ".join(name or "_" for name in enumeration.enumerators)),
            )
        console.print(enum_table)


@app.command()
def export(
    ctx: typer.Context,
    paths: PathsArgument = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (stdout if not specified)"),
    ] = None,
) -> None:
    """Export the resolved schema as JSON.

    Example:
        dat-schema export schema/ --output schema.json
    """
    schema_file = load_schema(ctx, paths)
    document = schema_file.to_json()

    if output:
        output.write_text(document, encoding="utf-8")
        console.print(f"[green]✓[/green] Schema written to {escape(str(output))}")
    else:
        typer.echo(document)


@app.command()
def split(
    file: Annotated[Path, typer.Argument(help="Schema document to split")],
    output_dir: Annotated[
        Path, typer.Option("--output-dir", "-o", help="Directory receiving one file per table")
    ],
) -> None:
    """Split a schema document into one file per table.

    Example:
        dat-schema split _Core.graphql --output-dir schema/
    """
    try:
        written = write_split(file.read_text(encoding="utf-8"), output_dir)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {len(written)} files written to {escape(str(output_dir))}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
