"""Command-line interface for the exportclean toolkit."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exportclean.config.settings import OutputFormat

app = typer.Typer(
    name="exportclean",
    help="Clean tabular data for XML and date-sensitive exports.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def clean(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="CSV file to clean.",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Where to write the cleaned table.",
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (overrides config).",
        ),
    ] = None,
    date_columns: Annotated[
        list[str] | None,
        typer.Option(
            "--date-column",
            "-d",
            help="Cleaned column name to normalize dates in (repeatable).",
        ),
    ] = None,
    no_dates: Annotated[
        bool,
        typer.Option("--no-dates", help="Skip date normalization."),
    ] = False,
    no_sanitize: Annotated[
        bool,
        typer.Option("--no-sanitize", help="Keep headers unsanitized."),
    ] = False,
    quiet_duplicates: Annotated[
        bool,
        typer.Option("--quiet-duplicates", help="Do not log duplicate headers."),
    ] = False,
    iso_t: Annotated[
        bool,
        typer.Option("--iso-t", help="Separate date and time with 'T'."),
    ] = False,
) -> None:
    """Clean a CSV table and write it as CSV or XML."""
    from exportclean.config.loader import load_config
    from exportclean.export import ConsoleReporter, run_export
    from exportclean.utils.logging import configure_logging

    try:
        export_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    cleaning_updates: dict[str, object] = {}
    if date_columns:
        cleaning_updates["date_columns"] = list(date_columns)
    if no_dates:
        cleaning_updates["normalize_dates"] = False
    if no_sanitize:
        cleaning_updates["sanitize_headers"] = False
    if quiet_duplicates:
        cleaning_updates["report_duplicates"] = False
    if iso_t:
        cleaning_updates["timestamp_separator"] = "T"

    output_updates: dict[str, object] = {}
    if output_format is not None:
        output_updates["format"] = output_format

    export_config = export_config.model_copy(
        update={
            "cleaning": export_config.cleaning.model_copy(update=cleaning_updates),
            "output": export_config.output.model_copy(update=output_updates),
        }
    )

    configure_logging(
        export_config.logging.level,
        json_output=export_config.logging.json_output,
    )

    console.print(f"[blue]Cleaning {escape(str(input_path))}[/blue]")

    try:
        result = run_export(export_config, input_path, output)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    console.print()
    ConsoleReporter(console).print_result(result)


@app.command()
def headers(
    names: Annotated[
        list[str],
        typer.Argument(help="Header names in table order."),
    ],
    no_sanitize: Annotated[
        bool,
        typer.Option("--no-sanitize", help="Only deduplicate."),
    ] = False,
) -> None:
    """Show how a header row would be cleaned."""
    from exportclean.normalization import dedupe_headers, header_counts, sanitize_tag

    deduped = dedupe_headers(names)
    counts = header_counts(names)

    table = Table(title="Header Cleaning", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Original", style="cyan")
    table.add_column("Deduplicated", style="blue")
    if not no_sanitize:
        table.add_column("Sanitized", style="green")

    for i, (name, deduped_name) in enumerate(zip(names, deduped), start=1):
        row = [str(i), escape(name), escape(deduped_name)]
        if not no_sanitize:
            row.append(escape(sanitize_tag(deduped_name)))
        table.add_row(*row)

    console.print(table)

    duplicated = {name: count for name, count in counts.items() if count > 1}
    if duplicated:
        console.print("\n[yellow]Duplicated headers:[/yellow]")
        for name, count in duplicated.items():
            console.print(f"  {escape(name)}: {count} times")


@app.command()
def date(
    values: Annotated[
        list[str],
        typer.Argument(help="Values to normalize."),
    ],
    iso_t: Annotated[
        bool,
        typer.Option("--iso-t", help="Separate date and time with 'T'."),
    ] = False,
) -> None:
    """Normalize date values to canonical timestamps."""
    from exportclean.normalization import normalize_date

    separator = "T" if iso_t else " "
    for value in values:
        normalized = normalize_date(value, separator)
        style = "green" if normalized != value else "dim"
        console.print(
            f"{escape(value)} -> [{style}]{escape(normalized)}[/{style}]",
            highlight=False,
        )


@app.command()
def version() -> None:
    """Show version information."""
    from exportclean import __version__

    console.print(f"exportclean version {__version__}")


if __name__ == "__main__":
    app()
