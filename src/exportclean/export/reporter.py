"""
Console reporter for export results.

Formats cleaning outcomes using Rich for clear, colored output.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exportclean.export.pipeline import ExportResult
from exportclean.normalization.frame import CleaningResult


class ConsoleReporter:
    """Formats and displays export results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_result(self, result: ExportResult) -> None:
        """
        Print a summary table, header changes and validation problems.

        Args:
            result: Export result to display.
        """
        cleaning = result.cleaning

        table = Table(title="Export Results", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Rows", str(result.n_rows))
        table.add_row("Columns", str(len(cleaning.headers)))
        table.add_row("Headers renamed", str(len(cleaning.renamed)))
        table.add_row("Dates converted", str(cleaning.n_dates_converted))
        table.add_row("Format", result.format.value)

        self.console.print(table)

        self.print_headers(cleaning)
        self._print_problems(result.problems)

        saved_to = escape(str(result.output_path))
        self.console.print(f"\n[green]Saved to: {saved_to}[/green]")

    def print_headers(self, cleaning: CleaningResult) -> None:
        """
        Print the headers that changed during cleaning.

        Args:
            cleaning: Cleaning result.
        """
        if not cleaning.renamed:
            return

        table = Table(title="Renamed Headers", show_header=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Original", style="yellow")
        table.add_column("Cleaned", style="green")

        for position, (before, after) in sorted(cleaning.renamed.items()):
            table.add_row(str(position + 1), escape(before), escape(after))

        self.console.print()
        self.console.print(table)

    def _print_problems(self, problems: list[str]) -> None:
        """
        Print export validation problems.

        Args:
            problems: Problem descriptions.
        """
        if not problems:
            return

        self.console.print()
        self.console.print("[bold red]Validation Problems:[/bold red]")
        for problem in problems:
            self.console.print(f"  {escape(problem)}")
