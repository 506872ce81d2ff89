"""
Console output formatting using Rich.
"""

from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from date_tasks.data.schemas import DateSummary, WorkScheduleResult


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the console formatter.

        Args:
            console: Optional Rich console to print to.
        """
        self.console = console or Console()

    def print_value(self, label: str, value: Any) -> None:
        """
        Print a single labelled result.

        Args:
            label: What the value is.
            value: Value to display.
        """
        if isinstance(value, bool):
            rendered = Text("yes" if value else "no", style="bold green" if value else "bold red")
        else:
            rendered = Text(str(value), style="bold white")
        self.console.print(Text.assemble((f"{label}: ", "cyan"), rendered))

    def print_summary(self, summary: DateSummary) -> None:
        """
        Print every derived value of a date.

        Args:
            summary: DateSummary to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Date Summary[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=22)
        table.add_column("Value", style="white")

        table.add_row("Date:", summary.value.isoformat())
        table.add_row("Formatted:", summary.formatted)
        table.add_row("Time:", summary.time)
        table.add_row("Timestamp (ms):", str(summary.timestamp))
        table.add_row("Day:", summary.day_name)

        self.console.print(Panel(table, title="[bold]Value[/bold]"))

        calendar_table = Table(show_header=False, box=None)
        calendar_table.add_column("Label", style="cyan", width=22)
        calendar_table.add_column("Value", style="white")

        calendar_table.add_row("Quarter:", f"Q{summary.quarter}")
        calendar_table.add_row("Week Number:", str(summary.week_number))
        calendar_table.add_row("Days in Month:", str(summary.days_in_month))
        calendar_table.add_row("Leap Year:", "yes" if summary.is_leap_year else "no")
        calendar_table.add_row("Next Friday:", summary.next_friday.date().isoformat())
        calendar_table.add_row(
            Text("Next Friday the 13th:", style="bold green"),
            Text(summary.next_friday_the_13th.isoformat(), style="bold green"),
        )

        self.console.print(Panel(calendar_table, title="[bold]Calendar[/bold]"))
        self.console.print()

    def print_schedule(self, result: WorkScheduleResult) -> None:
        """
        Print a generated work schedule.

        Args:
            result: WorkScheduleResult to display.
        """
        request = result.request

        self.console.print()
        self.console.rule("[bold blue]Work Schedule[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white", justify="right")

        summary_table.add_row("Period:", f"{request.period.start} - {request.period.end}")
        summary_table.add_row(
            "Pattern:",
            f"{request.count_work_days} on / {request.count_off_days} off",
        )
        summary_table.add_row("Calendar Days:", str(result.calendar_days))
        summary_table.add_row("Days Off:", f"- {result.off_days}")
        summary_table.add_row("", "─" * 12)
        summary_table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.work_days), style="bold green"),
        )

        self.console.print(Panel(summary_table, title="[bold]Schedule[/bold]"))

        if result.work_dates:
            dates_table = Table(title="[bold]Working Dates[/bold]")
            dates_table.add_column("#", style="dim", justify="right", width=5)
            dates_table.add_column("Date", style="cyan", width=12)

            for number, work_date in enumerate(result.work_dates, start=1):
                dates_table.add_row(str(number), work_date)

            self.console.print(dates_table)
        else:
            self.console.print("[dim]No working days in this period.[/dim]")

        self.console.print()

    def print_json(self, data: str) -> None:
        """
        Print a JSON document.

        Args:
            data: Serialized JSON.
        """
        self.console.print_json(data)

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {escape(message)}")
