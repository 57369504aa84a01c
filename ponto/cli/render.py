"""Rich rendering of records, reports and action results."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ponto.models import DailyRecord, PeriodReport
from ponto.tracker.hours import format_hours
from ponto.tracker.session import ActionResult

console = Console()


def show_result(result: ActionResult) -> None:
    """Print the outcome of a clock-in action."""
    if result.ok:
        console.print(f"\n[green]✓ {result.message}[/green]")
    else:
        console.print(f"\n[red]✗ {result.message}[/red]")


def record_table(records: list[DailyRecord], title: str, numbered: bool = False) -> Table:
    """Build a table of records.

    Args:
        records: Records to list.
        title: Table title.
        numbered: Prefix each row with its 1-based position.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")

    if numbered:
        table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="bold")
    table.add_column("Start")
    table.add_column("Lunch")
    table.add_column("End")
    table.add_column("Total", justify="right")

    for i, record in enumerate(records, start=1):
        lunch = "-"
        if record.lunch_start or record.lunch_end:
            lunch = escape(f"{record.lunch_start or '?'} - {record.lunch_end or '?'}")

        total = format_hours(record.total_hours)
        if record.total_hours is None:
            total = f"[yellow]{total}[/yellow]"

        row = [
            escape(record.date or "-"),
            escape(record.start_time or "-"),
            lunch,
            escape(record.end_time or "-"),
            total,
        ]
        if numbered:
            row.insert(0, str(i))
        table.add_row(*row)

    return table


def show_report(report: PeriodReport, empty_message: str, summary: bool = True) -> None:
    """Print a period report.

    Args:
        report: Report to print.
        empty_message: Shown when the report has no records.
        summary: Print the period total and days worked.
    """
    if report.is_empty:
        console.print(Panel(
            f"[dim]{empty_message}[/dim]",
            title=f"[bold]{report.title}[/bold]",
            border_style="dim",
        ))
    else:
        title = report.title
        if report.start != report.end:
            title += f" ({report.start.isoformat()} to {report.end.isoformat()})"
        console.print(record_table(report.records, title))

    if summary:
        console.print(f"\n[bold]Total:[/bold] {format_hours(report.total_hours)}")
        console.print(f"[bold]Days worked:[/bold] {report.days_worked}")


def show_today(record: DailyRecord) -> None:
    """Print the hours of the record being tracked."""
    if record.date is None:
        console.print(Panel(
            "[dim]No record for today.[/dim]",
            title="[bold]Today's hours[/bold]",
            border_style="dim",
        ))
        return

    lines = [f"Date:        {escape(record.date)}"]
    if record.start_time:
        lines.append(f"Start:       {escape(record.start_time)}")
    if record.lunch_start:
        lines.append(f"Lunch start: {escape(record.lunch_start)}")
    if record.lunch_end:
        lines.append(f"Lunch end:   {escape(record.lunch_end)}")
    if record.end_time:
        lines.append(f"End:         {escape(record.end_time)}")
    if record.total_hours is not None:
        lines.append(f"Total:       [bold green]{format_hours(record.total_hours)}[/bold green]")

    console.print(Panel(
        "\n".join(lines),
        title="[bold]Today's hours[/bold]",
        border_style="cyan",
    ))
