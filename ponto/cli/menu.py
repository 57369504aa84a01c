"""Interactive menu for the Ponto CLI.

Each handler receives the TrackerSession owned by the menu loop.
"""

import logging
from typing import Callable, Optional

import click
from rich.markup import escape

from ponto.cli.render import console, record_table, show_report, show_result, show_today
from ponto.tracker import daily_report, monthly_report, weekly_report
from ponto.tracker.session import TrackerSession

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = ("s", "y")


def _ask(text: str) -> Optional[str]:
    """Prompt for a line of input; None if input could not be read."""
    try:
        return click.prompt(text, default="", show_default=False, prompt_suffix=": ")
    except click.Abort:
        return None


def start_shift(session: TrackerSession) -> None:
    show_result(session.start_day())


def start_lunch(session: TrackerSession) -> None:
    show_result(session.start_lunch())


def end_lunch(session: TrackerSession) -> None:
    show_result(session.end_lunch())


def end_shift(session: TrackerSession) -> None:
    show_result(session.end_day())


def show_daily(session: TrackerSession) -> None:
    report = daily_report(session.store.load(), session.today())
    show_report(report, "No record found for today.", summary=False)


def show_weekly(session: TrackerSession) -> None:
    report = weekly_report(session.store.load(), session.today())
    show_report(report, "No records this week.")


def show_monthly(session: TrackerSession) -> None:
    report = monthly_report(session.store.load(), session.today())
    show_report(report, "No records this month.")


def view_today(session: TrackerSession) -> None:
    show_today(session.record)


def delete_record(session: TrackerSession) -> None:
    """List stored records and delete one after confirmation.

    0 cancels. Invalid or non-numeric input aborts without changes.
    """
    records = session.store.load()

    if not records:
        console.print("\n[red]✗ No records found to remove.[/red]")
        return

    console.print(record_table(records, "Remove a day record", numbered=True))
    console.print("  [dim][0] Cancel[/dim]\n")

    raw = _ask("Enter the number of the record to remove")
    if raw is None:
        console.print("\n[red]✗ Could not read input.[/red]")
        return

    raw = raw.strip()
    if not raw.isdecimal():
        console.print("\n[red]✗ Invalid option.[/red]")
        return
    choice = int(raw)

    if choice == 0:
        console.print("\n[green]✓ Operation cancelled.[/green]")
        return

    if choice > len(records):
        console.print("\n[red]✗ Invalid option.[/red]")
        return

    day = records[choice - 1].date or "unknown date"
    answer = _ask(f"Are you sure you want to remove the record for {day}? (s/N)")
    if answer is None:
        console.print("\n[red]✗ Could not read input.[/red]")
        return

    if answer.strip().lower() not in CONFIRM_ANSWERS:
        console.print("\n[green]✓ Operation cancelled.[/green]")
        return

    removed = session.store.delete_at(choice)
    if removed is None:
        console.print("\n[red]✗ The record could not be removed.[/red]")
        return

    session.forget(removed.date)
    console.print(f"\n[green]✓ Record for {escape(removed.date or 'unknown date')} removed.[/green]")


MENU_OPTIONS: list[tuple[str, str, Optional[Callable[[TrackerSession], None]]]] = [
    ("1", "Start shift", start_shift),
    ("2", "Start lunch", start_lunch),
    ("3", "End lunch", end_lunch),
    ("4", "End shift", end_shift),
    ("5", "Daily report", show_daily),
    ("6", "Weekly report", show_weekly),
    ("7", "Monthly report", show_monthly),
    ("8", "View today's hours", view_today),
    ("9", "Delete a record", delete_record),
    ("0", "Exit", None),
]


def print_menu() -> None:
    console.print("\n[bold cyan]═══ Ponto ═══[/bold cyan]")
    for key, label, _ in MENU_OPTIONS:
        console.print(f"  [bold]{key}[/bold]  {label}")


def run_menu(session: TrackerSession) -> None:
    """Show the menu until the user exits or input ends."""
    handlers = {key: handler for key, _, handler in MENU_OPTIONS}

    while True:
        print_menu()
        choice = _ask("\nChoose an option")
        if choice is None:
            logger.debug("Input closed, leaving menu")
            return

        choice = choice.strip()
        if choice not in handlers:
            console.print("\n[red]✗ Invalid option.[/red]")
            continue

        handler = handlers[choice]
        if handler is None:
            return

        handler(session)
        click.pause("\nPress any key to continue...")
