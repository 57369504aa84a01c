"""Main CLI entry point for Ponto."""

import logging

import click

from ponto.config import get_config, get_records_path, setup_logging

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ponto")
def cli() -> None:
    """Ponto - personal time clock.

    Record the start and end of your shift and lunch break, and review
    worked hours per day, week and month from an interactive menu.

    \b
    Records are kept in ~/.ponto_records.json. An optional
    ~/.config/ponto/config.toml may set:
      [storage] path = "..."     # records file location
      [logging] level = "INFO"   # log verbosity
    """
    from ponto.cli.menu import run_menu
    from ponto.db.store import RecordStore
    from ponto.tracker.session import TrackerSession

    config = get_config()
    setup_logging(config)

    store = RecordStore(get_records_path(config))
    logger.debug("Using records file %s", store.path)

    run_menu(TrackerSession(store))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
