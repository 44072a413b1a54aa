"""Main CLI application wiring for Brewtracker.

  brewtracker            # browse data.json in the current directory

There are no flags or subcommands; see brewtracker.yml for settings.
"""

import logging
import sys

import typer

from brewtracker.config import Settings, load_settings
from brewtracker.store import load_brews

app = typer.Typer(add_completion=False, help="Brewtracker — browse your home-brew recipes")


def _configure_logging(settings: Settings) -> None:
    # The TUI owns the terminal, so logs only ever go to a file
    if settings.log_file is None:
        return
    logging.basicConfig(
        filename=settings.log_file,
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def main():
    """Launch the Brewtracker TUI."""
    try:
        settings = load_settings()
        _configure_logging(settings)
        logging.debug("Settings: %s", settings)
        brews = load_brews(settings.data_file)
    except RuntimeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    from brewtracker.tui.app import BrewtrackerApp
    from brewtracker.tui.state import AppState

    tui = BrewtrackerApp(state=AppState(brews=brews), tick_rate=settings.tick_rate)
    tui.run()
    sys.exit(tui.return_code or 0)
