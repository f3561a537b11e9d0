#!/usr/bin/env python3
# Focus Flow - A terminal focus timer
# Copyright (C) 2026 Focus Flow contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
'''
Focus Flow CLI
  focus          -> start a timed focus session
  focus history  -> view the last sessions
'''
import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console

from focusflow.commands.history import show_history
from focusflow.commands.timer import start_timer
from focusflow.config.config_manager import FocusConfig
from focusflow.utils import log_utils
from focusflow.utils.cli_enhanced import EnhancedCLI

app = typer.Typer(
    help="🍅 Focus Flow: a countdown timer for one task at a time.",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


@app.command()
def focus(
    args: Optional[List[str]] = typer.Argument(
        None, help="Pass 'history' to list recent sessions."),
):
    """
    Start a focus session, or show history with `focus history`.
    """
    cli = EnhancedCLI(console)
    try:
        config = FocusConfig.load()
        log_utils.setup_logging(config.log_level)
        if "history" in (args or []):
            show_history(config, console)
        else:
            start_timer(config, console)
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print()
        cli.warning("🚪 Exiting... session not logged.")
        raise typer.Exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {e}", exc_info=True)
        cli.error(f"An error occurred: {e}")
        raise typer.Exit(1)


def run():
    app()


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        console.print("\n[yellow]🚪 Exiting...[/yellow]")
        sys.exit(0)
