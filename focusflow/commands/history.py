# focusflow/commands/history.py
'''
Focus Flow - History Viewer
Shows the most recent sessions from the log, newest first.
'''
import logging
from typing import Optional

from rich.console import Console
from rich.text import Text

from focusflow.config.config_manager import FocusConfig
from focusflow.models import LogEntry
from focusflow.utils import focus_log
from focusflow.utils.cli_enhanced import EnhancedCLI
from focusflow.utils.gradient import gradient_text

logger = logging.getLogger(__name__)


def render_entry(line: str) -> Text:
    entry = LogEntry.from_line(line)
    row = Text()
    row.append(entry.timestamp + "]", style="dim")
    row.append("  ")
    row.append(entry.details, style="cyan")
    return row


def show_history(config: FocusConfig, console: Optional[Console] = None) -> int:
    """
    Print the last `config.history_limit` sessions. Returns how many were shown.
    """
    cli = EnhancedCLI(console)
    cli.intro(Text("╭ 📜  FOCUS HISTORY ╮", style="magenta"))

    lines = focus_log.read_entries(config.log_file)
    if not lines:
        logger.info(f"No session log at {config.log_file}")
        cli.warning("No history yet—start your first session!")
        cli.outro("Go get 'em! 🚀")
        return 0

    recent = focus_log.recent_entries(lines, config.history_limit)
    body = Text("\n").join(render_entry(line) for line in recent)
    cli.note(body, f"Last {config.history_limit} Sessions")
    cli.outro(gradient_text("Keep up the great work!", "#89f7fe", "#66a6ff"))
    return len(recent)
