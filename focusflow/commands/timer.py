# focusflow/commands/timer.py
'''
Focus Flow - Session Timer
Asks for a task and a duration, counts down one second at a time with a
progress bar and the odd motivational nudge, then celebrates, notifies and
appends the session to the log.
'''
import logging
import random
import time
from typing import Callable, Iterator, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.text import Text

from focusflow.config.config_manager import FocusConfig
from focusflow.models import (
    BAR_WIDTH, DURATION_OPTIONS, Session, Tick, TimerState,
)
from focusflow.utils import focus_log
from focusflow.utils.cli_enhanced import EnhancedCLI
from focusflow.utils.error_handler import validate_duration, validate_task_name
from focusflow.utils.get_quotes import get_motivation
from focusflow.utils.gradient import gradient_text
from focusflow.utils.notifications import APP_NAME, notify_cli, notify_desktop

logger = logging.getLogger(__name__)

VICTORY = """
╭───────────────────────────╮
│   🎉  SESSION COMPLETE  🎉   │
│   Time to recharge! ⚡     │
╰───────────────────────────╯
"""


def format_bar(tick: Tick, width: int = BAR_WIDTH) -> Text:
    filled = tick.filled(width)
    bar = Text()
    bar.append("█" * filled, style="green")
    bar.append("░" * (width - filled), style="grey50")
    return bar


def render_status(tick: Tick) -> Text:
    """The single status line redrawn every second."""
    line = format_bar(tick)
    line.append("  ")
    line.append(tick.time_str, style="bold")
    line.append("  ")
    if tick.final_sprint:
        line.append("⚡ final sprint", style="red")
    return line


def countdown_ticks(total_seconds: int) -> Iterator[Tick]:
    """Yield one Tick per remaining second, from total down to 1."""
    for remaining in range(total_seconds, 0, -1):
        yield Tick(remaining=remaining, total=total_seconds)


class FocusTimer:
    """
    Configuring -> Running -> Completed, once per instance.

    `sleep`, `rng` and `notifier` are injectable so tests can run the loop
    instantly and predict the motivational messages.
    """

    def __init__(
        self,
        config: FocusConfig,
        console: Optional[Console] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        notifier: Callable[..., bool] = notify_desktop,
    ):
        self.config = config
        self.console = console or Console()
        self.cli = EnhancedCLI(self.console)
        self.sleep = sleep
        self.rng = rng or random.Random()
        self.notifier = notifier
        self.state = TimerState.CONFIGURING

    def configure(self) -> Session:
        """
        Prompt for the task and duration. Cancelling either prompt exits the
        program with status 0.
        """
        try:
            task = self.cli.text(
                "What are you focusing on?",
                placeholder="Building awesome CLI tools",
                validate=validate_task_name,
            )
            duration = self.cli.select(
                "How long is the session?", DURATION_OPTIONS)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            self.cli.warning("Session cancelled.")
            logger.info("Session configuration cancelled by user")
            raise typer.Exit(0)
        return Session(task=task, duration=validate_duration(duration))

    def countdown(self, session: Session) -> int:
        """Run the countdown and return the number of ticks performed."""
        self.state = TimerState.RUNNING
        total = session.total_seconds
        logger.info(f"Starting '{session.task}' for {total}s")
        ticks = 0
        if total <= 0:
            return ticks

        with Live(console=self.console, auto_refresh=False,
                  transient=False) as live:
            for tick in countdown_ticks(total):
                if tick.show_motivation:
                    live.console.print(gradient_text(
                        get_motivation(self.rng), "#ff6a00", "#ee0979"))
                live.update(render_status(tick), refresh=True)
                self.sleep(1)
                ticks += 1
        return ticks

    def complete(self, session: Session) -> str:
        """Celebrate, notify and log the finished session."""
        self.state = TimerState.COMPLETED
        self.console.print(gradient_text(VICTORY, "#a18cd1", "#fbc2eb"))

        message = f"✨ Session finished: {session.task}"
        if self.config.notifications:
            self.notifier(APP_NAME, message, sound=self.config.sound,
                          out=self.console)
        else:
            notify_cli(message, self.console)

        line = focus_log.append_entry(self.config.log_file, session)
        self.cli.outro(gradient_text(
            "Take a well-deserved break! 🌴", "#f7971e", "#ffd200"))
        return line

    def run(self) -> Session:
        self.console.clear()
        self.cli.intro(gradient_text(
            "🍅  F O C U S  F L O W  🍅", "#ff9a9e", "#fad0c4"))
        session = self.configure()
        self.cli.info(gradient_text(
            f"Starting: {session.task} ({session.duration_label} min)",
            "#89f7fe", "#66a6ff"))
        self.countdown(session)
        self.complete(session)
        return session


def start_timer(config: FocusConfig, console: Optional[Console] = None,
                **kwargs) -> Session:
    return FocusTimer(config, console=console, **kwargs).run()
