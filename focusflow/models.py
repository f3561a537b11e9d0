# focusflow/models.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from focusflow.utils.gradient import round_half_up

BAR_WIDTH = 30
MOTIVATION_INTERVAL = 30
FINAL_SPRINT_SECONDS = 10
ENTRY_DELIMITER = "] "


class TimerState(Enum):
    CONFIGURING = "configuring"
    RUNNING = "running"
    COMPLETED = "completed"


# (minutes, label) pairs offered when configuring a session
DURATION_OPTIONS: List[Tuple[float, str]] = [
    (0.1, "6s Speed Test"),
    (25, "25 min Pomodoro"),
    (50, "50 min Deep Work"),
]


def format_minutes(minutes: float) -> str:
    """Render a duration the way it was chosen: 25, 50, 0.1."""
    return f"{minutes:g}"


@dataclass(frozen=True)
class Session:
    task: str
    duration: float

    @property
    def total_seconds(self) -> int:
        return int(math.floor(self.duration * 60))

    @property
    def duration_label(self) -> str:
        return format_minutes(self.duration)


@dataclass(frozen=True)
class Tick:
    """One second of a running countdown."""
    remaining: int
    total: int

    @property
    def time_str(self) -> str:
        mins, secs = divmod(self.remaining, 60)
        return f"{mins:02d}:{secs:02d}"

    @property
    def elapsed_fraction(self) -> float:
        return 1 - self.remaining / self.total

    def filled(self, bar_width: int = BAR_WIDTH) -> int:
        return round_half_up(self.elapsed_fraction * bar_width)

    @property
    def show_motivation(self) -> bool:
        return (self.remaining % MOTIVATION_INTERVAL == 0
                and self.remaining != self.total)

    @property
    def final_sprint(self) -> bool:
        return self.remaining <= FINAL_SPRINT_SECONDS


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    details: str

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """
        Split once on "] ". A line without the delimiter keeps everything in
        the timestamp part and ends up with empty details.
        """
        timestamp, _, details = line.partition(ENTRY_DELIMITER)
        return cls(timestamp=timestamp, details=details)

    def to_line(self) -> str:
        return f"{self.timestamp}{ENTRY_DELIMITER}{self.details}"
