# focusflow/utils/focus_log.py
'''
Append-only session log.

One line per completed session: ``[<local date/time>] <task> (<minutes>m)``.
Lines are only ever appended; nothing here rewrites or truncates the file.
'''
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from focusflow.models import Session
from focusflow.utils.error_handler import handle_file_errors

logger = logging.getLogger(__name__)

# locale's date and time representation
TIMESTAMP_FORMAT = "%c"


def format_entry(session: Session, when: Optional[datetime] = None) -> str:
    when = when or datetime.now()
    return (f"[{when.strftime(TIMESTAMP_FORMAT)}] "
            f"{session.task} ({session.duration_label}m)")


@handle_file_errors("Append session log")
def append_entry(path: Path, session: Session,
                 when: Optional[datetime] = None) -> str:
    """Append one entry for `session` and return the line written."""
    path = Path(path)
    line = format_entry(session, when)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(line + "\n")
    logger.info(f"Logged session to {path}: {line}")
    return line


@handle_file_errors("Read session log")
def read_entries(path: Path) -> Optional[List[str]]:
    """
    Return the log's lines in file order, or None if there is no log yet.
    """
    path = Path(path)
    if not path.exists():
        return None
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return []
    return text.split("\n")


def recent_entries(lines: List[str], limit: int = 10) -> List[str]:
    """Last `limit` lines, newest first."""
    if limit <= 0:
        return []
    return list(reversed(lines[-limit:]))
