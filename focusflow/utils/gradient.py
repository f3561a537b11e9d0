# focusflow/utils/gradient.py
"""
Per-character truecolor gradients for terminal text.

Each character is wrapped in its own foreground escape, so the output can be
written straight to a terminal or turned into a rich ``Text`` with
``gradient_text``.
"""
import math
from typing import Tuple

from rich.text import Text

RESET = "\x1b[0m"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert ``#rrggbb`` (leading ``#`` optional) to an ``(r, g, b)`` tuple.
    Raises ValueError for anything that is not six hex digits.
    """
    clean = hex_color.replace("#", "")
    if len(clean) != 6:
        raise ValueError(f"Expected 6 hex digits, got '{hex_color}'")
    return (
        int(clean[0:2], 16),
        int(clean[2:4], 16),
        int(clean[4:6], 16),
    )


def round_half_up(value: float) -> int:
    # round() in Python rounds halves to even; channel math rounds .5 up
    return int(math.floor(value + 0.5))


def interpolate(start: int, end: int, factor: float) -> int:
    return round_half_up(start + (end - start) * factor)


def colorize(char: str, rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m{char}{RESET}"


def make_gradient(text: str, start_hex: str, end_hex: str) -> str:
    """
    Color ``text`` from ``start_hex`` to ``end_hex``, one escape per character.

    A single character gets the start color; empty text returns "".
    """
    if not text:
        return ""
    start = hex_to_rgb(start_hex)
    end = hex_to_rgb(end_hex)
    chars = list(text)
    last = len(chars) - 1

    out = []
    for i, char in enumerate(chars):
        factor = 0 if last == 0 else i / last
        rgb = tuple(interpolate(s, e, factor) for s, e in zip(start, end))
        out.append(colorize(char, rgb))
    return "".join(out)


def make_multiline_gradient(text: str, start_hex: str, end_hex: str) -> str:
    """
    Apply ``make_gradient`` to every line separately and rejoin with newlines.
    The gradient restarts on each line.
    """
    return "\n".join(
        make_gradient(line, start_hex, end_hex) for line in text.split("\n")
    )


def gradient_text(text: str, start_hex: str, end_hex: str) -> Text:
    """Gradient as a rich Text, safe to print without markup parsing."""
    return Text.from_ansi(make_multiline_gradient(text, start_hex, end_hex))
