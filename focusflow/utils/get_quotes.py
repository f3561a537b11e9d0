# focusflow/utils/get_quotes.py
import random
from typing import Optional

MOTIVATIONS = [
    "Planting the seeds of tomorrow… 🌱",
    "Deep work > shallow likes 💪",
    "One pomodoro at a time 🍅",
    "Flow state activated ✨",
    "You're crushing it! 🔥",
    "Almost there—keep the vibe alive 🌊",
]


def get_motivation(rng: Optional[random.Random] = None) -> str:
    """
    Return a random line from MOTIVATIONS.
    Pass a seeded ``random.Random`` to get a repeatable sequence.
    """
    return (rng or random).choice(MOTIVATIONS)
