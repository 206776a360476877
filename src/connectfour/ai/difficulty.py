from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from connectfour.ai.search import Ordering
from connectfour.types import Difficulty


@dataclass(frozen=True, slots=True)
class DifficultyConfig:
    depth: int              # 0 means no search
    ordering: Ordering
    shortcuts: bool         # immediate win / block check before searching
    random_only: bool = False


DIFFICULTIES: Dict[str, DifficultyConfig] = {
    "easy": DifficultyConfig(depth=0, ordering="natural", shortcuts=False, random_only=True),
    "medium": DifficultyConfig(depth=3, ordering="shuffle", shortcuts=True),
    "hard": DifficultyConfig(depth=5, ordering="shuffle", shortcuts=True),
    "extreme": DifficultyConfig(depth=7, ordering="center", shortcuts=True),
}

LEVELS: Tuple[Difficulty, ...] = ("easy", "medium", "hard", "extreme")


def get_config(difficulty: str) -> DifficultyConfig:
    try:
        return DIFFICULTIES[difficulty]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}. Choose one of: {', '.join(LEVELS)}."
        ) from None


def parse_difficulty(raw: str) -> Difficulty:
    """Accept a name ('hard') or a 1-based menu number ('3')."""
    s = raw.strip().lower()
    if s.isdigit():
        i = int(s) - 1
        if 0 <= i < len(LEVELS):
            return LEVELS[i]
    if s in DIFFICULTIES:
        return s  # type: ignore[return-value]
    raise ValueError(f"Unknown difficulty {raw!r}. Choose one of: {', '.join(LEVELS)}.")
