from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from connectfour.types import Column

CommandKind = Literal["move", "undo", "new", "quit"]

_WORDS = {
    "q": "quit", "quit": "quit", "exit": "quit",
    "u": "undo", "undo": "undo",
    "n": "new", "new": "new",
}


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    column: Optional[Column] = None


def parse_command(raw: str, cols: int) -> Command:
    s = raw.strip().lower()
    if s in _WORDS:
        return Command(_WORDS[s])  # type: ignore[arg-type]
    if not s.isdigit():
        raise ValueError(f"Invalid input. Enter 1-{cols}, u (undo), n (new game) or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Command("move", Column(col))


def ask_choice(prompt: str, options: dict[str, str], default: str) -> str:
    """Menu prompt; blank input picks `default`, unknown input falls back to it too."""
    raw = input(prompt).strip().lower()
    if not raw:
        return default
    return options.get(raw, default)
