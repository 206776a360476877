from __future__ import annotations

from dataclasses import dataclass

from connectfour.game.session import GameSession
from connectfour.types import Column


@dataclass(slots=True)
class HumanAgent:
    """Placeholder seat: the controller reads this player's moves from the keyboard."""
    name: str = "Human"
    is_human: bool = True

    def choose_move(self, session: GameSession) -> Column:
        raise RuntimeError("Human moves come from the prompt, not from choose_move().")
