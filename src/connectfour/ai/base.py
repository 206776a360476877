from __future__ import annotations
from typing import Protocol

from connectfour.game.session import GameSession
from connectfour.types import Column


class Agent(Protocol):
    name: str

    def choose_move(self, session: GameSession) -> Column:
        ...
