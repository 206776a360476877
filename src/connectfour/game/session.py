from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from connectfour.ai.difficulty import get_config
from connectfour.ai.selector import choose_move
from connectfour.config import AI_PLAYER, DEFAULT_DIFFICULTY, DEFAULT_FIRST, DEFAULT_MODE
from connectfour.core.board import Board
from connectfour.core.rules import is_draw, winner
from connectfour.types import Column, Difficulty, Mode, Move, Outcome, Player, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    """
    One game: the live board, whose turn it is, and the move history.
    Nothing about a game lives at module level, so any number of sessions
    can run side by side.
    """
    mode: Mode = DEFAULT_MODE
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    first: Player = DEFAULT_FIRST
    ai_player: Player = AI_PLAYER

    board: Board = field(default_factory=Board)
    current: Player = "X"
    history: List[Move] = field(default_factory=list)
    outcome: Optional[Outcome] = None
    last_status: str = ""

    def __post_init__(self) -> None:
        if self.mode not in ("hva", "hvh"):
            raise ValueError(f"Unknown mode {self.mode!r}.")
        if self.first not in ("X", "O") or self.ai_player not in ("X", "O"):
            raise ValueError("Players are 'X' and 'O'.")
        get_config(self.difficulty)
        if not self.history and self.board.discs() == 0:
            self.current = self.first

    @property
    def over(self) -> bool:
        return self.outcome is not None

    @property
    def human_player(self) -> Player:
        return other(self.ai_player)

    def reset(self) -> None:
        self.board = Board()
        self.history = []
        self.outcome = None
        self.current = self.first
        self.last_status = f"Player {self.first} starts."

    def is_ai_turn(self) -> bool:
        return self.mode == "hva" and not self.over and self.current == self.ai_player

    def legal_columns(self) -> List[Column]:
        return self.board.legal_columns()

    def play(self, col: int) -> Move:
        """
        Drop a disc for the player to move.
        Raises ColumnFull (a ValueError) for a full column; the turn does not pass.
        """
        if self.over:
            raise ValueError("Game is over. Start a new game or undo.")

        move = self.board.place(col, self.current)
        self.history.append(move)

        w = winner(self.board)
        if w is not None:
            self.outcome = w
        elif is_draw(self.board):
            self.outcome = "draw"
        else:
            self.current = other(self.current)
        return move

    def ai_move(self, rng: Optional[random.Random] = None) -> Move:
        """Let the selector pick a column for the AI side and play it."""
        if not self.is_ai_turn():
            raise ValueError("Not the AI's turn.")
        col = choose_move(self.board, self.difficulty, ai=self.ai_player, rng=rng)
        logger.debug("ai_move difficulty=%s -> col=%d", self.difficulty, col)
        return self.play(col)

    def _pop(self) -> Optional[Move]:
        if not self.history:
            return None
        last = self.history.pop()
        removed = self.board.remove_top(last.column)
        if removed != last:
            logger.warning("undo: history says %s but board removed %s", last, removed)
        return last

    def undo(self) -> List[Move]:
        """
        Take back moves and reopen the game.

        hvh: the last move; that player moves again.
        hva: the last move, plus the human move before it when the last one
        was the AI's, so it is the human's turn again (or the starting
        player's, once the history is empty).
        """
        removed: List[Move] = []
        last = self._pop()
        if last is None:
            return removed
        removed.append(last)

        if self.mode == "hva":
            if last.player == self.ai_player and self.history:
                prev = self._pop()
                if prev is not None:
                    removed.append(prev)
            self.current = self.human_player if self.history else self.first
        else:
            self.current = last.player

        self.outcome = None
        return removed
