from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Literal, Optional

from connectfour.ai.difficulty import get_config
from connectfour.ai.search import SearchStats, iterative_search, search_root
from connectfour.core.board import Board
from connectfour.core.rules import winner
from connectfour.types import Column, Player, other

logger = logging.getLogger(__name__)

Reason = Literal["random", "win", "block", "search", "fallback"]


@dataclass(frozen=True, slots=True)
class MoveChoice:
    column: Column
    reason: Reason
    score: Optional[float] = None
    depth: int = 0
    nodes: int = 0
    cutoffs: int = 0
    time_ms: int = 0


def _scan_for_win(board: Board, player: Player) -> tuple[Optional[Column], int]:
    """(winning column or None, number of columns tried)."""
    tried = 0
    for c in board.legal_columns():
        tried += 1
        b2 = board.copy()
        b2.place(c, player)
        if winner(b2) == player:
            return c, tried
    return None, tried


def immediate_win(board: Board, player: Player) -> Optional[Column]:
    """First legal column where `player` connects four right away, if any."""
    return _scan_for_win(board, player)[0]


def choose_move_with_info(
    board: Board,
    difficulty: str,
    ai: Player = "O",
    rng: Optional[random.Random] = None,
    time_limit_sec: Optional[float] = None,
) -> MoveChoice:
    """
    Pick a column for `ai`:
      1) easy: uniform random, no search
      2) win now if possible
      3) block the opponent's immediate win
      4) alpha-beta search at the tier's depth and ordering
    """
    moves = board.legal_columns()
    if not moves:
        raise ValueError("No legal moves.")

    cfg = get_config(difficulty)
    rng = rng if rng is not None else random.Random()
    t0 = time.perf_counter()

    def done(col: Column, reason: Reason, **kw) -> MoveChoice:
        ms = max(1, int((time.perf_counter() - t0) * 1000))
        logger.debug("choose_move difficulty=%s ai=%s -> col=%d (%s)", difficulty, ai, col, reason)
        return MoveChoice(column=col, reason=reason, time_ms=ms, **kw)

    if cfg.random_only:
        return done(rng.choice(moves), "random")

    tried = 0
    if cfg.shortcuts:
        c, n = _scan_for_win(board, ai)
        tried += n
        if c is not None:
            return done(c, "win", depth=1, nodes=tried)

        c, n = _scan_for_win(board, other(ai))
        tried += n
        if c is not None:
            return done(c, "block", depth=1, nodes=tried)

    stats = SearchStats(nodes=tried)
    if time_limit_sec:
        res = iterative_search(board, cfg.depth, cfg.ordering, ai, rng, stats, time_limit_sec)
    else:
        res = search_root(board, cfg.depth, cfg.ordering, ai, rng, stats)

    if res.column is None:
        return done(moves[0], "fallback", depth=res.depth, nodes=stats.nodes, cutoffs=stats.cutoffs)

    return done(
        res.column,
        "search",
        score=res.score,
        depth=res.depth,
        nodes=stats.nodes,
        cutoffs=stats.cutoffs,
    )


def choose_move(
    board: Board,
    difficulty: str,
    ai: Player = "O",
    rng: Optional[random.Random] = None,
) -> Column:
    return choose_move_with_info(board, difficulty, ai, rng).column
