from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from math import inf
from typing import List, Literal, Optional, Sequence

from connectfour.config import CENTER_COL
from connectfour.core.board import Board
from connectfour.core.rules import winner
from connectfour.core.scoring import DEFAULT_WEIGHTS, WIN_SCORE, ScoreWeights, score
from connectfour.types import Column, Player, other

logger = logging.getLogger(__name__)

# center:  columns sorted by distance from the middle, at every node
# shuffle: root columns shuffled with the caller's rng, children in column order
# natural: column order everywhere
Ordering = Literal["center", "shuffle", "natural"]


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@dataclass(frozen=True, slots=True)
class SearchResult:
    score: float
    column: Optional[Column]
    depth: int


def center_out(columns: Sequence[Column]) -> List[Column]:
    # sorted() is stable: equal distances keep ascending column order
    return sorted(columns, key=lambda c: abs(int(c) - CENTER_COL))


def order_columns(columns: Sequence[Column], ordering: Ordering, rng: random.Random) -> List[Column]:
    if ordering == "center":
        return center_out(columns)
    out = list(columns)
    if ordering == "shuffle":
        rng.shuffle(out)
    return out


def terminal_score(board: Board, ai: Player, depth: int) -> Optional[float]:
    """
    Win/loss value with the remaining depth folded in: a win found with more
    plies left (sooner) is worth more, a loss found later costs less.
    """
    w = winner(board)
    if w is None:
        return None
    if w == ai:
        return float(WIN_SCORE + depth)
    return float(-(WIN_SCORE + depth))


def search(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    ai: Player,
    *,
    ordering: Ordering = "natural",
    stats: Optional[SearchStats] = None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    prune: bool = True,
) -> float:
    """
    Minimax value of `board` with `depth` plies left, `ai` maximizing.
    Children are explored on copies; `board` itself is never touched.
    With prune=False every child is visited (plain minimax).
    """
    if stats is not None:
        stats.nodes += 1

    term = terminal_score(board, ai, depth)
    if term is not None:
        return term

    moves = board.legal_columns()
    if depth <= 0 or not moves:
        return float(score(board, ai, weights))

    if ordering == "center":
        moves = center_out(moves)

    to_play = ai if maximizing else other(ai)

    if maximizing:
        value = -inf
        for c in moves:
            child = board.copy()
            child.place(c, to_play)
            value = max(value, search(child, depth - 1, alpha, beta, False, ai,
                                      ordering=ordering, stats=stats, weights=weights, prune=prune))
            alpha = max(alpha, value)
            if prune and alpha >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return value

    value = inf
    for c in moves:
        child = board.copy()
        child.place(c, to_play)
        value = min(value, search(child, depth - 1, alpha, beta, True, ai,
                                  ordering=ordering, stats=stats, weights=weights, prune=prune))
        beta = min(beta, value)
        if prune and alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break
    return value


def search_root(
    board: Board,
    depth: int,
    ordering: Ordering = "center",
    ai: Player = "O",
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> SearchResult:
    """
    Best column for `ai` at `depth` plies. Ties go to whichever column the
    ordering policy puts first.
    """
    moves = board.legal_columns()
    if not moves:
        raise ValueError("No legal moves.")
    if depth < 1:
        raise ValueError("Search depth must be at least 1.")

    rng = rng if rng is not None else random.Random()
    if stats is None:
        stats = SearchStats()

    best_score = -inf
    best_col: Optional[Column] = None
    alpha = -inf
    beta = inf

    for c in order_columns(moves, ordering, rng):
        child = board.copy()
        child.place(c, ai)
        s = search(child, depth - 1, alpha, beta, False, ai,
                   ordering=ordering, stats=stats, weights=weights)
        if s > best_score:
            best_score = s
            best_col = c
        alpha = max(alpha, best_score)

    logger.debug(
        "search_root depth=%d ordering=%s -> col=%s score=%s nodes=%d cutoffs=%d",
        depth, ordering, best_col, best_score, stats.nodes, stats.cutoffs,
    )
    return SearchResult(score=best_score, column=best_col, depth=depth)


def iterative_search(
    board: Board,
    max_depth: int,
    ordering: Ordering = "center",
    ai: Player = "O",
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
    time_limit_sec: Optional[float] = None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> SearchResult:
    """
    Run search_root at depth 1..max_depth and keep the deepest finished result.

    The budget is only checked between iterations; an iteration that has
    started always runs to completion.
    """
    deadline = None
    if time_limit_sec is not None and time_limit_sec > 0:
        deadline = time.perf_counter() + float(time_limit_sec)

    result = search_root(board, 1, ordering, ai, rng, stats, weights)
    for d in range(2, max_depth + 1):
        if deadline is not None and time.perf_counter() >= deadline:
            logger.debug("iterative_search stopped at depth %d (time budget)", result.depth)
            break
        result = search_root(board, d, ordering, ai, rng, stats, weights)
    return result
