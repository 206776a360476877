from __future__ import annotations

import logging
from typing import Optional

from connectfour.ai.base import Agent
from connectfour.ai.tiered_agent import TieredAgent
from connectfour.core.rules import winner_with_line
from connectfour.game.session import GameSession
from connectfour.types import Outcome, Player
from connectfour.ui.effects import ai_thinking
from connectfour.ui.human import HumanAgent
from connectfour.ui.prompts import Command, parse_command
from connectfour.ui.render import render

logger = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _is_human(agent: Agent) -> bool:
    return bool(getattr(agent, "is_human", False))


def agents_for(session: GameSession, seed: Optional[int] = None) -> tuple[Agent, Agent]:
    """(agent for X, agent for O) matching the session's mode."""
    if session.mode == "hvh":
        return HumanAgent("Player X"), HumanAgent("Player O")

    ai = TieredAgent(difficulty=session.difficulty)
    if seed is not None:
        ai.rng.seed(seed)
    human = HumanAgent("Human")
    return (ai, human) if session.ai_player == "X" else (human, ai)


def _header(session: GameSession, agent_x: Agent, agent_o: Agent) -> str:
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")
    header = f"X: {x_name} | O: {o_name} | Turn: {session.current}"
    if session.last_status:
        return f"{header}\n{session.last_status}"
    return header


def _result_text(session: GameSession, agent_x: Agent, agent_o: Agent) -> str:
    if session.outcome == "draw":
        return "Draw game."
    agent = agent_x if session.outcome == "X" else agent_o
    return f"{_agent_name(agent, 'Player ' + str(session.outcome))} ({session.outcome}) wins!"


def _apply_command(session: GameSession, cmd: Command) -> bool:
    """Handle undo/new. Returns False when the player quit."""
    if cmd.kind == "quit":
        return False
    if cmd.kind == "undo":
        removed = session.undo()
        if removed:
            cols = ", ".join(str(m.column + 1) for m in removed)
            session.last_status = f"Undid column {cols}."
        else:
            session.last_status = "Nothing to undo."
    elif cmd.kind == "new":
        session.reset()
    return True


def run_game(
    session: GameSession,
    agent_x: Agent,
    agent_o: Agent,
    show_thinking: bool = True,
) -> Optional[Outcome]:
    """
    Drive one session from the terminal until someone quits.
    Returns the outcome of the board at the time of quitting.
    """
    if not session.last_status:
        session.last_status = f"Player {session.current} starts."

    while True:
        line = winner_with_line(session.board)
        highlight = line[1] if line else None

        if session.over:
            render(session.board, _header(session, agent_x, agent_o) + "\n" + _result_text(session, agent_x, agent_o), highlight)
            raw = input("Game over. n = new game, u = undo, q = quit: ")
            try:
                cmd = parse_command(raw, session.board.cols)
            except ValueError:
                cmd = Command("quit")
            if cmd.kind == "move" or not _apply_command(session, cmd):
                return session.outcome
            continue

        render(session.board, _header(session, agent_x, agent_o), highlight)

        me: Player = session.current
        current_agent = agent_x if me == "X" else agent_o

        try:
            if _is_human(current_agent):
                raw = input(f"Player {me} move: ")
                cmd = parse_command(raw, session.board.cols)
                if cmd.kind != "move":
                    if not _apply_command(session, cmd):
                        render(session.board, _header(session, agent_x, agent_o) + "\nGame quit.", highlight)
                        return session.outcome
                    continue
                col = cmd.column
                session.last_status = f"Player {me} chose {int(col) + 1}"
            else:
                if show_thinking:
                    ai_thinking(f"{_agent_name(current_agent, 'AI')} is thinking")
                col = current_agent.choose_move(session)

                info = getattr(current_agent, "last_info", None)
                if info:
                    session.last_status = (
                        f"{current_agent.name} chose {info.get('move_col')} | "
                        f"{info.get('reason')} | "
                        f"d={info.get('depth')} | "
                        f"nodes={info.get('nodes')} | "
                        f"cut={info.get('cutoffs')} | "
                        f"eval={info.get('eval')} | "
                        f"{info.get('time_ms')}ms"
                    )
                else:
                    session.last_status = f"{current_agent.name} chose {int(col) + 1}"
                logger.debug("%s played column %d", current_agent.name, int(col) + 1)

            session.play(col)
            if not session.over:
                session.last_status += f" | Next: Player {session.current}"

        except ValueError as e:
            # full column, bad input
            session.last_status = str(e)
