from __future__ import annotations

import time

from connectfour.ai.difficulty import LEVELS, parse_difficulty
from connectfour.config import DEFAULT_DIFFICULTY, DEFAULT_FIRST
from connectfour.game.controller import agents_for, run_game
from connectfour.game.session import GameSession
from connectfour.ui.prompts import ask_choice


def _ask_difficulty() -> str:
    print("\nDifficulty:")
    for i, name in enumerate(LEVELS, start=1):
        print(f"{i}) {name}")
    raw = input(f"Choice (default {DEFAULT_DIFFICULTY}): ").strip()
    if not raw:
        return DEFAULT_DIFFICULTY
    try:
        return parse_difficulty(raw)
    except ValueError as e:
        print(f"{e} Using {DEFAULT_DIFFICULTY}.")
        return DEFAULT_DIFFICULTY


def _ask_first(mode: str) -> str:
    print("\nWho moves first?")
    if mode == "hva":
        print("1) You (X)")
        print("2) AI (O)")
    else:
        print("1) Player X")
        print("2) Player O")
    return ask_choice(f"Choice (default {DEFAULT_FIRST}): ", {"1": "X", "2": "O", "x": "X", "o": "O"}, DEFAULT_FIRST)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI")
    print("3) Run tier league (AI vs AI benchmark)")

    choice = input("Choice: ").strip()

    if choice == "3":
        print("\nStarting tier league in 3 seconds...\n")
        time.sleep(3)
        from connectfour.scripts.league_main import main as league_main
        league_main([])
        return

    if choice not in {"1", "2"}:
        print("\nInvalid choice. Defaulting to Human vs AI.\n")
        time.sleep(1)
        choice = "2"

    mode = "hvh" if choice == "1" else "hva"
    difficulty = _ask_difficulty() if mode == "hva" else DEFAULT_DIFFICULTY
    first = _ask_first(mode)

    session = GameSession(mode=mode, difficulty=difficulty, first=first)
    session.reset()
    agent_x, agent_o = agents_for(session)

    print(f"\nStarting game: {agent_x.name} (X) vs {agent_o.name} (O)")
    print("Game will start in 2 seconds...\n")
    time.sleep(2)
    run_game(session, agent_x, agent_o)
