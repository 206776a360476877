from __future__ import annotations

import sys
from typing import Callable

from .cli.analyze_csv import main as analyze_main
from .cli.make_figures import main as figures_main

COMMANDS: dict[str, Callable[[list[str]], int]] = {
    "analyze": analyze_main,
    "analysis": analyze_main,
    "figures": figures_main,
    "tiers": figures_main,
}

USAGE = """Usage:
  connectfour-analysis analyze [--csv ...] [--metric ...] [--no-plots]
  connectfour-analysis figures [--csv ...] [--figures-dir data/figures]"""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # no subcommand: analyze the latest results
    if not argv:
        return analyze_main([])

    cmd, rest = argv[0].lower(), argv[1:]
    if cmd in COMMANDS:
        return COMMANDS[cmd](rest)

    # bare flags go to analyze
    if cmd.startswith("-") and cmd not in {"-h", "--help"}:
        return analyze_main(argv)

    print(USAGE)
    return 0 if cmd in {"-h", "--help"} else 2


if __name__ == "__main__":
    raise SystemExit(main())
