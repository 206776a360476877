from __future__ import annotations

import argparse
import logging

from connectfour.ui.menu import run_menu


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect 4 in the terminal.")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows search stats)")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")


if __name__ == "__main__":
    main()
