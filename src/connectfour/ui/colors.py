from __future__ import annotations

import os

from connectfour.config import USE_COLOR

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"


def color_enabled() -> bool:
    return (
        USE_COLOR
        and os.environ.get("NO_COLOR") is None
        and os.environ.get("TERM") not in (None, "", "dumb")
    )


def c(s: str, code: str) -> str:
    if not color_enabled():
        return s
    return f"{code}{s}{RESET}"


class _Ansi:
    def bold(self, s: str) -> str: return c(s, BOLD)
    def dim(self, s: str) -> str: return c(s, DIM)

    def cyan(self, s: str) -> str: return c(s, FG_CYAN)


A = _Ansi()
