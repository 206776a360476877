from __future__ import annotations
import sys
import time
from typing import Optional

from connectfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay_sec: Optional[float] = None) -> None:
    """
    Short visible pause before an AI move. The search itself runs afterwards,
    in one go, so nothing is drawn while it works.
    """
    delay = AI_THINK_DELAY_SEC if delay_sec is None else delay_sec
    if delay <= 0:
        return

    if not AI_THINKING_SPINNER or not sys.stdout.isatty():
        time.sleep(delay)
        return

    frames = "|/-\\"
    start = time.perf_counter()
    i = 0
    while (time.perf_counter() - start) < delay:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
