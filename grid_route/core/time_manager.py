"""Round timing helpers."""

from __future__ import annotations

import time


class RoundClock:
    """Keep consecutive search rounds at least ``delay_seconds`` apart.

    The interval is measured from the start of the current round, which is
    construction time or the moment :meth:`wait` last returned.
    """

    def __init__(self, delay_seconds: float = 5.0) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self.delay_seconds: float = delay_seconds
        self.rounds_completed: int = 0
        self._round_started: float = time.perf_counter()

    def remaining(self) -> float:
        """Seconds left before the next round may start; never negative."""

        elapsed = time.perf_counter() - self._round_started
        return max(0.0, self.delay_seconds - elapsed)

    def wait(self) -> float:
        """Finish the current round, sleep out its interval and start the next.

        Returns the number of seconds slept.
        """

        pause = self.remaining()
        if pause:
            time.sleep(pause)
        self.rounds_completed += 1
        self._round_started = time.perf_counter()
        return pause


__all__ = ["RoundClock"]
