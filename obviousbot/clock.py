"""
Timer protocol and per-game time budget.

The host owns the real clock. The bot only needs two readings from it: how
much time was left on the game clock when the turn started, and how much of
the turn has elapsed so far. From those it derives the fraction of the whole
game's allowance still unspent, which scales search depth down as the clock
runs out.

Nothing here blocks or sleeps; the elapsed reading is sampled live every time
the search asks for it.
"""

import time
from dataclasses import dataclass
from typing import Protocol


class Timer(Protocol):
    """Clock readings the host supplies each turn."""

    @property
    def milliseconds_remaining(self) -> float: ...

    @property
    def milliseconds_elapsed_this_turn(self) -> float: ...


class TurnTimer:
    """
    Monotonic timer for one turn.

    The host creates one at the start of each turn with the game-clock reading
    it was given. Remaining time counts down live from that reading.
    """

    __slots__ = ("_remaining_at_start", "_turn_start")

    def __init__(self, milliseconds_remaining: float) -> None:
        self._remaining_at_start = float(milliseconds_remaining)
        self._turn_start = time.monotonic()

    @property
    def milliseconds_elapsed_this_turn(self) -> float:
        return (time.monotonic() - self._turn_start) * 1000

    @property
    def milliseconds_remaining(self) -> float:
        return max(0.0, self._remaining_at_start - self.milliseconds_elapsed_this_turn)


@dataclass
class TimeBudget:
    """
    Time allowance snapshot for the current game and turn.

    Attributes:
        total_ms:       Allowance observed at the first turn of the game. None
                        until the first call to start_turn().
        turn_start_ms:  Allowance remaining when the current turn began.
        timer:          The current turn's timer, sampled for elapsed time.
    """

    total_ms: float | None = None
    turn_start_ms: float = 0.0
    timer: Timer | None = None

    def start_turn(self, timer: Timer) -> None:
        remaining = timer.milliseconds_remaining
        if self.total_ms is None:
            self.total_ms = remaining
        self.turn_start_ms = remaining
        self.timer = timer

    def elapsed_ms(self) -> float:
        return self.timer.milliseconds_elapsed_this_turn if self.timer is not None else 0.0

    def remaining_fraction(self) -> float:
        """
        Fraction of the game's total allowance still unspent, sampled now.

        Returns 0.0 when no total is known or it is zero, and never goes below
        0.0 even if the turn has overrun its allowance.
        """
        if not self.total_ms:
            return 0.0
        return max(0.0, (self.turn_start_ms - self.elapsed_ms()) / self.total_ms)
