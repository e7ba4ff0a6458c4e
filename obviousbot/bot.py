"""
Turn entry point.

The host calls think() once per turn with the live position and a timer. Each
call starts from scratch: the phase and the time budget are refreshed from the
position and the clock, and the search runs to completion before a move is
returned. Nothing but the session carries over from one turn to the next.
"""

import logging
import random
import time

import chess

from obviousbot.clock import TimeBudget, Timer
from obviousbot.constants import DEPTH_LIMIT
from obviousbot.evaluate import evaluate
from obviousbot.phase import GamePhase, advance_phase
from obviousbot.search import SearchSession, find_best_move

_log = logging.getLogger(__name__)


def think(board: chess.Board, timer: Timer, session: SearchSession) -> chess.Move:
    """
    Choose the move to play in ``board``.

    Args:
        board:   The current position, side to move is the bot. Mutated during
                 the search and left exactly as it was on return.
        timer:   Clock readings for this turn.
        session: Per-game state. Its phase and time budget are updated, and
                 its per-turn observables reset, before searching.

    Returns:
        A move from ``board.legal_moves``.

    Raises:
        ValueError: The game is already over in ``board`` (no legal moves).
    """
    if not any(board.legal_moves):
        raise ValueError(f"no legal moves in position {board.fen()}")

    session.phase = advance_phase(session.phase, board)
    session.budget.start_turn(timer)
    session.root_color = board.turn
    session.node_count = 0
    session.root_selection = None

    start = time.monotonic()
    move = find_best_move(
        board,
        session,
        board.turn,
        evaluate(board, board.turn),
        0,
        DEPTH_LIMIT,
    )
    elapsed_ms = int((time.monotonic() - start) * 1000)

    _log.info(
        "Move=%s phase=%s nodes=%d time=%dms fraction=%.3f",
        move.uci(),
        session.phase.name,
        session.node_count,
        elapsed_ms,
        session.budget.remaining_fraction(),
    )
    return move


class ObviousBot:
    """
    A bot object a host can keep for the whole game.

    Holds one SearchSession and forwards each turn to think(). Call new_game()
    between games so the phase and the game's total time allowance are
    observed afresh.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        prefer_obvious_ties: bool = True,
        flat_capture_bonus: float | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._prefer_obvious_ties = prefer_obvious_ties
        self._flat_capture_bonus = flat_capture_bonus
        self.session = self._new_session()

    def think(self, board: chess.Board, timer: Timer) -> chess.Move:
        return think(board, timer, self.session)

    def new_game(self) -> None:
        self.session = self._new_session()

    def _new_session(self) -> SearchSession:
        return SearchSession(
            phase=GamePhase.OPENING,
            budget=TimeBudget(),
            rng=self._rng,
            prefer_obvious_ties=self._prefer_obvious_ties,
            flat_capture_bonus=self._flat_capture_bonus,
        )
