"""
Game phase tracking.

The phase biases both the obviousness prior (which pieces are worth moving)
and the search (how much depth a branch gets). It is re-derived each turn from
the live position rather than replayed from the move history, and it only ever
moves forward: opening, then middlegame, then endgame.
"""

import logging
from enum import IntEnum

import chess

from obviousbot.constants import ENDGAME_PIECE_THRESHOLD, MIDDLEGAME_ENTRY_PLY
from obviousbot.rules import non_king_piece_count

_log = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Phase of the game. The integer value is the phase index used in scoring."""

    OPENING = 0
    MIDDLEGAME = 1
    ENDGAME = 2


def advance_phase(phase: GamePhase, board: chess.Board) -> GamePhase:
    """
    Return the phase for ``board`` given the phase reached so far.

    The middlegame begins once the ply count exceeds MIDDLEGAME_ENTRY_PLY; the
    endgame begins as soon as either side has ENDGAME_PIECE_THRESHOLD or fewer
    non-king pieces, from any earlier phase. The result is never earlier than
    ``phase``.
    """
    reached = phase
    if reached == GamePhase.OPENING and board.ply() > MIDDLEGAME_ENTRY_PLY:
        reached = GamePhase.MIDDLEGAME

    fewest = min(
        non_king_piece_count(board, chess.WHITE),
        non_king_piece_count(board, chess.BLACK),
    )
    if fewest <= ENDGAME_PIECE_THRESHOLD:
        reached = GamePhase.ENDGAME

    if reached != phase:
        _log.info("Game phase %s -> %s at ply %d", phase.name, reached.name, board.ply())
    return reached
