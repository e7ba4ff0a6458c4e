"""
Obviousness: a heuristic prior over candidate moves.

Given a position, most legal moves are obviously bad and only a few are worth
a closer look. The obviousness score estimates how principled a move looks by
the basic rules of thumb of chess (give check, win material, develop pieces,
push central pawns, castle, promote, don't walk into attacks) without any
search. The adaptive-depth search uses it twice: to decide how deep each
branch is worth exploring, and to break ties between equally evaluated moves.

The scorer never recurses, so its cost does not depend on search depth. It
plays the move once to look for mate and check, and takes it back before
returning.
"""

import chess

from obviousbot.constants import (
    ATTACKED_DESTINATION_PENALTY,
    CASTLE_BONUS,
    CENTER_FILES,
    CENTER_PAWN_BONUS,
    CHECK_BONUS,
    MATE_OBVIOUSNESS,
    MINOR_BONUS,
    MINOR_OPENING_BONUS,
    PAWN_ACTIVE_BONUS,
    PAWN_QUIET_BONUS,
    PIECE_VALUES,
    PROMOTION_BONUS,
)
from obviousbot.phase import GamePhase
from obviousbot.rules import applied, describe_move


def obviousness(
    board: chess.Board,
    move: chess.Move,
    phase: GamePhase,
    flat_capture_bonus: float | None = None,
) -> float:
    """
    Score how obvious ``move`` looks in ``board``.

    Contributions are summed and the total floored at zero:

        check (not mate)              +3.0
        capture                       +value of the captured piece
        pawn move                     +1.5 (+1.0 in the middlegame),
                                      +1.0 more onto the d- or e-file
        knight or bishop move         +1.5 in the opening, else +1.0
        rook, queen or king move      +phase index / 2
        castling                      +3.0
        promotion                     +10.0
        destination attacked          -0.5

    A mating move short-circuits to MATE_OBVIOUSNESS (100).

    Args:
        board:              Position with ``move`` legal and not yet applied.
                            Left unchanged on return.
        move:               The candidate move.
        phase:              Current game phase.
        flat_capture_bonus: If given, every capture scores this instead of
                            the captured piece's value.

    Returns:
        A score >= 0.
    """
    facts = describe_move(board, move)
    score = 0.0

    with applied(board, move):
        if board.is_checkmate():
            return MATE_OBVIOUSNESS
        if board.is_check():
            score += CHECK_BONUS

    if facts.is_capture:
        if flat_capture_bonus is not None:
            score += flat_capture_bonus
        else:
            score += PIECE_VALUES[facts.captured]

    if facts.piece_type == chess.PAWN:
        # pawns matter most early (centre) and late (promotion races)
        score += PAWN_QUIET_BONUS if phase == GamePhase.MIDDLEGAME else PAWN_ACTIVE_BONUS
        if chess.square_file(facts.to_square) in CENTER_FILES:
            score += CENTER_PAWN_BONUS
    elif facts.piece_type in (chess.KNIGHT, chess.BISHOP):
        score += MINOR_OPENING_BONUS if phase == GamePhase.OPENING else MINOR_BONUS
    else:
        score += int(phase) / 2.0

    if facts.is_castling:
        score += CASTLE_BONUS
    if facts.is_promotion:
        score += PROMOTION_BONUS
    if board.is_attacked_by(not board.turn, facts.to_square):
        score -= ATTACKED_DESTINATION_PENALTY

    return max(score, 0.0)
