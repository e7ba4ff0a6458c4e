"""
Material evaluation from one side's perspective.

The bot does not score piece placement at all: positional preferences live in
the obviousness prior instead, and the search only compares material. This
keeps the evaluation cheap enough to call several times per node.

Scores are in pawns and always lie in [-CHECKMATE_SCORE, CHECKMATE_SCORE]:
a mated side scores -100, the side that delivered mate +100, and drawn
positions score exactly 0.
"""

import chess

from obviousbot.constants import CHECKMATE_SCORE, DRAW_SCORE, PIECE_VALUES
from obviousbot.rules import is_draw


def material(board: chess.Board, color: chess.Color) -> float:
    """Sum of piece values ``color`` has on the board, king sentinel included."""
    return sum(
        len(board.pieces(piece_type, color)) * value
        for piece_type, value in PIECE_VALUES.items()
    )


def evaluate(board: chess.Board, perspective: chess.Color) -> float:
    """
    Score the position for ``perspective``.

    Args:
        board:       The position to score. Not modified.
        perspective: The side the score is reported for (chess.WHITE or
                     chess.BLACK). It need not be the side to move.

    Returns:
        -CHECKMATE_SCORE if ``perspective`` is the side that has been mated,
        +CHECKMATE_SCORE if it delivered mate, DRAW_SCORE for drawn positions,
        otherwise own material minus opponent material.

    Example:
        >>> import chess
        >>> evaluate(chess.Board(), chess.WHITE)
        0.0
    """
    if board.is_checkmate():
        return -CHECKMATE_SCORE if board.turn == perspective else CHECKMATE_SCORE
    if is_draw(board):
        return DRAW_SCORE
    return material(board, perspective) - material(board, not perspective)
