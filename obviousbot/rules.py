"""
Rules-engine helpers on top of python-chess.

The bot treats ``chess.Board`` as a black box that knows the rules. This module
adds the few queries the bot needs that python-chess does not answer in a
single call, plus the scoped make/undo helper that every other module uses to
touch the board.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import chess


@dataclass(frozen=True)
class MoveFacts:
    """
    Static facts about a move, read from the position before it is played.

    python-chess moves only carry squares and a promotion piece; everything
    else has to be looked up on the board the move belongs to.
    """

    piece_type: chess.PieceType
    from_square: chess.Square
    to_square: chess.Square
    captured: chess.PieceType | None
    is_castling: bool
    is_promotion: bool

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


def describe_move(board: chess.Board, move: chess.Move) -> MoveFacts:
    """Collect the facts about ``move`` in ``board`` (which must not have it applied yet)."""
    captured = None
    if board.is_en_passant(move):
        captured = chess.PAWN
    elif board.is_capture(move):
        captured = board.piece_type_at(move.to_square)

    return MoveFacts(
        piece_type=board.piece_type_at(move.from_square),
        from_square=move.from_square,
        to_square=move.to_square,
        captured=captured,
        is_castling=board.is_castling(move),
        is_promotion=move.promotion is not None,
    )


def is_draw(board: chess.Board) -> bool:
    """
    Return True if the position counts as drawn.

    Stalemate, insufficient material and the fifty-move rule are drawn as
    usual. Repetition is stricter than the FIDE rule: any position that already
    occurred earlier in the game is scored as a draw, because a bot that
    repeats once can be forced to repeat again.
    """
    return (
        board.is_stalemate()
        or board.is_insufficient_material()
        or board.is_fifty_moves()
        or board.is_repetition(2)
    )


def non_king_piece_count(board: chess.Board, color: chess.Color) -> int:
    """Number of pieces ``color`` has on the board, pawns included, king excluded."""
    return sum(
        len(board.pieces(piece_type, color))
        for piece_type in chess.PIECE_TYPES
        if piece_type != chess.KING
    )


@contextmanager
def applied(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """
    Play ``move`` on ``board`` for the duration of a ``with`` block.

    The move is taken back when the block exits, whether it returns, continues
    a loop or raises. Blocks nest strictly, so the move popped is always the one
    this block pushed.
    """
    board.push(move)
    try:
        yield board
    finally:
        board.pop()
