"""Tests for the obviousness prior."""

import chess
import pytest

from obviousbot.obviousness import obviousness
from obviousbot.phase import GamePhase

BACK_RANK_MATE = "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"


def _score(fen: str, uci: str, phase: GamePhase, **kwargs) -> float:
    return obviousness(chess.Board(fen), chess.Move.from_uci(uci), phase, **kwargs)


class TestPawnMoves:
    def test_central_push_beats_rook_pawn_push(self) -> None:
        board = chess.Board()

        center = obviousness(board, chess.Move.from_uci("e2e4"), GamePhase.OPENING)
        edge = obviousness(board, chess.Move.from_uci("a2a4"), GamePhase.OPENING)

        assert center == 2.5
        assert edge == 1.5
        assert center > edge

    def test_pawns_are_quieter_in_the_middlegame(self) -> None:
        assert _score(chess.STARTING_FEN, "a2a3", GamePhase.MIDDLEGAME) == 1.0
        assert _score(chess.STARTING_FEN, "a2a3", GamePhase.ENDGAME) == 1.5


class TestPieceMoves:
    @pytest.mark.parametrize(
        ("phase", "expected"),
        [(GamePhase.OPENING, 1.5), (GamePhase.MIDDLEGAME, 1.0), (GamePhase.ENDGAME, 1.0)],
    )
    def test_knight_development(self, phase: GamePhase, expected: float) -> None:
        assert _score(chess.STARTING_FEN, "g1f3", phase) == expected

    @pytest.mark.parametrize(
        ("phase", "expected"),
        [(GamePhase.OPENING, 0.0), (GamePhase.MIDDLEGAME, 0.5), (GamePhase.ENDGAME, 1.0)],
    )
    def test_heavy_pieces_scale_with_phase(self, phase: GamePhase, expected: float) -> None:
        assert _score("4k3/8/8/8/8/8/8/R3K3 w - - 0 1", "a1a2", phase) == expected

    def test_destination_under_attack_is_penalised(self) -> None:
        fen = "4k3/8/8/8/6p1/8/8/4K1N1 w - - 0 1"

        assert _score(fen, "g1e2", GamePhase.OPENING) == 1.5
        assert _score(fen, "g1f3", GamePhase.OPENING) == 1.0
        assert _score(fen, "g1h3", GamePhase.OPENING) == 1.0

    def test_score_is_floored_at_zero(self) -> None:
        assert _score("4k3/8/8/8/8/8/1p6/R3K3 w - - 0 1", "a1c1", GamePhase.OPENING) == 0.0


class TestTactics:
    def test_mating_move_short_circuits(self) -> None:
        assert _score(BACK_RANK_MATE, "a1a8", GamePhase.OPENING) == 100.0

    def test_check_bonus(self) -> None:
        assert _score("4k3/8/8/8/8/8/8/R3K3 w - - 0 1", "a1a8", GamePhase.ENDGAME) == 4.0

    def test_capture_adds_victim_value(self) -> None:
        fen = "4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 1"

        assert _score(fen, "e4d5", GamePhase.OPENING) == 11.5

    def test_flat_capture_bonus_variant(self) -> None:
        fen = "4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 1"

        assert _score(fen, "e4d5", GamePhase.OPENING, flat_capture_bonus=2.0) == 4.5

    def test_castling_bonus(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K2R w K - 0 1"

        assert _score(fen, "e1g1", GamePhase.OPENING) == 3.0
        assert _score(fen, "e1g1", GamePhase.MIDDLEGAME) == 3.5

    def test_promotion_bonus(self) -> None:
        assert _score("8/P6k/8/8/8/8/8/4K3 w - - 0 1", "a7a8q", GamePhase.ENDGAME) == 11.5


class TestBoardIsRestored:
    @pytest.mark.parametrize("uci", ["a1a8", "g1h1", "h2h4"])
    def test_scoring_leaves_position_unchanged(self, uci: str) -> None:
        board = chess.Board("6k1/5ppp/8/8/8/8/7P/R5K1 w - - 0 1")
        before = board.fen()

        obviousness(board, chess.Move.from_uci(uci), GamePhase.MIDDLEGAME)

        assert board.fen() == before
        assert board.move_stack == []
