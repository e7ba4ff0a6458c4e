"""Tests for game phase tracking."""

import chess
import pytest

from obviousbot.phase import GamePhase, advance_phase


class TestAdvancePhase:
    def test_starting_position_is_opening(self) -> None:
        assert advance_phase(GamePhase.OPENING, chess.Board()) == GamePhase.OPENING

    def test_middlegame_starts_after_sixth_ply(self) -> None:
        ply_six = chess.Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 4")
        ply_seven = chess.Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 4")

        assert ply_six.ply() == 6
        assert advance_phase(GamePhase.OPENING, ply_six) == GamePhase.OPENING
        assert advance_phase(GamePhase.OPENING, ply_seven) == GamePhase.MIDDLEGAME

    def test_endgame_threshold_is_inclusive(self) -> None:
        eight = chess.Board("4k3/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQ - 0 1")
        nine = chess.Board("1n2k3/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQ - 0 1")

        assert advance_phase(GamePhase.OPENING, eight) == GamePhase.ENDGAME
        assert advance_phase(GamePhase.OPENING, nine) == GamePhase.OPENING

    def test_either_side_can_trigger_endgame(self) -> None:
        board = chess.Board("rnbqkbnr/pppppppp/8/8/8/8/PPP5/4K3 w kq - 0 20")

        assert advance_phase(GamePhase.MIDDLEGAME, board) == GamePhase.ENDGAME

    @pytest.mark.parametrize("phase", [GamePhase.MIDDLEGAME, GamePhase.ENDGAME])
    def test_never_regresses(self, phase: GamePhase) -> None:
        assert advance_phase(phase, chess.Board()) == phase

    def test_sequence_only_advances(self) -> None:
        fens = [
            chess.STARTING_FEN,
            "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3",
            "r1bqk2r/pppp1ppp/2n2n2/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQ1RK1 w kq - 6 5",
            "r2q1rk1/ppp2ppp/2n5/3p4/3P4/2N5/PPP2PPP/R2Q1RK1 w - - 0 12",
            "3r2k1/pp3ppp/8/8/8/8/PP3PPP/3R2K1 w - - 0 25",
            "6k1/5ppp/8/8/8/8/5PPP/6K1 w - - 0 40",
        ]
        phase = GamePhase.OPENING
        seen = []
        for fen in fens:
            phase = advance_phase(phase, chess.Board(fen))
            seen.append(phase)

        assert seen == sorted(seen)
        assert seen[0] == GamePhase.OPENING
        assert seen[-1] == GamePhase.ENDGAME

    def test_logs_transition(self, caplog: pytest.LogCaptureFixture) -> None:
        board = chess.Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 4")

        with caplog.at_level("INFO", logger="obviousbot.phase"):
            advance_phase(GamePhase.OPENING, board)

        assert "OPENING -> MIDDLEGAME" in caplog.text
