"""
Engine constants: piece values, heuristic weights, and search parameters.

All numeric constants used throughout the bot are defined here so that the
scoring and search modules never need to introduce new magic numbers. These
are the only tunables; nothing is read from files or the environment.

Scores are expressed in pawns (1 pawn = 1.0), not centipawns. The obviousness
weights live on the same scale as material so that capturing a queen (9.0)
outweighs any combination of positional nudges.
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (pawns)
# ---------------------------------------------------------------------------
# The knight is slightly cheaper than the bishop. The king's value is a
# sentinel that keeps material sums consistent with the +/-100 mate score;
# it is never traded, so it cancels out in every real evaluation.

PAWN_VALUE: float = 1.0
KNIGHT_VALUE: float = 2.75
BISHOP_VALUE: float = 3.0
ROOK_VALUE: float = 5.0
QUEEN_VALUE: float = 9.0
KING_VALUE: float = 100.0

PIECE_VALUES: dict[int, float] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------

CHECKMATE_SCORE: float = 100.0  # Evaluation of a mated position (negated for the loser)
DRAW_SCORE: float = 0.0

# ---------------------------------------------------------------------------
# Game phase thresholds
# ---------------------------------------------------------------------------
# The middlegame starts once more than MIDDLEGAME_ENTRY_PLY half-moves have
# been played. The endgame starts as soon as either side is down to
# ENDGAME_PIECE_THRESHOLD non-king pieces (pawns included).

MIDDLEGAME_ENTRY_PLY: int = 6
ENDGAME_PIECE_THRESHOLD: int = 8

# ---------------------------------------------------------------------------
# Obviousness weights
# ---------------------------------------------------------------------------

MATE_OBVIOUSNESS: float = 100.0
CHECK_BONUS: float = 3.0
CASTLE_BONUS: float = 3.0
PROMOTION_BONUS: float = 10.0
ATTACKED_DESTINATION_PENALTY: float = 0.5

PAWN_ACTIVE_BONUS: float = 1.5    # Opening and endgame
PAWN_QUIET_BONUS: float = 1.0     # Middlegame
CENTER_PAWN_BONUS: float = 1.0
CENTER_FILES: tuple[int, ...] = (3, 4)  # d- and e-files

MINOR_OPENING_BONUS: float = 1.5
MINOR_BONUS: float = 1.0

# Capture bonus of the simplified scorer variant (flat, independent of the
# captured piece). Off by default; see SearchSession.flat_capture_bonus.
FLAT_CAPTURE_BONUS: float = 2.0

# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------
# DEPTH_LIMIT caps the weighted depth of every branch and is also the depth
# budget of the root call. The recursion never goes deeper than this.

DEPTH_LIMIT: int = 20

# Material swing is normalised by a queen; move scarcity by a typical
# middlegame branching factor.
MATERIAL_NORMALISER: float = QUEEN_VALUE
SCARCITY_HORIZON: int = 30
BIAS_COUNT: float = 3.0

# Bonus added to a castling line that does not lose material.
CASTLING_ENCOURAGEMENT: float = 2.0

# Two evaluations (or two obviousness scores) closer than this are ties.
TIE_TOLERANCE: float = 0.01
