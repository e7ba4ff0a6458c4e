"""
Adaptive-depth search: one own move, the opponent's best reply, and a
per-branch depth computed on the fly.

This is not alpha-beta. Every legal move at a node is evaluated; nothing is
pruned and nothing is cached. What the search saves is depth: each branch gets
its own recursion budget, computed once from four signals:

1. Material swing: a move that wins or loses material changes the game and is
   worth following further. Normalised by a queen's value.

2. Move scarcity: few legal moves usually means a forcing, tactical position
   (checks, pins, captures that must be answered). Below 30 moves the bias
   grows linearly.

3. Obviousness: the heuristic prior of the move relative to the most obvious
   candidate at this node. Principled moves get more depth, odd ones less.

4. Remaining time: the fraction of the game's allowance still unspent,
   scaled by the game phase. Opening positions and an empty clock both
   collapse the depth to the floor of 1.

Recursion shape:
    For each own move, the opponent's single best reply is found by a
    recursive call (which itself looks one own move further, and so on).
    The move is scored by the material after that reply. This is an
    asymmetric "move + best reply" search, not minimax: the side the bot plays
    always looks at its own next move, the opponent only while its depth budget
    lasts.

Threading model:
    Single-threaded and synchronous. The whole search for one turn runs on the
    caller's thread and cannot be interrupted; the board is mutated in place
    through strictly nested push/pop pairs (see rules.applied) and is
    identical to its starting state when the search returns.
"""

import logging
import math
import random
from dataclasses import dataclass, field

import chess

from obviousbot.clock import TimeBudget
from obviousbot.constants import (
    BIAS_COUNT,
    CASTLING_ENCOURAGEMENT,
    DEPTH_LIMIT,
    DRAW_SCORE,
    MATERIAL_NORMALISER,
    SCARCITY_HORIZON,
    TIE_TOLERANCE,
)
from obviousbot.evaluate import evaluate
from obviousbot.obviousness import obviousness
from obviousbot.phase import GamePhase
from obviousbot.rules import applied, is_draw

_log = logging.getLogger(__name__)


@dataclass
class SearchSession:
    """
    Per-game state passed into every turn.

    Keeping the phase, the time budget and the random source in one object
    (rather than in module globals) makes every turn reproducible from its
    inputs: tests inject a seeded rng and a fake timer and get the same move
    every time.

    Attributes:
        phase:               Game phase reached so far. Only ever advances.
        budget:              Time allowance for the game and the current turn.
        rng:                 Random source for tie-breaks.
        prefer_obvious_ties: Pick among the most obvious of the best moves
                             (True), or uniformly among all best moves (False,
                             a simpler degraded mode).
        flat_capture_bonus:  If set, the obviousness prior scores every capture
                             with this flat bonus instead of the victim's value.
        root_color:          The side the bot plays this turn. Nodes where this
                             side moves always recurse.
        node_count:          Number of search nodes visited this turn.
        root_selection:      The root node's tie-break pool, or None if the
                             root returned early (single legal move or mate).
    """

    phase: GamePhase = GamePhase.OPENING
    budget: TimeBudget = field(default_factory=TimeBudget)
    rng: random.Random = field(default_factory=random.Random)
    prefer_obvious_ties: bool = True
    flat_capture_bonus: float | None = None
    root_color: chess.Color = chess.WHITE
    node_count: int = 0
    root_selection: "Selection | None" = None


@dataclass(frozen=True)
class ScoredMove:
    """A candidate move with its obviousness prior and its search evaluation."""

    move: chess.Move
    obviousness: float
    evaluation: float


@dataclass(frozen=True)
class Selection:
    """
    The tie-break pool of one node.

    Attributes:
        best_eval: Highest evaluation among the scored moves.
        best:      Moves within TIE_TOLERANCE of best_eval.
        preferred: The subset of ``best`` the final move is drawn from: the
                   most obvious of them (within TIE_TOLERANCE), or all of
                   ``best`` in degraded mode.
        scored:    Every candidate of the node, in obviousness order.
    """

    best_eval: float
    best: tuple[chess.Move, ...]
    preferred: tuple[chess.Move, ...]
    scored: tuple[ScoredMove, ...]


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, treating a zero denominator as a neutral 0.0 result."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def moves_bias(num_moves: int) -> float:
    """Scarcity of options: 0.0 at SCARCITY_HORIZON moves or more, towards 1.0 below."""
    return max(0, SCARCITY_HORIZON - num_moves) / SCARCITY_HORIZON


def weighted_depth(
    material_bias: float,
    moves_bias: float,
    obviousness_bias: float,
    progress_bias: float,
    max_depth: int,
) -> int:
    """
    Recursion budget for one branch.

    The three per-move biases are averaged, scaled by the time/phase progress
    bias and by the depth budget of the calling node, floored, and clamped to
    [1, DEPTH_LIMIT]. Non-finite inputs collapse to the floor.

    Example:
        >>> weighted_depth(0.0, 0.5, 1.0, 0.5, 20)
        5
    """
    raw = (moves_bias + material_bias + obviousness_bias) * progress_bias * max_depth / BIAS_COUNT
    if not math.isfinite(raw):
        return 1
    return min(max(1, math.floor(raw)), DEPTH_LIMIT)


def select_move(
    scored: list[ScoredMove],
    rng: random.Random,
    prefer_obvious: bool = True,
) -> tuple[chess.Move, Selection]:
    """
    Pick the move to play from a node's scored candidates.

    All moves within TIE_TOLERANCE of the best evaluation form the best set.
    Among those, the most obvious ones (again within TIE_TOLERANCE) are
    preferred, and one of them is drawn uniformly with ``rng``.

    Raises:
        ValueError: ``scored`` is empty.
    """
    if not scored:
        raise ValueError("cannot select a move from an empty candidate list")

    best_eval = max(s.evaluation for s in scored)
    best = [s for s in scored if abs(s.evaluation - best_eval) <= TIE_TOLERANCE]

    preferred = best
    if prefer_obvious:
        top = max(s.obviousness for s in best)
        preferred = [s for s in best if abs(s.obviousness - top) <= TIE_TOLERANCE]

    selection = Selection(
        best_eval=best_eval,
        best=tuple(s.move for s in best),
        preferred=tuple(s.move for s in preferred),
        scored=tuple(scored),
    )
    return rng.choice(selection.preferred), selection


def find_best_move(
    board: chess.Board,
    session: SearchSession,
    side: chess.Color,
    baseline: float,
    current_depth: int,
    max_depth: int,
) -> chess.Move:
    """
    Find the move ``side`` should play in ``board``.

    Args:
        board:         Position with ``side`` to move. Modified in place while
                       searching and restored before returning, on every path.
        session:       Per-game state: phase, time budget, rng, observables.
        side:          The side to move at this node.
        baseline:      Evaluation the candidate lines are measured against.
                       The recursive call passes its negation.
        current_depth: Distance from the root in plies (0 at the root).
        max_depth:     Depth budget of this call. Nodes of the opponent stop
                       recursing once current_depth reaches it; nodes of
                       session.root_color always recurse.

    Returns:
        A legal move. A single legal move is returned without evaluation; a
        mating move is returned as soon as it is found.

    Raises:
        ValueError: The position has no legal moves. Terminal positions must be
                    detected before searching them.

    Algorithm:
        1. Score every legal move's obviousness and sort descending. The
           order only affects which mate is found first and the tie-break;
           every move is still evaluated.
        2. For each move: return it if it mates; score it DRAW_SCORE if it
           draws; otherwise compute a weighted depth, let the opponent find
           its best reply at that depth, play the reply and score the material
           that results relative to ``baseline``. Castling lines that do not
           lose material get CASTLING_ENCOURAGEMENT on top. Opponent nodes
           whose budget is spent score the move statically instead.
        3. Pick among the best-scoring moves with select_move().
    """
    session.node_count += 1

    moves = list(board.legal_moves)
    if not moves:
        raise ValueError(f"no legal moves in position {board.fen()}")
    if len(moves) == 1:
        return moves[0]

    prior = [
        (move, obviousness(board, move, session.phase, session.flat_capture_bonus))
        for move in moves
    ]
    prior.sort(key=lambda item: item[1], reverse=True)
    top_obviousness = prior[0][1]
    current_eval = evaluate(board, side)
    scarcity = moves_bias(len(moves))

    scored: list[ScoredMove] = []
    for move, move_obviousness in prior:
        castles = board.is_castling(move)
        with applied(board, move):
            if board.is_checkmate():
                return move
            if is_draw(board):
                scored.append(ScoredMove(move, move_obviousness, DRAW_SCORE))
                continue

            if current_depth < max_depth or side == session.root_color:
                material_bias = (evaluate(board, side) - current_eval) / MATERIAL_NORMALISER
                obviousness_bias = safe_ratio(move_obviousness, top_obviousness)
                time_bias = session.budget.remaining_fraction()
                progress_bias = time_bias * int(session.phase) / 2.0
                depth = weighted_depth(
                    material_bias, scarcity, obviousness_bias, progress_bias, max_depth
                )
                _log.debug(
                    "ply %d %s: weighted depth %d (material %.2f, moves %.2f, obvious %.2f, time %.2f)",
                    current_depth, move, depth,
                    material_bias, scarcity, obviousness_bias, time_bias,
                )

                reply = find_best_move(
                    board, session, not side, -baseline, current_depth + 1, depth
                )
                with applied(board, reply):
                    evaluation = evaluate(board, side) - baseline
                if castles and evaluation >= 0.0:
                    evaluation += CASTLING_ENCOURAGEMENT
            else:
                evaluation = evaluate(board, side) - baseline

        scored.append(ScoredMove(move, move_obviousness, evaluation))

    choice, selection = select_move(scored, session.rng, session.prefer_obvious_ties)
    if current_depth == 0:
        session.root_selection = selection
    return choice
