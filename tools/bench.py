#!/usr/bin/env python3
"""
Benchmark: measure nodes and time per move across game phases.

Runs think() once on each fixed position with a fresh session and prints the
chosen move, the phase the position was classified as, the number of search
nodes, and the wall time. Run it before and after a change to the obviousness
weights or the depth formula to see where the search effort moved.

Each position is played as if the game were already under way: the session
is told the game started with ``game_ms`` on the clock and the turn starts
with ``fraction`` of that left. Fractions near 1.0 in middlegame and endgame
positions give very deep searches.

Usage: python3 tools/bench.py [fraction] [game_ms] [seed]
"""
import logging
import os
import random
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

import chess

from obviousbot import SearchSession, TimeBudget, TurnTimer, think

# Positions spanning opening, middlegame, and endgame.
# These are fixed so results stay comparable across changes.
POSITIONS = [
    ("Start",        chess.STARTING_FEN),
    ("After 1.e4",   "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"),
    ("Italian",      "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3"),
    ("Mid-open",     "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"),
    ("Back rank",    "6k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 30"),
    ("Queen ending", "6k1/ppp2ppp/8/3p4/3P4/8/PPP2PPP/6K1 w - - 0 30"),
    ("Rook ending",  "8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 40"),
    ("Pawn race",    "8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 45"),
]


def run_position(label: str, fen: str, fraction: float, game_ms: float, seed: int) -> dict:
    """Think once on ``fen`` and return the metrics of that turn."""
    board = chess.Board(fen)
    session = SearchSession(rng=random.Random(seed), budget=TimeBudget(total_ms=game_ms))

    start = time.monotonic()
    move = think(board, TurnTimer(game_ms * fraction), session)
    time_ms = int((time.monotonic() - start) * 1000)

    return {
        "label": label,
        "move": move.uci(),
        "phase": session.phase.name.lower(),
        "nodes": session.node_count,
        "time_ms": time_ms,
    }

def main() -> None:
    """Run all benchmark positions and print a summary table."""
    logging.basicConfig(level=logging.WARNING)
    fraction = float(sys.argv[1]) if len(sys.argv) > 1 else 0.05
    game_ms = float(sys.argv[2]) if len(sys.argv) > 2 else 60_000.0
    seed = int(sys.argv[3]) if len(sys.argv) > 3 else 0

    print(f"obviousbot benchmark, {fraction:.0%} of {game_ms:,.0f} ms left, seed {seed}")
    print()
    print(f"{'Position':<14} {'Move':<7} {'Phase':<11} {'Nodes':>8} {'Time(ms)':>9}")
    print("-" * 53)

    results = []
    for label, fen in POSITIONS:
        r = run_position(label, fen, fraction, game_ms, seed)
        results.append(r)
        print(
            f"{r['label']:<14} {r['move']:<7} {r['phase']:<11} "
            f"{r['nodes']:>8,} {r['time_ms']:>9,}"
        )

    avg_nodes = sum(r["nodes"] for r in results) // len(results)
    avg_time = sum(r["time_ms"] for r in results) // len(results)
    print("-" * 53)
    print(f"{'AVERAGE':<14} {'':<7} {'':<11} {avg_nodes:>8,} {avg_time:>9,}")

if __name__ == "__main__":
    main()
