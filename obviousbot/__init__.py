"""
Obviousness-guided chess bot package.

Given a position and a clock, the bot picks one move per turn. Most legal moves
in a position are obviously bad, so search effort goes where it is likely to
matter: every candidate is ranked by how principled it looks, and the recursion
depth of each branch is computed from the material swing, the scarcity of
replies, the move's obviousness and the time left on the clock.

Modules:
    constants   - Piece values, heuristic weights, and search parameters
    rules       - Rules-engine helpers on top of python-chess
    evaluate    - Material evaluation from one side's perspective
    obviousness - Heuristic prior ranking of candidate moves
    phase       - Opening/middlegame/endgame tracking
    clock       - Timer protocol and per-game time budget
    search      - Adaptive-depth search and tie-break selection
    bot         - think() entry point and the ObviousBot wrapper
"""

from obviousbot.bot import ObviousBot, think
from obviousbot.clock import TimeBudget, Timer, TurnTimer
from obviousbot.phase import GamePhase
from obviousbot.search import SearchSession, Selection

__all__ = [
    "GamePhase",
    "ObviousBot",
    "SearchSession",
    "Selection",
    "TimeBudget",
    "Timer",
    "TurnTimer",
    "think",
]
