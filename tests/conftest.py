"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

import pytest

from obviousbot.clock import TimeBudget
from obviousbot.phase import GamePhase
from obviousbot.search import SearchSession

GAME_MS = 60_000.0


@dataclass
class FakeTimer:
    """Timer with fixed readings."""

    milliseconds_remaining: float = GAME_MS
    milliseconds_elapsed_this_turn: float = 0.0


@pytest.fixture
def fake_timer() -> type[FakeTimer]:
    return FakeTimer


@pytest.fixture
def make_session() -> Callable[..., SearchSession]:
    """Build a seeded session whose budget reports ``fraction`` of a 60s game left."""

    def _make(
        phase: GamePhase = GamePhase.OPENING,
        fraction: float = 0.0,
        seed: int = 1,
        **kwargs: object,
    ) -> SearchSession:
        remaining = GAME_MS * fraction
        budget = TimeBudget(
            total_ms=GAME_MS,
            turn_start_ms=remaining,
            timer=FakeTimer(remaining, 0.0),
        )
        return SearchSession(phase=phase, budget=budget, rng=random.Random(seed), **kwargs)

    return _make
