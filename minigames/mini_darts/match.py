# minigames/mini_darts/match.py
"""Running totals and turn-taking for a single 301-down leg."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .scoring import ShotResult

PLAYER = "player"
OPPONENT = "opponent"
SIDES = (PLAYER, OPPONENT)

START_SCORE = 301
DARTS_PER_TURN = 3


def other_side(side: str) -> str:
    return OPPONENT if side == PLAYER else PLAYER


@dataclass
class Throw:
    side: str
    result: ShotResult
    total_after: int


@dataclass
class MatchState:
    totals: Dict[str, int]
    darts_per_turn: int = DARTS_PER_TURN
    darts_left: int = DARTS_PER_TURN
    turn: str = PLAYER
    history: List[Throw] = field(default_factory=list)
    winner: Optional[str] = None

    @classmethod
    def new(cls, start_score: int = START_SCORE, darts_per_turn: int = DARTS_PER_TURN) -> "MatchState":
        return cls(
            totals={side: start_score for side in SIDES},
            darts_per_turn=darts_per_turn,
            darts_left=darts_per_turn,
        )

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def current_total(self) -> int:
        return self.totals[self.turn]

    def is_player_turn(self) -> bool:
        return self.turn == PLAYER

    def reset_darts(self):
        self.darts_left = self.darts_per_turn

    def record_shot(self, result: ShotResult) -> Throw:
        """Apply one resolved dart to whoever is throwing."""
        if self.is_over:
            raise RuntimeError("match already finished")
        side = self.turn
        # deltas are negative: totals count down towards zero
        self.totals[side] += result.score_delta
        self.darts_left -= 1
        throw = Throw(side=side, result=result, total_after=self.totals[side])
        self.history.append(throw)
        if self.totals[side] <= 0:
            self.winner = side
            print(f"[Match] {side} checked out with {result.outcome.label}")
        return throw

    def check_turn(self) -> bool:
        """Hand the board over once the thrower is out of darts. Returns True on a change."""
        if self.is_over or self.darts_left > 0:
            return False
        self.turn = other_side(self.turn)
        self.reset_darts()
        return True

    def darts_thrown(self, side: Optional[str] = None) -> int:
        if side is None:
            return len(self.history)
        return sum(1 for t in self.history if t.side == side)

    def summary(self):
        return {
            "totals": dict(self.totals),
            "turn": self.turn,
            "darts_left": self.darts_left,
            "darts_thrown": self.darts_thrown(),
            "winner": self.winner,
        }
