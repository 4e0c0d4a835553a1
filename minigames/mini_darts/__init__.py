"""Mini Darts: aim, throw, count down from 301."""

from .board import BoardLayout, BoardLayoutError, RingThresholds, Section, build_board_layout
from .geometry import point_at, resolve
from .match import MatchState
from .scoring import HitOutcome, ShotResult, resolve_score, resolve_shot

__all__ = [
    "BoardLayout",
    "BoardLayoutError",
    "RingThresholds",
    "Section",
    "build_board_layout",
    "point_at",
    "resolve",
    "MatchState",
    "HitOutcome",
    "ShotResult",
    "resolve_score",
    "resolve_shot",
]
