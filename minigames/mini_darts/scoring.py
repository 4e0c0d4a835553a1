# minigames/mini_darts/scoring.py
"""
Hit resolution: polar coordinates on the board -> what was hit and how many
points come off the shooter's total.

Rules, checked in order:
  - inside the bullseye ring        -> bullseye, 50
  - inside the half-bullseye ring   -> half bullseye, 25
  - inside the outer double wire    -> section score x1, x2 (double band) or x3 (treble band)
  - anything further out            -> miss, 0
Ring upper bounds are inclusive; sections own their start angle, not their end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import BoardLayout
from .geometry import resolve, wrap_degrees

BULLSEYE_POINTS = 50
HALF_BULLSEYE_POINTS = 25

MULTIPLIER_KIND = {1: "single", 2: "double", 3: "treble"}
KIND_PREFIX = {"single": "S", "double": "D", "treble": "T"}


@dataclass(frozen=True)
class HitOutcome:
    kind: str  # "miss" | "bullseye" | "half_bullseye" | "single" | "double" | "treble"
    section: Optional[int] = None  # base score of the wedge, only for single/double/treble

    @property
    def multiplier(self) -> int:
        return {"single": 1, "double": 2, "treble": 3}.get(self.kind, 0)

    @property
    def label(self) -> str:
        if self.kind == "miss":
            return "MISS"
        if self.kind == "bullseye":
            return "BULL"
        if self.kind == "half_bullseye":
            return "25"
        return f"{KIND_PREFIX[self.kind]}{self.section}"


MISS = HitOutcome("miss")
BULLSEYE = HitOutcome("bullseye")
HALF_BULLSEYE = HitOutcome("half_bullseye")


@dataclass(frozen=True)
class ShotResult:
    normalized_distance: float
    angle_degrees: float
    outcome: HitOutcome
    score_delta: int

    @property
    def points(self) -> int:
        return -self.score_delta


def resolve_score(normalized_distance: float, angle_degrees: float, layout: BoardLayout) -> ShotResult:
    rings = layout.rings
    angle = wrap_degrees(angle_degrees)

    def result(outcome, delta):
        return ShotResult(
            normalized_distance=normalized_distance,
            angle_degrees=angle,
            outcome=outcome,
            score_delta=delta,
        )

    if normalized_distance <= rings.bullseye:
        return result(BULLSEYE, -BULLSEYE_POINTS)
    if normalized_distance <= rings.half_bullseye:
        return result(HALF_BULLSEYE, -HALF_BULLSEYE_POINTS)
    if normalized_distance <= rings.double_far:
        multiplier = 1
        if rings.in_treble(normalized_distance):
            multiplier = 3
        elif rings.in_double(normalized_distance):
            multiplier = 2

        # sections partition [0, 360), so the first match is the only one
        section = layout.section_for(angle)
        if section is None:
            raise ValueError(f"no section covers {angle} degrees; layout is not a partition")
        outcome = HitOutcome(MULTIPLIER_KIND[multiplier], section.base_score)
        return result(outcome, -(section.base_score * multiplier))
    return result(MISS, 0)


def resolve_shot(landing_point, layout: BoardLayout) -> ShotResult:
    """Score a world-space landing point in one step."""
    n_dist, degrees = resolve(landing_point, layout)
    return resolve_score(n_dist, degrees, layout)
