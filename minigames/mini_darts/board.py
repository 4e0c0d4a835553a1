# minigames/mini_darts/board.py
"""
Static dartboard layout: ring thresholds and the 20 angular sections.

Everything here is built once when the scene starts and never mutated.
Malformed layouts raise BoardLayoutError at construction so they can never
reach the per-shot scoring path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pygame

SECTION_COUNT = 20
SECTION_ARC = 360.0 / SECTION_COUNT  # 18 degrees per wedge

# Base scores in board order, starting at the wedge right of the 0° wire.
SCORE_ORDER: Tuple[int, ...] = (
    20, 5, 12, 9, 14, 11, 8, 16, 7, 19,
    3, 17, 2, 15, 10, 6, 13, 4, 18, 1,
)

# Rotation applied to raw atan2 output so 0° sits on the wire between 1 and 20
# for a y-up world. Re-derive it for a board image with another orientation.
CALIBRATION_OFFSET = 459.0

BOARD_CENTER = (-25.0, 0.0)
BOARD_RADIUS = 300.0


class BoardLayoutError(ValueError):
    """Raised when a board layout breaks its construction invariants."""


@dataclass(frozen=True)
class RingThresholds:
    """Ring boundaries as fractions of the board radius."""

    bullseye: float
    half_bullseye: float
    treble_near: float
    treble_far: float
    double_near: float
    double_far: float

    def __post_init__(self):
        vals = self.as_tuple()
        if any(not (0.0 < v <= 1.0) for v in vals):
            raise BoardLayoutError(f"ring thresholds must lie in (0, 1]: {vals}")
        if any(a >= b for a, b in zip(vals, vals[1:])):
            raise BoardLayoutError(f"ring thresholds must be strictly increasing: {vals}")

    def as_tuple(self) -> Tuple[float, ...]:
        return (
            self.bullseye,
            self.half_bullseye,
            self.treble_near,
            self.treble_far,
            self.double_near,
            self.double_far,
        )

    def in_treble(self, n_dist: float) -> bool:
        return self.treble_near <= n_dist <= self.treble_far

    def in_double(self, n_dist: float) -> bool:
        return self.double_near <= n_dist <= self.double_far


# Regulation board (mm) normalized to the outer double wire at 170 mm.
REGULATION_RINGS = RingThresholds(
    bullseye=6.35 / 170,
    half_bullseye=15.9 / 170,
    treble_near=99.0 / 170,
    treble_far=107.0 / 170,
    double_near=162.0 / 170,
    double_far=1.0,
)

# Small pixel-art board drawn at a fraction of a 300 px normalizing radius.
PIXEL_BOARD_RINGS = RingThresholds(
    bullseye=0.01,
    half_bullseye=0.02,
    treble_near=0.10,
    treble_far=0.11,
    double_near=0.17,
    double_far=0.18,
)

RING_PRESETS = {
    "regulation": REGULATION_RINGS,
    "pixel": PIXEL_BOARD_RINGS,
}


@dataclass(frozen=True)
class Section:
    angle_start: float  # inclusive
    angle_end: float  # exclusive
    base_score: int

    def contains(self, angle: float) -> bool:
        return self.angle_start <= angle < self.angle_end

    def __str__(self):
        return f"Start: {self.angle_start}, End: {self.angle_end}"


@dataclass(frozen=True)
class BoardLayout:
    center: pygame.Vector2
    radius: float
    rings: RingThresholds
    sections: Tuple[Section, ...]
    calibration_offset: float = CALIBRATION_OFFSET

    def __post_init__(self):
        if self.radius <= 0:
            raise BoardLayoutError(f"board radius must be positive, got {self.radius}")
        # Keep a private copy; Vector2 is mutable and the layout is shared.
        object.__setattr__(self, "center", pygame.Vector2(self.center))
        object.__setattr__(self, "sections", tuple(self.sections))
        _check_partition(self.sections)
        _check_scores(self.sections)

    def section_for(self, angle: float) -> Optional[Section]:
        for section in self.sections:
            if section.contains(angle):
                return section
        return None

    def ring_radius(self, threshold: float) -> float:
        """World-space radius of a normalized ring threshold."""
        return threshold * self.radius


def _check_partition(sections: Tuple[Section, ...]):
    if len(sections) != SECTION_COUNT:
        raise BoardLayoutError(f"expected {SECTION_COUNT} sections, got {len(sections)}")
    if sections[0].angle_start != 0.0:
        raise BoardLayoutError("first section must start at 0 degrees")
    for prev, cur in zip(sections, sections[1:]):
        if cur.angle_start != prev.angle_end:
            raise BoardLayoutError(f"sections not contiguous at [{prev}] -> [{cur}]")
    for s in sections:
        if s.angle_end <= s.angle_start:
            raise BoardLayoutError(f"empty or reversed section [{s}]")
    if sections[-1].angle_end != 360.0:
        raise BoardLayoutError("last section must end at 360 degrees")


def _check_scores(sections: Tuple[Section, ...]):
    scores = sorted(s.base_score for s in sections)
    if scores != list(range(1, SECTION_COUNT + 1)):
        raise BoardLayoutError(f"each score 1..{SECTION_COUNT} must appear exactly once")


def build_board_layout(
    center=BOARD_CENTER,
    radius: float = BOARD_RADIUS,
    rings: RingThresholds = REGULATION_RINGS,
    score_order: Iterable[int] = SCORE_ORDER,
    calibration_offset: float = CALIBRATION_OFFSET,
) -> BoardLayout:
    scores = tuple(score_order)
    if len(scores) != SECTION_COUNT:
        raise BoardLayoutError(f"score order needs {SECTION_COUNT} entries, got {len(scores)}")
    sections = tuple(
        Section(
            angle_start=num * SECTION_ARC,
            angle_end=num * SECTION_ARC + SECTION_ARC,
            base_score=scores[num],
        )
        for num in range(SECTION_COUNT)
    )
    return BoardLayout(
        center=pygame.Vector2(center),
        radius=float(radius),
        rings=rings,
        sections=sections,
        calibration_offset=float(calibration_offset),
    )
