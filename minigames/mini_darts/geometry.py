# minigames/mini_darts/geometry.py
"""Landing point <-> board polar coordinates, plus screen/world conversion."""

from __future__ import annotations

from typing import Tuple

import pygame

from .board import BoardLayout


def wrap_degrees(angle: float) -> float:
    """Reduce any finite angle into [0, 360)."""
    angle = angle % 360.0
    # float modulo of a tiny negative value rounds up to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def resolve(landing_point, layout: BoardLayout) -> Tuple[float, float]:
    """
    Return (normalized_distance, angle_degrees) for a world-space point.

    The angle is taken from the vector pointing from the landing point to the
    board center, rotated by the layout's calibration offset. Distances past
    1.0 are kept as-is; they mean the dart left the board.
    """
    to_center = layout.center - pygame.Vector2(landing_point)
    distance, raw_degrees = to_center.as_polar()
    n_dist = distance / layout.radius
    return n_dist, wrap_degrees(raw_degrees + layout.calibration_offset)


def point_at(layout: BoardLayout, normalized_distance: float, angle_degrees: float) -> pygame.Vector2:
    """World-space point that resolves back to the given polar coordinates."""
    # the landing point sits opposite the point->center vector
    direction = angle_degrees - layout.calibration_offset + 180.0
    offset = pygame.Vector2(normalized_distance * layout.radius, 0).rotate(direction)
    return layout.center + offset


def screen_to_world(pos, size) -> pygame.Vector2:
    """pygame screen pixels (y-down, origin top-left) to world (y-up, origin at window center)."""
    w, h = size
    x, y = pos
    return pygame.Vector2(x - w / 2, h / 2 - y)


def world_to_screen(pos, size) -> Tuple[int, int]:
    w, h = size
    return int(round(pos[0] + w / 2)), int(round(h / 2 - pos[1]))
