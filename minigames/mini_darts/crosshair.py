# minigames/mini_darts/crosshair.py
import math
import random

import pygame

from .board import BoardLayout
from .geometry import resolve

MOTION_STEP = 5.0  # max px a single motion event may move the crosshair
SHAKE_FOCUSED = 0.2
SHAKE_UNFOCUSED = 1.5


class Crosshair:
    """
    Aim point in world space (y-up, origin at window center).
    - Mouse motion nudges it instead of teleporting it.
    - It shakes every frame; holding focus narrows the shake.
    - Live polar readouts are kept for the debug HUD.
    """

    def __init__(self, pos=(0.0, 0.0), motion_step=MOTION_STEP,
                 shake_focused=SHAKE_FOCUSED, shake_unfocused=SHAKE_UNFOCUSED):
        self.pos = pygame.Vector2(pos)
        self.motion_step = float(motion_step)
        self.shake_focused = float(shake_focused)
        self.shake_unfocused = float(shake_unfocused)
        self.focused = False
        self.on_screen = True
        self.distance = 0.0
        self.n_dist = 0.0
        self.degrees = 0.0

    def move_by(self, rel):
        dx, dy = rel
        # screen y grows downward
        self.pos.x += math.fmod(dx, self.motion_step)
        self.pos.y += -math.fmod(dy, self.motion_step)

    def snap_to(self, world_pos):
        self.pos.update(world_pos)

    def shake(self, rng: random.Random):
        amp = self.shake_focused if self.focused else self.shake_unfocused
        self.pos.x += rng.uniform(-amp, amp)
        self.pos.y += rng.uniform(-amp, amp)

    def clamp(self, size):
        half_w = size[0] / 2
        half_h = size[1] / 2
        self.pos.x = max(-half_w, min(half_w, self.pos.x))
        self.pos.y = max(-half_h, min(half_h, self.pos.y))

    def mouse_left(self):
        self.on_screen = False

    def mouse_entered(self, world_pos):
        """Re-sync with the cursor the first time it is seen back in the window."""
        if not self.on_screen:
            self.snap_to(world_pos)
            self.on_screen = True

    def track(self, layout: BoardLayout):
        self.distance = self.pos.distance_to(layout.center)
        self.n_dist, self.degrees = resolve(self.pos, layout)

    def landing_point(self) -> pygame.Vector2:
        return pygame.Vector2(self.pos)
