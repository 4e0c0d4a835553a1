# minigames/mini_darts/graphics.py
import pygame
from types import SimpleNamespace

from .board import BoardLayout
from .geometry import point_at, world_to_screen


class VectorRenderer:
    """
    Vector-only renderer for Mini Darts.
    - Board wedges, bands and bulls are derived from the BoardLayout, so what
      is drawn is exactly what the scorer uses.
    - Darts are pinned where they landed, colored per side.
    - Debug HUD in the top-right corner.
    """
    ARC_STEPS = 6  # polygon points per wedge edge

    def __init__(self, screen, config, layout: BoardLayout):
        self.screen = screen
        self.cfg = config
        self.layout = layout
        self.size = self.screen.get_size()

        pygame.font.init()
        self.font = pygame.font.SysFont("consolas,dejavusansmono,menlo", 16)
        self.font_small = pygame.font.SysFont("consolas,dejavusansmono,menlo", 14)
        self.big = pygame.font.SysFont("consolas,dejavusansmono,menlo", 36, bold=True)

        self.COL = SimpleNamespace(
            bg=self.cfg.get("BG_COLOR", (18, 20, 29)),
            frame=(52, 36, 24),
            dark=(28, 28, 30),
            light=(236, 222, 186),
            red=(204, 46, 46),
            green=(36, 140, 74),
            wire=(170, 170, 176),
            number=(240, 240, 245),
            hud=(230, 230, 238),
            dim=(155, 155, 168),
            crosshair=(230, 230, 238),
            crosshair_focused=(255, 216, 77),
            player=(102, 194, 255),
            opponent=(255, 122, 122),
        )

    # ---------------------
    # Public draw functions
    # ---------------------

    def draw_background(self):
        self.screen.fill(self.COL.bg)

    def draw_board(self):
        rings = self.layout.rings
        center = self._screen(self.layout.center)
        frame_r = int(self.layout.ring_radius(rings.double_far) * 1.18)
        pygame.draw.circle(self.screen, self.COL.frame, center, frame_r)

        bands = (
            (rings.half_bullseye, rings.treble_near, False),
            (rings.treble_near, rings.treble_far, True),
            (rings.treble_far, rings.double_near, False),
            (rings.double_near, rings.double_far, True),
        )
        for i, section in enumerate(self.layout.sections):
            single = self.COL.dark if i % 2 == 0 else self.COL.light
            scoring = self.COL.red if i % 2 == 0 else self.COL.green
            for r0, r1, is_band in bands:
                poly = self._wedge(r0, r1, section.angle_start, section.angle_end)
                pygame.draw.polygon(self.screen, scoring if is_band else single, poly)

        pygame.draw.circle(self.screen, self.COL.green, center,
                           max(1, int(self.layout.ring_radius(rings.half_bullseye))))
        pygame.draw.circle(self.screen, self.COL.red, center,
                           max(1, int(self.layout.ring_radius(rings.bullseye))))

        for section in self.layout.sections:
            mid = (section.angle_start + section.angle_end) / 2
            label = self.font.render(str(section.base_score), True, self.COL.number)
            pos = self._screen(point_at(self.layout, rings.double_far * 1.09, mid))
            self.screen.blit(label, label.get_rect(center=pos))

    def draw_darts(self, darts):
        """darts: iterable of (world_pos, side) pairs."""
        for pos, side in darts:
            x, y = self._screen(pos)
            color = self.COL.player if side == "player" else self.COL.opponent
            pygame.draw.line(self.screen, (20, 20, 20), (x, y), (x + 7, y - 7), 3)
            pygame.draw.line(self.screen, color, (x, y), (x + 7, y - 7), 2)
            pygame.draw.circle(self.screen, color, (x, y), 2)

    def draw_crosshair(self, pos, focused: bool):
        x, y = self._screen(pos)
        color = self.COL.crosshair_focused if focused else self.COL.crosshair
        r = 6 if focused else 10
        pygame.draw.circle(self.screen, color, (x, y), r, 1)
        pygame.draw.line(self.screen, color, (x - 12, y), (x + 12, y), 1)
        pygame.draw.line(self.screen, color, (x, y - 12), (x, y + 12), 1)

    def draw_hud(self, view):
        """
        view: object with player, opponent, distance, n_dist, degrees,
        darts_left, turn and last_hit (str or None).
        """
        lines = [
            f"Player:   {view.player:>8}",
            f"Opponent: {view.opponent:>8}",
            f"Distance: {view.distance:>8.2f}",
            f"n_dist:   {view.n_dist:>8.2f}",
            f"Degrees:  {view.degrees:>8.2f}",
            f"{view.turn.title()} darts: {view.darts_left:>3}",
        ]
        x = self.size[0] - 12
        y = 10
        for i, line in enumerate(lines):
            color = self.COL.hud if i < 2 else self.COL.dim
            self._text(line, x, y, color, right=True)
            y += 20
        if view.last_hit:
            surf = self.big.render(view.last_hit, True, self.COL.hud)
            self.screen.blit(surf, surf.get_rect(topleft=(16, 12)))
        hint = "SPACE steady aim  •  click to throw  •  ESC pause"
        self._text(hint, x, self.size[1] - 24, self.COL.dim, right=True, small=True)

    # ---------------------
    # Helpers
    # ---------------------

    def _screen(self, world_pos):
        return world_to_screen(world_pos, self.size)

    def _wedge(self, r0, r1, a0, a1):
        outer = []
        inner = []
        for k in range(self.ARC_STEPS + 1):
            a = a0 + (a1 - a0) * k / self.ARC_STEPS
            outer.append(self._screen(point_at(self.layout, r1, a)))
            inner.append(self._screen(point_at(self.layout, r0, a)))
        return outer + inner[::-1]

    def _text(self, s, x, y, color, right=False, small=False):
        font = self.font_small if small else self.font
        surf = font.render(s, True, color)
        rect = surf.get_rect()
        if right:
            rect.topright = (x, y)
        else:
            rect.topleft = (x, y)
        self.screen.blit(surf, rect)
