"""Game-shot overlay shown when a leg ends, before the scene hands control back."""

from __future__ import annotations

import pygame

DEFAULT_TITLES = {
    "win": "Game Shot!",
    "lose": "Game Shot!",
    "forfeit": "Leg Abandoned",
    None: "Leg Over",
}


class EndBanner:
    def __init__(self, duration: float = 2.0, titles: dict | None = None):
        self.duration = duration
        self.titles = {**DEFAULT_TITLES, **(titles or {})}
        self.active = False
        self.timer = 0.0
        self.outcome = None
        self.title = ""
        self.subtitle = ""

    def show(self, outcome: str, title: str | None = None, subtitle: str | None = None):
        self.outcome = outcome
        self.title = title or self.titles.get(outcome, self.titles[None])
        self.subtitle = subtitle or ""
        self.timer = self.duration
        self.active = True

    def skip(self):
        if self.active:
            self.timer = 0.0

    @property
    def progress(self) -> float:
        """0.0 when shown, 1.0 once the countdown has run out."""
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, 1.0 - self.timer / self.duration))

    def update(self, dt: float) -> bool:
        """Tick the countdown; True exactly once, on the frame it expires."""
        if not self.active:
            return False
        self.timer -= dt
        if self.timer <= 0:
            self.active = False
            return True
        return False

    def draw(
        self,
        screen: pygame.Surface,
        font_big: pygame.font.Font,
        font_small: pygame.font.Font,
        size: tuple[int, int],
    ):
        if not self.active:
            return
        w, h = size
        dim = pygame.Surface(size, pygame.SRCALPHA)
        dim.fill((0, 0, 0, 170))
        screen.blit(dim, (0, 0))
        title = font_big.render(self.title, True, (255, 216, 77))
        screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 20)))
        if self.subtitle:
            sub = font_small.render(self.subtitle, True, (230, 240, 250))
            screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 18)))
        # countdown strip under the subtitle
        bar_w = 200
        x = w // 2 - bar_w // 2
        y = h // 2 + 44
        pygame.draw.rect(screen, (90, 90, 100), (x, y, bar_w, 4))
        pygame.draw.rect(screen, (230, 240, 250), (x, y, int(bar_w * (1.0 - self.progress)), 4))
