import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from minigames.mini_darts.board import REGULATION_RINGS, build_board_layout


@pytest.fixture
def layout():
    """Board centered on the origin, 300 px radius, regulation rings, offset 459."""
    return build_board_layout(center=(0, 0), radius=300, rings=REGULATION_RINGS, calibration_offset=459.0)


@pytest.fixture
def screen():
    pygame.display.init()
    pygame.font.init()
    surface = pygame.display.set_mode((960, 720))
    yield surface
    pygame.display.quit()


class FakeManager:
    """Just enough of SceneManager for a scene to push/pop against."""

    def __init__(self, screen):
        self.screen = screen
        self.size = screen.get_size()
        self.scenes = []
        self.running = True

    @property
    def current(self):
        return self.scenes[-1] if self.scenes else None

    def push(self, scene):
        self.scenes.append(scene)

    def pop(self):
        if self.scenes:
            self.scenes.pop()
        if not self.scenes:
            self.running = False


@pytest.fixture
def manager(screen):
    return FakeManager(screen)
