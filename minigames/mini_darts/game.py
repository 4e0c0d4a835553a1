# minigames/mini_darts/game.py
# Mini Darts: hot-seat 301 down, one leg.
# Aim with the mouse (the crosshair drifts and shakes), hold SPACE to steady it,
# click to throw. Three darts per turn; first side to reach zero wins.
import random
from types import SimpleNamespace
from typing import List, Optional, Tuple

import pygame

from game_context import GameContext
from scene_manager import Scene
from minigames.shared.end_banner import EndBanner

from .board import (
    BOARD_CENTER,
    BOARD_RADIUS,
    CALIBRATION_OFFSET,
    RING_PRESETS,
    SCORE_ORDER,
    build_board_layout,
)
from .crosshair import Crosshair
from .geometry import screen_to_world
from .graphics import VectorRenderer
from .match import DARTS_PER_TURN, PLAYER, START_SCORE, MatchState
from .scoring import ShotResult, resolve_shot

TITLE = "Mini Darts"
MINIGAME_ID = "mini_darts"

# =========================
# CONFIG (tunable constants)
# =========================
CONFIG = {
    "WINDOW_SIZE": (960, 720),
    "BG_COLOR": (18, 20, 29),
    # Board (world space, y-up, origin at window center)
    "BOARD_CENTER": BOARD_CENTER,
    "BOARD_RADIUS": BOARD_RADIUS,
    "RINGS": "regulation",  # key into board.RING_PRESETS
    "CALIBRATION_OFFSET": CALIBRATION_OFFSET,
    "SCORE_ORDER": SCORE_ORDER,
    # Rules
    "START_SCORE": START_SCORE,
    "DARTS_PER_TURN": DARTS_PER_TURN,
    # Aim feel
    "MOTION_STEP": 5.0,
    "SHAKE_FOCUSED": 0.2,
    "SHAKE_UNFOCUSED": 1.5,
    "FOCUS_KEY": pygame.K_SPACE,
    # Post result banner time
    "POST_RESULT_TIME": 3.5,
    "SEED": None,
}


def build_layout(config=CONFIG):
    return build_board_layout(
        center=config["BOARD_CENTER"],
        radius=config["BOARD_RADIUS"],
        rings=RING_PRESETS[config["RINGS"]],
        score_order=config["SCORE_ORDER"],
        calibration_offset=config["CALIBRATION_OFFSET"],
    )


class MiniDartsScene(Scene):
    def __init__(self, manager, context, callback, seed: Optional[int] = None, **kwargs):
        super().__init__(manager)
        self.context = context or GameContext()
        self.callback = callback
        self.flags = getattr(self.context, "flags", {}) if self.context else {}
        self.seed = seed if seed is not None else self.flags.get("seed", CONFIG["SEED"])
        self.rng = random.Random(self.seed)

        self.screen = manager.screen
        self.w, self.h = manager.size
        self.minigame_id = MINIGAME_ID

        self.layout = build_layout(CONFIG)
        self.match = MatchState.new(CONFIG["START_SCORE"], CONFIG["DARTS_PER_TURN"])
        self.crosshair = Crosshair(
            pos=self.layout.center,
            motion_step=CONFIG["MOTION_STEP"],
            shake_focused=CONFIG["SHAKE_FOCUSED"],
            shake_unfocused=CONFIG["SHAKE_UNFOCUSED"],
        )
        self.darts: List[Tuple[pygame.Vector2, str]] = []
        self._clear_darts_on_next_throw = False
        self.last_result: Optional[ShotResult] = None

        self.banner = EndBanner(
            duration=CONFIG["POST_RESULT_TIME"],
            titles={
                "win": "Player Wins!",
                "lose": "Opponent Wins!",
                "forfeit": "Leg Forfeited",
            },
        )
        self.pending_outcome: Optional[str] = None
        self._completed = False

        self.renderer = VectorRenderer(self.screen, CONFIG, self.layout)
        self.banner_font_big = self.renderer.big
        self.banner_font_small = self.renderer.font
        self._grab_mouse(True)

    # ---- engine hooks ----
    def handle_event(self, event):
        if self.pending_outcome:
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.banner.skip()
                self._finalize(self.pending_outcome)
            return

        if event.type == pygame.MOUSEMOTION:
            self.crosshair.move_by(event.rel)
        elif event.type == pygame.WINDOWLEAVE:
            self.crosshair.mouse_left()
        elif event.type == pygame.WINDOWENTER:
            self.crosshair.mouse_entered(screen_to_world(pygame.mouse.get_pos(), (self.w, self.h)))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._pause_game()
            elif event.key == CONFIG["FOCUS_KEY"]:
                self.crosshair.focused = True
        elif event.type == pygame.KEYUP and event.key == CONFIG["FOCUS_KEY"]:
            self.crosshair.focused = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.throw_dart()

    def update(self, dt):
        # normalize dt (runner might pass ms)
        if dt > 1.0:
            dt = dt / 1000.0
        self.context.add_playtime(dt)

        if self.pending_outcome:
            if self.banner.update(dt):
                self._finalize(self.pending_outcome)
            return

        self.crosshair.shake(self.rng)
        self.crosshair.clamp((self.w, self.h))
        self.crosshair.track(self.layout)

    def draw(self):
        self.renderer.draw_background()
        self.renderer.draw_board()
        self.renderer.draw_darts(self.darts)
        if not self.pending_outcome:
            self.renderer.draw_crosshair(self.crosshair.pos, self.crosshair.focused)
        self.renderer.draw_hud(self._hud_view())
        if self.pending_outcome:
            self.banner.draw(self.screen, self.banner_font_big, self.banner_font_small, (self.w, self.h))

    # ---- gameplay ----
    def throw_dart(self) -> Optional[ShotResult]:
        if self.match.is_over:
            return None
        if self._clear_darts_on_next_throw:
            self.darts.clear()
            self._clear_darts_on_next_throw = False

        point = self.crosshair.landing_point()
        result = resolve_shot(point, self.layout)
        throw = self.match.record_shot(result)
        self.darts.append((point, throw.side))
        self.last_result = result

        if result.outcome.kind == "miss":
            print(f"[MiniDarts] {throw.side} missed the board")
        else:
            print(f"[MiniDarts] Hit {result.outcome.label} worth {result.points} pts!")

        if self.match.is_over:
            self._end(self.match.winner)
        elif self.match.check_turn():
            self._clear_darts_on_next_throw = True
            print(f"[MiniDarts] {self.match.turn} to throw, {self.match.current_total} left")
        return result

    def _hud_view(self):
        return SimpleNamespace(
            player=self.match.totals["player"],
            opponent=self.match.totals["opponent"],
            distance=round(self.crosshair.distance, 2),
            n_dist=self.crosshair.n_dist,
            degrees=round(self.crosshair.degrees, 2),
            darts_left=self.match.darts_left,
            turn=self.match.turn,
            last_hit=self._last_hit_text(),
        )

    def _last_hit_text(self):
        if not self.last_result:
            return None
        outcome = self.last_result.outcome
        if outcome.kind == "miss":
            return "MISS"
        return f"{outcome.label}  ({self.last_result.points})"

    # ---- flow ----
    def _end(self, winner: str):
        if self.pending_outcome:
            return
        outcome = "win" if winner == PLAYER else "lose"
        self.pending_outcome = outcome
        totals = self.match.totals
        self.banner.show(outcome, subtitle=f"Player {totals['player']}  •  Opponent {totals['opponent']}")

    def _pause_game(self):
        try:
            from pause_menu import PauseMenuScene
        except Exception as exc:
            print(f"[MiniDarts] Pause menu unavailable: {exc}")
            return
        self._grab_mouse(False)
        self.manager.push(PauseMenuScene(self.manager, self.context, self))

    def resume_from_pause(self):
        self._grab_mouse(True)

    def forfeit_from_pause(self):
        if self.pending_outcome:
            self._finalize(self.pending_outcome)
            return
        self.pending_outcome = "forfeit"
        self.banner.show("forfeit", subtitle=f"{self.match.turn.title()} walked away")

    def _finalize(self, outcome: str):
        if self._completed:
            return
        self._completed = True
        self.pending_outcome = None
        self._grab_mouse(False)
        self.context.last_result = {
            "minigame": self.minigame_id,
            "outcome": outcome,
            "details": self.match.summary(),
        }
        if hasattr(self.manager, "pop"):
            try:
                self.manager.pop()
            except Exception as exc:
                print(f"[MiniDarts] Unable to pop scene: {exc}")
        if callable(self.callback):
            try:
                self.callback(self.context)
            except Exception as exc:
                print(f"[MiniDarts] Callback error: {exc}")

    def _grab_mouse(self, on: bool):
        if pygame.display.get_surface() is None:
            return
        pygame.mouse.set_visible(not on)
        pygame.event.set_grab(on)


def launch(manager, context, callback, **kwargs):
    return MiniDartsScene(manager, context, callback, **kwargs)
