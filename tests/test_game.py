import pygame

from game_context import GameContext
from minigames.mini_darts.game import CONFIG, MiniDartsScene, build_layout, launch
from minigames.mini_darts.geometry import point_at, world_to_screen
from minigames.mini_darts.match import OPPONENT, PLAYER
from pause_menu import PauseMenuScene


def make_scene(manager, seed=1):
    finished = []
    scene = launch(manager, GameContext(), finished.append, seed=seed)
    manager.push(scene)
    return scene, finished


def aim(scene, n_dist, degrees):
    scene.crosshair.snap_to(point_at(scene.layout, n_dist, degrees))


def click():
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))


def test_layout_comes_from_config() -> None:
    layout = build_layout(CONFIG)
    assert (layout.center, layout.radius, layout.calibration_offset) == (pygame.Vector2(-25, 0), 300.0, 459.0)


def test_click_throws_a_dart_at_the_crosshair(manager) -> None:
    scene, _ = make_scene(manager)
    aim(scene, 0.6, 171.0)
    scene.handle_event(click())
    assert scene.last_result.outcome.label == "T19"
    assert (scene.match.totals[PLAYER], scene.match.darts_left) == (244, 2)
    assert len(scene.darts) == 1 and scene.darts[0][1] == PLAYER


def test_third_dart_hands_over_the_board(manager) -> None:
    scene, _ = make_scene(manager)
    for _ in range(3):
        aim(scene, 0.5, 9.0)
        scene.throw_dart()
    assert (scene.match.turn, scene.match.darts_left, scene.match.totals[PLAYER]) == (OPPONENT, 3, 241)
    # previous turn's darts stay visible until the next throw
    assert len(scene.darts) == 3
    aim(scene, 2.0, 9.0)
    scene.throw_dart()
    assert len(scene.darts) == 1 and scene.darts[0][1] == OPPONENT


def test_mouse_motion_moves_crosshair(manager) -> None:
    scene, _ = make_scene(manager)
    start = pygame.Vector2(scene.crosshair.pos)
    scene.handle_event(pygame.event.Event(pygame.MOUSEMOTION, rel=(3, -4), pos=(0, 0), buttons=(0, 0, 0)))
    assert scene.crosshair.pos == start + pygame.Vector2(3, 4)


def test_space_focuses_aim(manager) -> None:
    scene, _ = make_scene(manager)
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0, unicode=" "))
    assert scene.crosshair.focused is True
    scene.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE, mod=0))
    assert scene.crosshair.focused is False


def test_update_shakes_and_tracks(manager) -> None:
    scene, _ = make_scene(manager)
    aim(scene, 0.5, 9.0)
    before = pygame.Vector2(scene.crosshair.pos)
    scene.update(1 / 60)
    assert scene.crosshair.pos != before
    assert scene.crosshair.pos.distance_to(before) <= 1.5 * 2 ** 0.5
    assert 0.49 < scene.crosshair.n_dist < 0.51
    assert scene.context.stats["total_time"] > 0


def test_checkout_ends_the_leg(manager) -> None:
    scene, finished = make_scene(manager)
    scene.match.totals[PLAYER] = 50
    aim(scene, 0.0, 0.0)
    scene.throw_dart()
    assert scene.pending_outcome == "win"
    assert scene.throw_dart() is None

    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, mod=0, unicode="\r"))
    assert len(finished) == 1
    result = finished[0].last_result
    assert (result["minigame"], result["outcome"]) == ("mini_darts", "win")
    assert result["details"]["winner"] == PLAYER
    assert manager.scenes == []


def test_banner_timeout_finalizes(manager) -> None:
    scene, finished = make_scene(manager)
    scene.forfeit_from_pause()
    assert scene.pending_outcome == "forfeit"
    for _ in range(int(CONFIG["POST_RESULT_TIME"] / 0.5) + 2):
        scene.update(0.5)
    assert finished and finished[0].last_result["outcome"] == "forfeit"


def test_escape_opens_pause_menu(manager) -> None:
    scene, _ = make_scene(manager)
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode=""))
    assert isinstance(manager.current, PauseMenuScene)
    assert "Forfeit Leg" in manager.current.options


def test_draw_paints_the_board(manager) -> None:
    scene, _ = make_scene(manager)
    aim(scene, 0.5, 9.0)
    scene.throw_dart()
    scene.draw()
    size = manager.size
    bull = world_to_screen(scene.layout.center, size)
    assert tuple(manager.screen.get_at(bull))[:3] == scene.renderer.COL.red
    treble_20 = world_to_screen(point_at(scene.layout, 0.606, 9.0), size)
    assert tuple(manager.screen.get_at(treble_20))[:3] == scene.renderer.COL.red
    treble_5 = world_to_screen(point_at(scene.layout, 0.606, 27.0), size)
    assert tuple(manager.screen.get_at(treble_5))[:3] == scene.renderer.COL.green
