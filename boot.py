import pygame
from game_context import GameContext
from scene_manager import SceneManager
from minigames.mini_darts.game import CONFIG, TITLE, launch


def on_leg_finished(context):
    context.apply_result()
    result = context.last_result or {}
    details = result.get("details") or {}
    print(f"[Boot] Finished {result.get('minigame')} → {result.get('outcome')} {details.get('totals')}")
    print(f"[Boot] {context!r}")


def main():
    pygame.init()
    context = GameContext()
    manager = SceneManager(
        lambda m: launch(m, context, on_leg_finished),
        size=CONFIG["WINDOW_SIZE"],
        caption=TITLE,
    )
    manager.run()


if __name__ == "__main__":
    main()
