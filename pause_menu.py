import pygame
from scene_manager import Scene

FADE_BG = (0, 0, 0, 180)  # translucent overlay
OPTION_Y0 = 180 + 28 * 4 + 40
OPTION_STEP = 34


class PauseMenuScene(Scene):
    def __init__(self, manager, context, parent_scene):
        super().__init__(manager)
        self.context = context
        self.parent = parent_scene  # the darts scene underneath
        self.screen = manager.screen
        self.font_big = pygame.font.SysFont(None, 60)
        self.font_small = pygame.font.SysFont(None, 28)
        self.allow_forfeit = callable(getattr(parent_scene, "forfeit_from_pause", None))
        self.options = ["Resume"]
        if self.allow_forfeit:
            self.options.append("Forfeit Leg")
        self.options.append("Quit")
        self.sel = 0

    # --- Input ---
    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_p):
                self._resume()
            elif event.key in (pygame.K_UP, pygame.K_w):
                self.sel = (self.sel - 1) % len(self.options)
            elif event.key in (pygame.K_DOWN, pygame.K_s):
                self.sel = (self.sel + 1) % len(self.options)
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self._activate_option()
        elif event.type == pygame.MOUSEMOTION:
            hit = self._option_at(event.pos)
            if hit is not None:
                self.sel = hit
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            hit = self._option_at(event.pos)
            if hit is not None:
                self.sel = hit
                self._activate_option()

    def _option_at(self, pos):
        w = self.screen.get_width()
        for i in range(len(self.options)):
            opt_y = OPTION_Y0 + OPTION_STEP * i
            if pygame.Rect(w // 2 - 100, opt_y - 5, 200, 30).collidepoint(pos):
                return i
        return None

    # --- Actions ---
    def _activate_option(self):
        choice = self.options[self.sel]
        if choice == "Resume":
            self._resume()
        elif choice == "Forfeit Leg":
            self._forfeit_leg()
        elif choice == "Quit":
            print("[PauseMenu] Player quit the session.")
            self.manager.running = False

    def _resume(self):
        self.manager.pop()
        hook = getattr(self.parent, "resume_from_pause", None)
        if callable(hook):
            hook()

    def _forfeit_leg(self):
        if not self.allow_forfeit:
            print("[PauseMenu] Forfeit requested but parent scene has no handler.")
            return
        # close pause overlay first
        self.manager.pop()
        self.parent.forfeit_from_pause()

    # --- No updates while paused ---
    def update(self, dt):
        pass

    # --- Draw overlay ---
    def draw(self):
        self.parent.draw()  # draw the paused board underneath
        w = self.screen.get_width()
        fade = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        fade.fill(FADE_BG)
        self.screen.blit(fade, (0, 0))

        title = self.font_big.render("Paused", True, (255, 255, 200))
        self.screen.blit(title, title.get_rect(center=(w // 2, 100)))

        # Session block
        stats = self.context.stats
        lines = [
            f"Legs: {stats['legs']}",
            f"Wins: {stats['wins']}   Losses: {stats['losses']}",
            f"Darts thrown: {stats['darts_thrown']}",
            f"Playtime: {int(stats['total_time'])} s",
        ]
        y = 180
        for text in lines:
            t = self.font_small.render(text, True, (230, 230, 230))
            self.screen.blit(t, t.get_rect(midtop=(w // 2, y)))
            y += 28

        # Menu options
        y = OPTION_Y0
        for i, txt in enumerate(self.options):
            color = (255, 235, 140) if i == self.sel else (200, 200, 200)
            surf = self.font_small.render(txt, True, color)
            self.screen.blit(surf, surf.get_rect(midtop=(w // 2, y)))
            y += OPTION_STEP
