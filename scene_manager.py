import pygame, sys, traceback

WINDOW_SIZE = (960, 720)
CAPTION = "Mini Darts"
FPS = 60


class Scene:
    """Base scene with no-op event/update/draw hooks."""

    def __init__(self, manager):
        self.manager = manager

    def handle_event(self, event):
        pass

    def update(self, dt):
        pass

    def draw(self):
        pass


class SceneManager:
    """Owns the window, the scene stack and the main loop."""

    def __init__(self, first_scene_factory, size=WINDOW_SIZE, caption=CAPTION, fps=FPS):
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        self.size = self.screen.get_size()
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True
        self.scenes = []

        # Scene classes and launch(manager) style factories are both fine
        if callable(first_scene_factory):
            first_scene = first_scene_factory(self)
            self.scenes.append(first_scene)
        else:
            raise ValueError("First scene must be a class or factory taking the manager.")

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

    def switch(self, scene):
        if self.scenes:
            self.scenes.pop()
        self.push(scene)

    def run(self):
        """Main loop."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            if not self.scenes:
                break
            current = self.scenes[-1]

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                try:
                    current.handle_event(event)
                except Exception:
                    traceback.print_exc()
                if current is not self.current:
                    # scene stack changed mid-batch; let the new top see the next frame
                    break

            if not self.scenes:
                break
            current = self.scenes[-1]
            try:
                current.update(dt)
                current.draw()
            except Exception:
                traceback.print_exc()

            pygame.display.flip()

        pygame.quit()
        sys.exit()
