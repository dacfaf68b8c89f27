"""Window, event handling and the fixed-rate main loop."""

from __future__ import annotations

import time

import pygame

from minibill.game import Game
from minibill.scene import Scene, screen_to_world_x, screen_to_world_y

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Mini Billiard [Pre-Alpha]"

MIN_FPS = 5
MAX_FPS = 200

_SHOT_BUTTONS = (1, 3)


class Engine:
    """Owns the scene and the game, feeds them input and time, and draws."""

    def __init__(self) -> None:
        self.target_fps = MAX_FPS
        self.scene = Scene()
        self.game = Game(self.scene, set_target_fps=self.set_target_fps)
        self._last_tick = 0.0

    def set_target_fps(self, fps: int) -> None:
        """Set the frame rate, clamped to [MIN_FPS, MAX_FPS]."""
        self.target_fps = max(MIN_FPS, min(fps, MAX_FPS))

    @staticmethod
    def _to_world(pos: tuple[int, int]) -> tuple[float, float]:
        px, py = pos
        return (
            screen_to_world_x(px / WINDOW_WIDTH),
            screen_to_world_y(1.0 - py / WINDOW_HEIGHT),
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event; return False when the program should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button in _SHOT_BUTTONS:
            self.game.mouse_button_pressed(*self._to_world(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button in _SHOT_BUTTONS:
            self.game.mouse_button_released(*self._to_world(event.pos))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.game.deinit()
                self.game.init()
        return True

    def _process_events(self) -> bool:
        return all(self.handle_event(event) for event in pygame.event.get())

    def _wait_frame(self) -> float:
        """Wait until a frame's worth of time has passed and return it."""
        while True:
            now = time.perf_counter()
            elapsed = now - self._last_tick
            frame = 1.0 / self.target_fps
            if elapsed >= frame:
                self._last_tick = now
                return elapsed
            time.sleep(frame - elapsed)

    def run(self) -> None:
        """Open the window and run the game until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            self._last_tick = time.perf_counter()
            self.game.init()
            try:
                while self._process_events():
                    self.game.update(self._wait_frame())
                    self.scene.draw(screen)
                    pygame.display.flip()
            finally:
                self.game.deinit()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    Engine().run()
    return 0