from __future__ import annotations

import logging

import pygame

from . import config
from .controls import InputAdapter, direction_for_key
from .engine import GameEngine
from .prefs import PreferenceStore, SkinManager, ThemeManager
from .render import draw_state, forget_fonts, make_palette, window_size
from .scheduler import Scheduler
from .state import StepResult

logger = logging.getLogger(__name__)

START_MESSAGE = "Press an arrow to start"
PAUSED_MESSAGE = "Paused - SPACE to resume"
GAME_OVER_MESSAGE = "Game over! Arrow to restart"
SKIN_LOCKED_MESSAGE = "Can't change skin mid-game"

SKIN_KEYS = {
    pygame.K_1: "red",
    pygame.K_2: "blue",
    pygame.K_3: "green",
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class Session:
    """
    Everything the loop needs between frames: the engine plus the timer,
    the pending-input buffer, preferences and the status line.
    """

    def __init__(
        self,
        engine: GameEngine,
        store: PreferenceStore,
        inputs: InputAdapter | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.engine = engine
        self.store = store
        self.inputs = inputs if inputs is not None else InputAdapter()
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.themes = ThemeManager(store)
        self.skins = SkinManager(store)
        self.message = START_MESSAGE
        self._message_ttl_ms: int | None = None

    @property
    def best_score(self) -> int:
        return self.store.best_score()

    @property
    def paused(self) -> bool:
        return self.scheduler.paused

    def set_message(self, text: str, ttl_ms: int | None = None) -> None:
        """Show ``text``; with ``ttl_ms`` it gives way to the idle prompt afterwards."""
        self.message = text
        self._message_ttl_ms = ttl_ms

    def _expire_message(self, elapsed_ms: int) -> None:
        if self._message_ttl_ms is None:
            return
        self._message_ttl_ms -= elapsed_ms
        if self._message_ttl_ms <= 0:
            self.set_message("" if self.engine.running else START_MESSAGE)

    def handle_key(self, key: int) -> bool:
        """React to one key press; False means the player asked to quit."""
        if key in QUIT_KEYS:
            return False

        if key == pygame.K_SPACE:
            if self.engine.running:
                paused = self.scheduler.toggle_pause()
                self.set_message(PAUSED_MESSAGE if paused else "")
            return True

        if key == pygame.K_t:
            self.themes.toggle()
            return True

        if key in SKIN_KEYS:
            result = self.skins.apply_if_allowed(SKIN_KEYS[key], self.engine.running)
            if result.reason == "game_in_progress":
                self.set_message(SKIN_LOCKED_MESSAGE, config.MESSAGE_TIMEOUT_MS)
            return True

        direction = direction_for_key(key)
        if direction is None:
            return True

        if not self.engine.running:
            self.engine.reset()
            self.inputs.start_with(direction)
            self.set_message("")
            self.scheduler.start()
        else:
            self.inputs.push(direction)
        return True

    def tick(self) -> StepResult:
        self.inputs.drain_into(self.engine)
        result = self.engine.step()
        if result.died:
            self.scheduler.stop()
            self.inputs.clear()
            self.store.record_score(self.engine.score)
            logger.debug("Run over with score %d", self.engine.score)
            self.set_message(GAME_OVER_MESSAGE)
        return result

    def update(self, elapsed_ms: int) -> list[StepResult]:
        self._expire_message(elapsed_ms)
        results = []
        for _ in range(self.scheduler.advance(elapsed_ms, self.engine.tick_interval_ms)):
            results.append(self.tick())
            if not self.scheduler.active:
                break
        return results

    def draw(self, screen: pygame.Surface) -> None:
        palette = make_palette(self.themes.current, self.skins.current)
        draw_state(
            screen,
            self.engine.snapshot(),
            palette,
            paused=self.paused,
            message=self.message,
            best=self.best_score,
        )


def main(
    grid_size: int = config.GRID_SIZE,
    tick_interval_ms: int = config.TICK_INTERVAL_MS,
    prefs_path=None,
    rng=None,
) -> None:
    engine = GameEngine(grid_size, tick_interval_ms, rng=rng)
    session = Session(engine, PreferenceStore(prefs_path))

    pygame.init()
    screen = pygame.display.set_mode(window_size(engine.grid_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = session.handle_key(event.key) and running

        session.update(clock.get_time())
        session.draw(screen)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    forget_fonts()
    print("Game Over! Score:", engine.score)
