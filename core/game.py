# core/game.py
import logging
from typing import Tuple

import pygame

from core.settings import (
    BG_COLOR,
    DEFAULT_PRESET,
    FPS,
    HEIGHT,
    MAX_TICKS_PER_FRAME,
    TICK_RATE,
    TITLE,
    WIDTH,
)
from core.input import Button, Input
from core.camera import Camera
from world.level import Level
from ui.hud import HUD

logger = logging.getLogger(__name__)


def ticks_for_frame(
    accumulator: float,
    frame_time: float,
    tick: float,
    max_ticks: int = MAX_TICKS_PER_FRAME,
) -> Tuple[int, float]:
    """
    Fixed-step bookkeeping: add the frame's elapsed time and return how many
    whole ticks to run plus the leftover time. Leftover is carried, never
    simulated as a partial tick. Backlog beyond max_ticks is dropped.
    """
    accumulator = min(accumulator + frame_time, tick * max_ticks)
    ticks = 0
    while accumulator >= tick:
        accumulator -= tick
        ticks += 1
    return ticks, accumulator


class Game:
    def __init__(self, preset: str = DEFAULT_PRESET, width: int = WIDTH, height: int = HEIGHT,
                 tick_rate: int = TICK_RATE, debug: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")

        self.width = width
        self.height = height
        self.tick = 1.0 / float(tick_rate)
        self.debug = debug

        self.input = Input()
        self.camera = Camera.for_viewport(width, height)
        self.level = Level(preset)

        self.screen = None
        self.clock = None
        self.hud = None
        self.running = False
        self._accumulator = 0.0

    def step(self):
        """One fixed tick: physics, then camera, then close the input edge window."""
        self.level.update(self.input)

        player = self.level.player
        vertical, pan = player.camera_modes()
        self.camera.vertical_behaviour = vertical
        self.camera.displacement_behaviour = pan
        self.camera.update(player.position)

        if self.input.pressed(Button.DEBUG):
            self.debug = not self.debug

        self.input.post_update()

    def run(self):
        pygame.init()
        pygame.display.set_caption(TITLE)
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.hud = HUD()
        self._init_joysticks()
        self.running = True
        logger.info("starting %dx%d at %.0f ticks/s", self.width, self.height, 1.0 / self.tick)

        try:
            while self.running:
                frame_time = self.clock.tick(FPS) / 1000.0

                self._handle_events()

                ticks, self._accumulator = ticks_for_frame(self._accumulator, frame_time, self.tick)
                for _ in range(ticks):
                    self.step()

                self.screen.fill(BG_COLOR)
                self.level.draw(self.screen, self.camera, debug=self.debug)
                if self.debug:
                    self.hud.draw(self.screen, self.level, self.camera)
                pygame.display.flip()
        finally:
            pygame.quit()
            logger.info("stopped")

    def _init_joysticks(self):
        pygame.joystick.init()
        self._joysticks = [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]
        for joy in self._joysticks:
            logger.info("gamepad connected: %s", joy.get_name())

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            self.input.handle_event(event)
