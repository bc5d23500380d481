"""
Main game application with PyGame GUI
"""

import logging
import sys

import numpy as np
import pygame

from classic_pong.core.entities import SimulationState
from classic_pong.core.physics import PhysicsEngine
from classic_pong.gui.keyboard import InputManager
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Frame loop: poll input, update the simulation, draw, wait for the next frame"""

    def __init__(self, seed: int | None = None, layout_name: str | None = None) -> None:
        self.engine = PhysicsEngine(
            game_config.FIELD_WIDTH, game_config.FIELD_HEIGHT, np.random.default_rng(seed)
        )
        self.state: SimulationState = self.engine.init_state()
        self.input_manager = InputManager(layout_name)
        self.renderer = PygameRenderer(game_config.FIELD_WIDTH, game_config.FIELD_HEIGHT)
        self.running = True

        controls = self.input_manager.get_control_info()
        logger.info(
            "Controls: left %s/%s, right %s/%s, ESC to quit",
            controls["p1_up"],
            controls["p1_down"],
            controls["p2_up"],
            controls["p2_down"],
        )

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if self.input_manager.handle_event(event) == "quit":
                self.running = False

    def step(self) -> None:
        """Runs one frame"""
        snapshot = self.input_manager.poll()
        self.engine.update(self.state, snapshot)

        self.renderer.clear_screen()
        self.engine.render(self.state, self.renderer)
        self.renderer.present()

    def run(self) -> None:
        """Main loop, runs until the window is closed"""
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.step()
            self.renderer.tick(game_config.FPS)

        final = self.engine.get_game_state(self.state)
        logger.info(
            "Game closed after %d ticks, final score %d - %d",
            final["ticks"],
            *final["score"],
        )
        logger.debug("Final state: %s", final)


def main(seed: int | None = None, layout_name: str | None = None) -> int:
    """Main entry point, returns the process exit status"""
    try:
        app = PongApp(seed=seed, layout_name=layout_name)
    except pygame.error as e:
        logger.error("Could not initialize the display: %s", e)
        pygame.quit()
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    finally:
        app.renderer.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())
