"""
Keyboard polling for Classic Pong
"""

from collections.abc import Mapping, Sequence

import pygame

from classic_pong.core.entities import InputSnapshot
from classic_pong.utils.config import ARROW_KEYS, KEYBOARD_LAYOUTS, game_config


class InputManager:
    """Turns the held keys into an ``InputSnapshot`` once per tick"""

    def __init__(self, layout_name: str | None = None) -> None:
        if layout_name is None:
            layout = game_config.get_keyboard_layout()
        elif layout_name in KEYBOARD_LAYOUTS:
            layout = KEYBOARD_LAYOUTS[layout_name]
        else:
            raise ValueError(f"Unknown keyboard layout: {layout_name}")

        # Player 1 (left) uses the layout letters, player 2 (right) the arrows
        self.key_mapping = {
            "p1_up": layout.up,
            "p1_down": layout.down,
            "p2_up": ARROW_KEYS["up"],
            "p2_down": ARROW_KEYS["down"],
        }
        self.display_names = {
            "p1_up": layout.display_names["up"],
            "p1_down": layout.display_names["down"],
            "p2_up": "↑",
            "p2_down": "↓",
        }

    def snapshot_from_keys(self, keys_pressed: Sequence[bool] | Mapping[int, bool]) -> InputSnapshot:
        """Builds a snapshot from a key-state sequence indexed by key code"""
        return InputSnapshot(
            **{name: bool(keys_pressed[code]) for name, code in self.key_mapping.items()}
        )

    def poll(self) -> InputSnapshot:
        """Samples the current keyboard state (level triggered)"""
        return self.snapshot_from_keys(pygame.key.get_pressed())

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            "quit" when the window is closed or Escape is pressed, None otherwise
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "quit"
        return None

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls"""
        return self.display_names.copy()
