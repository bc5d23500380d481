"""
Tests for keyboard polling
"""

from collections import defaultdict

import pygame
import pytest

from classic_pong.core.entities import InputSnapshot
from classic_pong.gui.keyboard import InputManager


def held(*keys: int) -> defaultdict[int, bool]:
    pressed: defaultdict[int, bool] = defaultdict(bool)
    for key in keys:
        pressed[key] = True
    return pressed


class TestInputManager:
    """Test key bindings"""

    def test_no_keys(self) -> None:
        manager = InputManager("qwerty")
        assert manager.snapshot_from_keys(held()) == InputSnapshot()

    def test_qwerty_bindings(self) -> None:
        manager = InputManager("qwerty")
        snapshot = manager.snapshot_from_keys(held(pygame.K_w, pygame.K_DOWN))
        assert snapshot == InputSnapshot(p1_up=True, p2_down=True)

    def test_azerty_uses_z(self) -> None:
        manager = InputManager("azerty")
        assert manager.snapshot_from_keys(held(pygame.K_z)).p1_up
        assert not manager.snapshot_from_keys(held(pygame.K_w)).p1_up

    def test_all_keys_at_once(self) -> None:
        manager = InputManager("qwerty")
        snapshot = manager.snapshot_from_keys(
            held(pygame.K_w, pygame.K_s, pygame.K_UP, pygame.K_DOWN)
        )
        assert snapshot == InputSnapshot(True, True, True, True)

    def test_unknown_layout(self) -> None:
        with pytest.raises(ValueError):
            InputManager("dvorak")

    def test_control_info(self) -> None:
        info = InputManager("azerty").get_control_info()
        assert info["p1_up"] == "Z"
        assert info["p1_down"] == "S"


class TestEvents:
    """Test window events"""

    def test_quit_event(self) -> None:
        assert InputManager("qwerty").handle_event(pygame.event.Event(pygame.QUIT)) == "quit"

    def test_escape_quits(self) -> None:
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        assert InputManager("qwerty").handle_event(event) == "quit"

    def test_other_keys_ignored(self) -> None:
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
        assert InputManager("qwerty").handle_event(event) is None
