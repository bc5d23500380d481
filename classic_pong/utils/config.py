"""
Classic Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key codes used by the left player for a given keyboard layout"""

    name: str
    up: int
    down: int
    display_names: dict[str, str]


# Keyboard layouts definition (left player only, the right player uses arrows)
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        up=pygame.K_w,
        down=pygame.K_s,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        up=pygame.K_z,  # Z instead of W
        down=pygame.K_s,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        up=pygame.K_w,
        down=pygame.K_s,
        display_names={"up": "W", "down": "S"},
    ),
}

ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Ball
    BALL_SPEED: float = Field(default=5.0, gt=0, description="Ball speed in pixels per tick")
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=30.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=50.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=10.0, gt=0, description="Paddle speed per tick")
    PADDLE_MARGIN: float = Field(default=20.0, ge=0, description="Paddle margin from edge")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    FONT_SIZE: int = Field(default=48, gt=0, description="Score font size")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for both paddles"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH)
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width} pixels")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be greater than {self.PADDLE_HEIGHT} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "classic_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "classic_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _apply_values(self, **GameConfig().model_dump())


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str) -> None:
    """Load configuration from file into global game_config"""
    loaded_config = GameConfig.load_from_file(filepath)
    _apply_values(game_config, **loaded_config.model_dump())
    logger.info("Loaded configuration from %s", filepath)


def _apply_values(obj: GameConfig, **kwargs: Any) -> None:
    """Validate the merged values as a whole, then set them all at once.

    Nothing is changed when validation fails.
    """
    validated = type(obj).model_validate({**obj.model_dump(), **kwargs})
    obj.__dict__.update(validated.__dict__)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = {name: getattr(game_config, name) for name in kwargs}
    _apply_values(game_config, **kwargs)
    try:
        yield
    finally:
        _apply_values(game_config, **old_values)
