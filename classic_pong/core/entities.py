"""
Classic Pong game entities: ball, paddles, score
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from classic_pong.utils.config import game_config


class Side(Enum):
    """Side of the field a paddle defends, also used as a ball reset target"""

    LEFT = "left"
    RIGHT = "right"


class MoveDirection(Enum):
    """Vertical paddle movement (screen coordinates, y grows downwards)"""

    UP = -1
    DOWN = 1


@dataclass
class Vector2D:
    """Simple 2D vector for positions and directions"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


def _sample_component(rng: np.random.Generator) -> float:
    """Uniform sample in [-1.0, 1.0)"""
    return float(rng.uniform(-1.0, 1.0))


class Ball:
    """Game ball

    The direction is not normalized: both components are sampled
    independently, so the distance travelled per tick varies with the
    direction.
    """

    def __init__(self, x: float, y: float, dir_x: float, dir_y: float, speed: float | None = None):
        self.position = Vector2D(x, y)
        self.direction = Vector2D(dir_x, dir_y)
        self.speed = speed if speed is not None else game_config.BALL_SPEED
        self.radius = game_config.BALL_RADIUS

    @classmethod
    def spawn(cls, field_width: float, field_height: float, rng: np.random.Generator) -> "Ball":
        """Creates a ball at the center of the field with a random direction"""
        return cls(
            field_width / 2,
            field_height / 2,
            _sample_component(rng),
            _sample_component(rng),
        )

    def update(self) -> None:
        """Moves the ball by one tick"""
        self.position = self.position + self.direction * self.speed

    def reset(
        self, toward: Side, field_width: float, field_height: float, rng: np.random.Generator
    ) -> None:
        """Recenters the ball and sends it horizontally toward the given side"""
        self.position = Vector2D(field_width / 2, field_height / 2)
        self.direction = Vector2D(
            -1.0 if toward is Side.LEFT else 1.0,
            _sample_component(rng),
        )

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.direction.y = -self.direction.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.direction.x = -self.direction.x


class Paddle:
    """Player paddle, only moves vertically"""

    def __init__(
        self,
        x: float,
        y: float,
        side: Side,
        field_height: float,
        width: float | None = None,
        height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.speed = game_config.PADDLE_SPEED
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT

        self.min_y = 0.0
        self.max_y = field_height - self.height

    @classmethod
    def for_side(cls, side: Side, field_width: float, field_height: float) -> "Paddle":
        """Creates a vertically centered paddle inset from its goal edge"""
        width = game_config.PADDLE_WIDTH
        height = game_config.PADDLE_HEIGHT
        if side is Side.LEFT:
            x = game_config.PADDLE_MARGIN
        else:
            x = field_width - game_config.PADDLE_MARGIN - width
        return cls(x, field_height / 2 - height / 2, side, field_height, width, height)

    def move(self, direction: MoveDirection) -> None:
        """Moves the paddle one step, keeping it inside the field"""
        y = self.position.y + direction.value * self.speed
        self.position.y = max(self.min_y, min(self.max_y, y))

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class Score:
    """Cumulative points of both players"""

    left: int = 0
    right: int = 0

    def credit(self, side: Side) -> None:
        """Gives one point to the given side"""
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass(frozen=True)
class InputSnapshot:
    """Keys held during one tick, one flag per logical binding"""

    p1_up: bool = False
    p1_down: bool = False
    p2_up: bool = False
    p2_down: bool = False


@dataclass
class SimulationState:
    """Complete game state, owned by the caller and mutated in place by the engine"""

    ball: Ball
    left_paddle: Paddle
    right_paddle: Paddle
    score: Score
    field_width: float
    field_height: float
    ticks: int = 0

    def paddle(self, side: Side) -> Paddle:
        return self.left_paddle if side is Side.LEFT else self.right_paddle
