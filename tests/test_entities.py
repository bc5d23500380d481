"""
Tests for Classic Pong game entities
"""

import numpy as np
import pytest

from classic_pong.core.entities import (
    Ball,
    InputSnapshot,
    MoveDirection,
    Paddle,
    Score,
    Side,
    Vector2D,
)
from classic_pong.utils.config import game_config


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result.x == 4.0
        assert result.y == 6.0

    def test_scalar_multiplication(self) -> None:
        result = Vector2D(2.0, 3.0) * 2.5
        assert result.x == 5.0
        assert result.y == 7.5

    def test_copy_is_independent(self) -> None:
        v = Vector2D(1.0, 1.0)
        c = v.copy()
        c.x = 10.0
        assert v.x == 1.0


class TestBall:
    """Tests for Ball class"""

    def test_spawn_at_center_with_default_speed(self) -> None:
        """Ball spawns at field center with the configured speed"""
        ball = Ball.spawn(800, 600, np.random.default_rng(1))
        assert ball.position.to_tuple() == (400.0, 300.0)
        assert ball.speed == 5.0

    def test_spawn_direction_comes_from_rng(self) -> None:
        """Both direction components are drawn from the injected generator"""
        expected = np.random.default_rng(42)
        ball = Ball.spawn(800, 600, np.random.default_rng(42))
        assert ball.direction.x == float(expected.uniform(-1.0, 1.0))
        assert ball.direction.y == float(expected.uniform(-1.0, 1.0))

    @pytest.mark.parametrize("seed", range(20))
    def test_spawn_direction_range(self, seed: int) -> None:
        ball = Ball.spawn(800, 600, np.random.default_rng(seed))
        assert -1.0 <= ball.direction.x < 1.0
        assert -1.0 <= ball.direction.y < 1.0

    def test_update_position(self) -> None:
        """Position moves by direction * speed"""
        ball = Ball(100.0, 200.0, 0.5, -0.25, speed=5.0)
        ball.update()
        assert ball.position.x == 102.5
        assert ball.position.y == 198.75

    def test_update_is_not_clamped(self) -> None:
        """The ball may leave the field, only collisions correct it"""
        ball = Ball(2.0, 1.0, -1.0, -1.0, speed=5.0)
        ball.update()
        assert ball.position.to_tuple() == (-3.0, -4.0)

    def test_bounce_vertical(self) -> None:
        ball = Ball(0.0, 0.0, 0.3, 0.7)
        ball.bounce_vertical()
        assert ball.direction.x == 0.3
        assert ball.direction.y == -0.7

    def test_bounce_horizontal(self) -> None:
        ball = Ball(0.0, 0.0, 0.3, 0.7)
        ball.bounce_horizontal()
        assert ball.direction.x == -0.3
        assert ball.direction.y == 0.7

    @pytest.mark.parametrize("toward,expected_dir_x", [(Side.LEFT, -1.0), (Side.RIGHT, 1.0)])
    def test_reset(self, toward: Side, expected_dir_x: float) -> None:
        """Reset recenters and sets the horizontal direction from the side"""
        ball = Ball(12.0, 34.0, 0.2, 0.2)
        ball.reset(toward, 800, 600, np.random.default_rng(3))
        assert ball.position.to_tuple() == (400.0, 300.0)
        assert ball.direction.x == expected_dir_x
        assert -1.0 <= ball.direction.y < 1.0


class TestPaddle:
    """Tests for Paddle class"""

    def test_left_paddle_placement(self) -> None:
        paddle = Paddle.for_side(Side.LEFT, 800, 600)
        assert paddle.position.x == game_config.PADDLE_MARGIN == 20
        assert paddle.position.y == 275
        assert paddle.width == 30
        assert paddle.height == 50

    def test_right_paddle_placement(self) -> None:
        paddle = Paddle.for_side(Side.RIGHT, 800, 600)
        assert paddle.position.x == 750
        assert paddle.position.y == 275
        assert paddle.side is Side.RIGHT

    def test_move_up_and_down(self) -> None:
        """Up decreases y, down increases y"""
        paddle = Paddle.for_side(Side.LEFT, 800, 600)
        paddle.move(MoveDirection.UP)
        assert paddle.position.y == 265
        paddle.move(MoveDirection.DOWN)
        paddle.move(MoveDirection.DOWN)
        assert paddle.position.y == 285

    def test_move_keeps_x(self) -> None:
        paddle = Paddle.for_side(Side.RIGHT, 800, 600)
        paddle.move(MoveDirection.DOWN)
        assert paddle.position.x == 750

    def test_clamped_at_top(self) -> None:
        paddle = Paddle.for_side(Side.LEFT, 800, 600)
        for _ in range(100):
            paddle.move(MoveDirection.UP)
        assert paddle.position.y == 0.0

    def test_clamped_at_bottom(self) -> None:
        paddle = Paddle.for_side(Side.LEFT, 800, 600)
        for _ in range(100):
            paddle.move(MoveDirection.DOWN)
        assert paddle.position.y == 550.0

    def test_get_rect(self) -> None:
        paddle = Paddle.for_side(Side.LEFT, 800, 600)
        assert paddle.get_rect() == (20, 275, 30, 50)


class TestScore:
    """Tests for Score class"""

    def test_starts_at_zero(self) -> None:
        assert Score().to_tuple() == (0, 0)

    def test_credit(self) -> None:
        score = Score()
        score.credit(Side.LEFT)
        score.credit(Side.RIGHT)
        score.credit(Side.RIGHT)
        assert score.to_tuple() == (1, 2)


class TestInputSnapshot:
    """Tests for InputSnapshot class"""

    def test_defaults_to_no_keys(self) -> None:
        snapshot = InputSnapshot()
        assert not any((snapshot.p1_up, snapshot.p1_down, snapshot.p2_up, snapshot.p2_down))

    def test_is_immutable(self) -> None:
        snapshot = InputSnapshot(p1_up=True)
        with pytest.raises(AttributeError):
            snapshot.p1_up = False  # type: ignore[misc]
