"""
Physics system for Classic Pong
"""

import logging

import numpy as np

from classic_pong.core.collision import CollisionDetector
from classic_pong.core.entities import (
    Ball,
    InputSnapshot,
    MoveDirection,
    Paddle,
    Score,
    Side,
    SimulationState,
)
from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)

# The conceding side's opponent gets the point and the ball restarts toward it
_SCORING = {
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}


class PhysicsEngine:
    """Main physics engine

    Raises ValueError when the field cannot hold both paddles.

    The engine holds no game state of its own: every operation receives the
    ``SimulationState`` it works on. Randomness comes from the injected
    generator so that spawns and resets are reproducible.
    """

    def __init__(
        self,
        field_width: float | None = None,
        field_height: float | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.field_width = field_width if field_width is not None else game_config.FIELD_WIDTH
        self.field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT
        if self.field_height <= game_config.PADDLE_HEIGHT:
            raise ValueError(
                f"Field height {self.field_height} must be greater than the paddle height "
                f"{game_config.PADDLE_HEIGHT}"
            )
        min_width = 2 * (game_config.PADDLE_MARGIN + game_config.PADDLE_WIDTH)
        if self.field_width <= min_width:
            raise ValueError(f"Field width {self.field_width} must be greater than {min_width}")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.collision_detector = CollisionDetector(self.field_width, self.field_height)

    def init_state(self) -> SimulationState:
        """Creates a fresh game: centered ball, centered paddles, 0 - 0"""
        return SimulationState(
            ball=Ball.spawn(self.field_width, self.field_height, self.rng),
            left_paddle=Paddle.for_side(Side.LEFT, self.field_width, self.field_height),
            right_paddle=Paddle.for_side(Side.RIGHT, self.field_width, self.field_height),
            score=Score(),
            field_width=self.field_width,
            field_height=self.field_height,
        )

    def on_input(self, state: SimulationState, snapshot: InputSnapshot) -> None:
        """Moves the paddles whose keys are held"""
        if snapshot.p1_up:
            state.left_paddle.move(MoveDirection.UP)
        if snapshot.p1_down:
            state.left_paddle.move(MoveDirection.DOWN)
        if snapshot.p2_up:
            state.right_paddle.move(MoveDirection.UP)
        if snapshot.p2_down:
            state.right_paddle.move(MoveDirection.DOWN)

    def tick(self, state: SimulationState) -> dict:
        """Advances the ball one step and resolves collisions"""
        state.ball.update()
        state.ticks += 1
        return self._check_collisions(state)

    def update(self, state: SimulationState, snapshot: InputSnapshot) -> dict:
        """Applies input then advances one tick, returns the tick events"""
        self.on_input(state, snapshot)
        return self.tick(state)

    def _check_collisions(self, state: SimulationState) -> dict:
        """Checks all collisions in order and returns events"""
        events: dict[str, list] = {
            "goals": [],
            "wall_bounces": [],
            "paddle_hits": [],
        }
        ball = state.ball

        # Goals. After a reset the ball is centered, so at most one goal per tick.
        conceding = self.collision_detector.check_ball_goal(ball)
        if conceding is not None:
            scorer = _SCORING[conceding]
            state.score.credit(scorer)
            ball.reset(scorer, self.field_width, self.field_height, self.rng)
            events["goals"].append({"side": scorer, "score": state.score.to_tuple()})
            logger.info(
                "Point for %s player, score %d - %d",
                scorer.value,
                state.score.left,
                state.score.right,
            )

        # Top and bottom walls: reflect only, the position is left as is
        wall = self.collision_detector.check_ball_walls(ball)
        if wall is not None:
            ball.bounce_vertical()
            events["wall_bounces"].append(wall)
            logger.debug("Wall bounce (%s) at tick %d", wall, state.ticks)

        for side in (Side.LEFT, Side.RIGHT):
            paddle = state.paddle(side)
            if self.collision_detector.check_ball_paddle(ball, paddle):
                ball.bounce_horizontal()
                events["paddle_hits"].append({"side": paddle.side})
                logger.debug("Paddle hit (%s) at tick %d", paddle.side.value, state.ticks)

        return events

    def render(self, state: SimulationState, renderer: RendererProtocol) -> None:
        """Emits the draw requests for one frame, never mutates the state"""
        renderer.draw_text(
            f"{state.score.left}  -  {state.score.right}",
            (state.field_width / 2, 20.0),
            game_config.TEXT_COLOR,
        )
        renderer.draw_circle(
            state.ball.position.to_tuple(), state.ball.radius, game_config.BALL_COLOR
        )
        for paddle in (state.left_paddle, state.right_paddle):
            renderer.draw_rect(paddle.get_rect(), game_config.PADDLE_COLOR)

    def get_game_state(self, state: SimulationState) -> dict:
        """Returns a plain snapshot of the game state"""
        return {
            "ball_position": state.ball.position.to_tuple(),
            "ball_direction": state.ball.direction.to_tuple(),
            "left_paddle_position": state.left_paddle.position.to_tuple(),
            "right_paddle_position": state.right_paddle.position.to_tuple(),
            "score": state.score.to_tuple(),
            "ticks": state.ticks,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
