"""
Collision detection system for Classic Pong
"""

from classic_pong.core.entities import Ball, Paddle, Side


def ball_exited(ball: Ball, field_width: float) -> Side | None:
    """Returns the side whose goal line the ball crossed, if any"""
    if ball.position.x < 0:
        return Side.LEFT
    if ball.position.x > field_width:
        return Side.RIGHT
    return None


def ball_hits_wall(ball: Ball, field_height: float) -> str | None:
    """Returns "top" or "bottom" when the ball is beyond a horizontal wall"""
    if ball.position.y < 0:
        return "top"
    if ball.position.y > field_height:
        return "bottom"
    return None


def within_paddle_height(ball: Ball, paddle: Paddle) -> bool:
    """Strict vertical containment of the ball center in the paddle span"""
    return paddle.position.y < ball.position.y < paddle.position.y + paddle.height


def ball_hits_paddle(ball: Ball, paddle: Paddle, field_width: float) -> bool:
    """Checks the ball center against the paddle's horizontal band.

    The band is bounded on the goal side by the paddle width measured from
    the field edge, not by the paddle position: with the default 20 pixel
    margin the left band is (30, 50] rather than [20, 50]. The right band
    mirrors it.
    """
    x = ball.position.x
    if paddle.side is Side.LEFT:
        in_band = paddle.width < x <= paddle.position.x + paddle.width
    else:
        in_band = paddle.position.x <= x < field_width - paddle.width
    return in_band and within_paddle_height(ball, paddle)


class CollisionDetector:
    """Main collision manager"""

    def __init__(self, field_width: float, field_height: float) -> None:
        self.field_width = field_width
        self.field_height = field_height

    def check_ball_goal(self, ball: Ball) -> Side | None:
        return ball_exited(ball, self.field_width)

    def check_ball_walls(self, ball: Ball) -> str | None:
        return ball_hits_wall(ball, self.field_height)

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        return ball_hits_paddle(ball, paddle, self.field_width)
