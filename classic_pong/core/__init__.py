"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import InputSnapshot
from classic_pong.core.entities import MoveDirection
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Score
from classic_pong.core.entities import Side
from classic_pong.core.entities import SimulationState
from classic_pong.core.entities import Vector2D
from classic_pong.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "Paddle",
    "Score",
    "Side",
    "MoveDirection",
    "InputSnapshot",
    "SimulationState",
    "Vector2D",
    "PhysicsEngine",
]
