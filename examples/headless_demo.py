"""
Runs the simulation without a window and prints the score

Both paddles stay still, so every rally ends in a goal unless the ball
happens to cross a paddle band.
"""

import argparse

import numpy as np

from classic_pong.core.entities import InputSnapshot
from classic_pong.core.interfaces.renderer import DrawRecorder
from classic_pong.core.physics import PhysicsEngine


def run(ticks: int, seed: int) -> None:
    engine = PhysicsEngine(rng=np.random.default_rng(seed))
    state = engine.init_state()
    recorder = DrawRecorder()
    idle = InputSnapshot()

    goals = 0
    for _ in range(ticks):
        events = engine.update(state, idle)
        goals += len(events["goals"])

    engine.render(state, recorder)
    print(f"{ticks} ticks, {goals} goals, score {state.score.left} - {state.score.right}")
    for command in recorder.commands:
        print(f"  {command.kind}: {command.args}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Headless Pong simulation")
    parser.add_argument("--ticks", type=int, default=3600, help="Number of ticks to simulate")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()
    run(args.ticks, args.seed)
