from .types import Coord, Attribute, Direction, ArrowOutcome
from .grid import WumpusWorld
from .knowledge import Agent
from .simulation import SimulationConfig, RunStats, build_world, run_episode, walk_to, play
from .viz import draw_world_png

__all__ = [
    "Coord", "Attribute", "Direction", "ArrowOutcome",
    "WumpusWorld", "Agent",
    "SimulationConfig", "RunStats", "build_world", "run_episode", "walk_to", "play",
    "draw_world_png",
]
