from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
import random
import time

from .types import Attribute, Coord, Direction
from .grid import WumpusWorld
from .knowledge import Agent


@dataclass(frozen=True)
class SimulationConfig:
    size: int = 4
    max_steps: int = 100
    tie_break: str = "row_major"
    seed: Optional[int] = None


@dataclass
class RunStats:
    outcome: str  # "gold" | "stuck" | "step_limit"
    moves: int
    turns: int
    decisions: int
    path_taken: List[Coord]
    visited: Set[Coord]
    hazard_hit: bool
    elapsed_sec: float


def build_world(config: SimulationConfig, rng: random.Random) -> WumpusWorld:
    world = WumpusWorld(config.size)
    world.place_wumpus(rng)
    world.place_pits(rng)
    world.place_gold_and_glitter(rng)
    return world


def _face(world: WumpusWorld, want: Direction) -> int:
    """Turn the short way round to `want`; returns number of rotate() calls."""
    diff = (want - world.facing) % 360
    if diff == 0:
        return 0
    if diff == 270:
        world.rotate(left=True)
        return 1
    turns = 0
    while world.facing != want:
        world.rotate(left=False)
        turns += 1
    return turns


def walk_to(world: WumpusWorld, target: Coord, path: List[Coord]) -> Tuple[int, int, bool]:
    """Drive the pose to target with rotate/move only, rows first. Returns (moves, turns, hazard)."""
    moves = turns = 0
    hazard = False
    legs = [
        (target[0] - world.position[0], Direction.SOUTH, Direction.NORTH),
        (target[1] - world.position[1], Direction.EAST, Direction.WEST),
    ]
    for delta, pos_dir, neg_dir in legs:
        if delta == 0:
            continue
        turns += _face(world, pos_dir if delta > 0 else neg_dir)
        for _ in range(abs(delta)):
            before = world.position
            world.move()
            moves += 1
            if world.position == before:
                # bumped the boundary: target is off the grid
                return moves, turns, hazard
            path.append(world.position)
            if world.has(world.position, Attribute.PIT) or world.has(world.position, Attribute.WUMPUS):
                hazard = True
    return moves, turns, hazard


def run_episode(world: WumpusWorld, agent: Optional[Agent] = None,
                config: Optional[SimulationConfig] = None) -> RunStats:
    config = config or SimulationConfig(size=world.n)
    agent = agent or Agent(start=world.position)

    moves = turns = decisions = 0
    hazard_hit = False
    path_taken: List[Coord] = [world.position]
    t0 = time.perf_counter()

    def stats(outcome: str) -> RunStats:
        return RunStats(outcome, moves, turns, decisions, path_taken, agent.visited,
                        hazard_hit, time.perf_counter() - t0)

    if agent.update_knowledge(world.position, world.percept(world.position)):
        return stats("gold")

    while decisions < config.max_steps:
        on_grid = [s for s in agent.safe_cells if world.in_bounds(s)]
        nxt = agent.decide_next_move(on_grid, tie_break=config.tie_break)
        if nxt is None:
            return stats("stuck")
        decisions += 1
        m, t, hz = walk_to(world, nxt, path_taken)
        moves += m
        turns += t
        hazard_hit = hazard_hit or hz
        if agent.update_knowledge(world.position, world.percept(world.position)):
            return stats("gold")

    return stats("step_limit")


def play(config: SimulationConfig) -> Tuple[WumpusWorld, Agent, RunStats]:
    rng = random.Random(config.seed)
    world = build_world(config, rng)
    agent = Agent(start=world.position)
    return world, agent, run_episode(world, agent, config)
