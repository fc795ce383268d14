from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Set, Tuple
import random
from .types import Attribute, ArrowOutcome, Coord, Direction, DIRECTION_DELTAS

START: Coord = (0, 0)


@dataclass
class WumpusWorld:
    """
    The environment:
    - n x n grid of attribute sets, fixed at construction
    - agent pose (position, facing) and a single arrow
    - randomness is passed in to the placement calls, never global
    """
    n: int
    grid: List[List[Set[Attribute]]] = field(init=False, repr=False)
    position: Coord = field(init=False, default=START)
    facing: Direction = field(init=False, default=Direction.SOUTH)
    has_arrow: bool = field(init=False, default=True)

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"Grid size must be positive, got {self.n}")
        self.grid = [[set() for _ in range(self.n)] for _ in range(self.n)]

    # ----------------- geometry -----------------
    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.n and 0 <= c < self.n

    def neighbors(self, s: Coord) -> List[Coord]:
        r, c = s
        cand = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
        return [p for p in cand if self.in_bounds(p)]

    def cells(self) -> Iterator[Tuple[Coord, FrozenSet[Attribute]]]:
        for r in range(self.n):
            for c in range(self.n):
                yield (r, c), frozenset(self.grid[r][c])

    def _check(self, s: Coord) -> None:
        if not self.in_bounds(s):
            raise ValueError(f"Position out of bounds: {s}")

    def has(self, s: Coord, attr: Attribute) -> bool:
        self._check(s)
        r, c = s
        return attr in self.grid[r][c]

    # ----------------- placement -----------------
    def _interior(self, rng: random.Random) -> Coord:
        if self.n < 3:
            raise ValueError(f"Grid of size {self.n} has no interior cells")
        return rng.randint(1, self.n - 2), rng.randint(1, self.n - 2)

    def _mark_around(self, s: Coord, attr: Attribute) -> None:
        for r, c in self.neighbors(s):
            self.grid[r][c].add(attr)

    def place_wumpus(self, rng: random.Random) -> Coord:
        r, c = self._interior(rng)
        self.grid[r][c].add(Attribute.WUMPUS)
        self._mark_around((r, c), Attribute.STENCH)
        return r, c

    def place_pits(self, rng: random.Random) -> List[Coord]:
        target = (3 * self.n) // 4
        placed: List[Coord] = []
        while len(placed) < target:
            if not any(not attrs for _, attrs in self.cells()):
                raise RuntimeError(f"No empty cell left for pit {len(placed) + 1} of {target}")
            r, c = rng.randrange(self.n), rng.randrange(self.n)
            if self.grid[r][c]:
                continue
            self.grid[r][c].add(Attribute.PIT)
            self._mark_around((r, c), Attribute.BREEZE)
            placed.append((r, c))
        return placed

    def place_gold_and_glitter(self, rng: random.Random) -> Coord:
        r, c = self._interior(rng)
        self.grid[r][c].update((Attribute.GOLD, Attribute.GLITTER))
        return r, c

    # ----------------- sensing / motion -----------------
    def percept(self, position: Optional[Coord] = None) -> Set[Attribute]:
        s = self.position if position is None else position
        self._check(s)
        r, c = s
        return set(self.grid[r][c])

    def rotate(self, left: bool) -> None:
        self.facing = Direction((self.facing + (270 if left else 90)) % 360)

    def _ahead(self, s: Coord) -> Coord:
        delta = DIRECTION_DELTAS.get(self.facing)
        if delta is None:
            raise ValueError(f"Invalid direction: {self.facing!r}")
        return s[0] + delta[0], s[1] + delta[1]

    def move(self) -> None:
        nxt = self._ahead(self.position)
        if self.in_bounds(nxt):
            self.position = nxt

    def shoot_arrow(self) -> ArrowOutcome:
        if not self.has_arrow:
            return ArrowOutcome.NO_ARROWS
        self.has_arrow = False
        cur = self.position
        while True:
            cur = self._ahead(cur)
            if not self.in_bounds(cur):
                return ArrowOutcome.LOST
            r, c = cur
            # stench around the kill stays where it was
            if Attribute.WUMPUS in self.grid[r][c]:
                self.grid[r][c].discard(Attribute.WUMPUS)
                return ArrowOutcome.KILLED
