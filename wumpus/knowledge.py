from __future__ import annotations
from typing import Callable, Dict, Iterable, Optional, Set, Tuple
from .types import ArrowOutcome, Attribute, Coord

TIE_BREAKS: Dict[str, Callable[[Coord], Tuple[int, int]]] = {
    "row_major": lambda s: (s[0], s[1]),
    "column_major": lambda s: (s[1], s[0]),
}


class Agent:
    """
    Agent's belief state:
    - knowledge base maps each visited cell to the percepts seen there
    - a cell is believed safe only once it was visited without breeze or stench
    - safe set starts with the start cell and never shrinks
    """
    def __init__(self, start: Coord = (0, 0)):
        self.start = start
        self.knowledge_base: Dict[Coord, Set[Attribute]] = {}
        self.safe_cells: Set[Coord] = {start}
        self.wumpus_killed = False

    @property
    def visited(self) -> Set[Coord]:
        return set(self.knowledge_base)

    def update_knowledge(self, position: Coord, percepts: Iterable[Attribute]) -> bool:
        """Record percepts at position; returns True when glitter (the goal) is sensed."""
        seen = set(percepts)
        self.knowledge_base[position] = seen
        if Attribute.BREEZE not in seen and Attribute.STENCH not in seen:
            self.safe_cells.add(position)
        return Attribute.GLITTER in seen

    def note_arrow_outcome(self, outcome: ArrowOutcome) -> None:
        if outcome is ArrowOutcome.KILLED:
            self.wumpus_killed = True

    def decide_next_move(self, safe_cells: Optional[Iterable[Coord]] = None,
                         tie_break: str = "row_major") -> Optional[Coord]:
        key = TIE_BREAKS.get(tie_break)
        if key is None:
            raise ValueError(f"Unknown tie_break {tie_break!r}, expected one of {sorted(TIE_BREAKS)}")
        candidates = self.safe_cells if safe_cells is None else safe_cells
        for s in sorted(candidates, key=key):
            if s not in self.knowledge_base:
                return s
        return None
