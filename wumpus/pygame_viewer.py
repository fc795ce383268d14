# wumpus/pygame_viewer.py (fog-of-war over unvisited cells)
from __future__ import annotations
import argparse
import random
from dataclasses import dataclass
from typing import Optional
import pygame

from .types import Attribute, DIRECTION_DELTAS
from .grid import WumpusWorld
from .knowledge import Agent
from .simulation import SimulationConfig, build_world, walk_to
from .cli import describe_outcome


@dataclass
class Colors:
    BG = (18, 18, 22)
    FLOOR = (230, 230, 240)
    PLAYER = (90, 200, 120)
    PIT = (35, 35, 44)
    WUMPUS = (200, 60, 60)
    GOLD = (240, 190, 40)
    BREEZE = (150, 190, 240)
    STENCH = (170, 200, 110)
    SAFE = (70, 170, 110)
    GRID = (60, 60, 70)


class Viewer:
    def __init__(self, config: SimulationConfig, cell_size: int = 96, fps: int = 30,
                 fullscreen: bool = False, reveal: bool = False):
        self.config = config
        self.cell = cell_size
        self.fps = fps
        self.reveal = reveal
        self.seed = config.seed if config.seed is not None else 0

        self.show_grid = True
        self.hard_alpha = 235    # never visited
        self.fullscreen = fullscreen

        self._reset_state()
        self._recreate_display()
        pygame.display.set_caption("Wumpus World")
        self.clock = pygame.time.Clock()

    # ----------------- display / fullscreen -----------------
    def _recreate_display(self) -> None:
        W, H = self.world.n * self.cell, self.world.n * self.cell
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    # ----------------- world / agent -----------------
    def _reset_state(self) -> None:
        """Builds a fresh world for the current seed and senses the start cell."""
        self.world: WumpusWorld = build_world(self.config, random.Random(self.seed))
        self.agent = Agent(start=self.world.position)
        self.done: Optional[str] = None
        self._sense()

    def _sense(self) -> None:
        if self.agent.update_knowledge(self.world.position, self.world.percept()):
            self.done = "gold"
            print(describe_outcome("gold"))

    def _manual_move(self) -> None:
        self.world.move()
        self._sense()

    def _agent_step(self) -> None:
        if self.done:
            return
        on_grid = [s for s in self.agent.safe_cells if self.world.in_bounds(s)]
        nxt = self.agent.decide_next_move(on_grid, tie_break=self.config.tie_break)
        if nxt is None:
            self.done = "stuck"
            print(describe_outcome("stuck"))
            return
        print("Agent moves to", nxt)
        walk_to(self.world, nxt, [])
        self._sense()

    def _shoot(self) -> None:
        outcome = self.world.shoot_arrow()
        self.agent.note_arrow_outcome(outcome)
        print(describe_outcome(outcome))

    # ----------------- draw -----------------
    def _fill_cell(self, r: int, c: int, color, pad: int = 0) -> None:
        cell = self.cell
        rect = pygame.Rect(c * cell + pad, r * cell + pad, cell - 2 * pad, cell - 2 * pad)
        pygame.draw.rect(self.screen, color, rect, border_radius=min(pad, 8))

    def draw(self) -> None:
        n, cell = self.world.n, self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        for (r, c), attrs in self.world.cells():
            self._fill_cell(r, c, Colors.FLOOR)
            if Attribute.BREEZE in attrs:
                pygame.draw.rect(scr, Colors.BREEZE, pygame.Rect(c * cell, r * cell, cell, cell // 8))
            if Attribute.STENCH in attrs:
                pygame.draw.rect(scr, Colors.STENCH, pygame.Rect(c * cell, r * cell + cell - cell // 8, cell, cell // 8))
            if Attribute.PIT in attrs:
                self._fill_cell(r, c, Colors.PIT, pad=cell // 5)
            if Attribute.WUMPUS in attrs:
                self._fill_cell(r, c, Colors.WUMPUS, pad=cell // 4)
            if Attribute.GOLD in attrs:
                self._fill_cell(r, c, Colors.GOLD, pad=cell // 3)

        for (r, c) in self.agent.safe_cells:
            pygame.draw.rect(scr, Colors.SAFE, pygame.Rect(c * cell, r * cell, cell, cell), width=3)

        # player with a facing tick
        pr, pc = self.world.position
        cx, cy = pc * cell + cell // 2, pr * cell + cell // 2
        pygame.draw.circle(scr, Colors.PLAYER, (cx, cy), cell // 5)
        dr, dc = DIRECTION_DELTAS[self.world.facing]
        pygame.draw.line(scr, Colors.BG, (cx, cy), (cx + dc * cell // 4, cy + dr * cell // 4), 3)

        # Fog
        if not self.reveal:
            fog_surface = pygame.Surface((n * cell, n * cell), pygame.SRCALPHA)
            for r in range(n):
                for c in range(n):
                    if (r, c) not in self.agent.knowledge_base and (r, c) != self.world.position:
                        fog_surface.fill((0, 0, 0, self.hard_alpha), pygame.Rect(c * cell, r * cell, cell, cell))
            scr.blit(fog_surface, (0, 0))

        if self.show_grid:
            for i in range(n + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, n * cell))
                pygame.draw.line(scr, Colors.GRID, (0, i * cell), (n * cell, i * cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_LEFT:
                        self.world.rotate(left=True)
                    elif event.key == pygame.K_RIGHT:
                        self.world.rotate(left=False)
                    elif event.key == pygame.K_UP:
                        self._manual_move()
                    elif event.key == pygame.K_SPACE:
                        self._agent_step()
                    elif event.key == pygame.K_f:
                        self._shoot()
                    elif event.key == pygame.K_r:
                        self.seed += 1
                        print(f"New world, seed={self.seed}")
                        self._reset_state()
                    elif event.key == pygame.K_v:
                        self.reveal = not self.reveal
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                    elif event.key == pygame.K_F11:
                        self.toggle_fullscreen()

            self.draw()


def main():
    parser = argparse.ArgumentParser(description="Wumpus World viewer with fog-of-war")
    parser.add_argument("--size", type=int, default=4, help="Grid size")
    parser.add_argument("--seed", type=int, default=0, help="Seed for hazard placement")
    parser.add_argument("--tie-break", dest="tie_break", choices=["row_major", "column_major"], default="row_major")
    parser.add_argument("--cell", type=int, default=96, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=30, help="Frames per second")
    parser.add_argument("--reveal", action="store_true", help="Start with the fog lifted (toggle with V)")
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen (toggle F11)")
    args = parser.parse_args()

    config = SimulationConfig(size=args.size, tie_break=args.tie_break, seed=args.seed)
    pygame.init()
    try:
        Viewer(config, cell_size=args.cell, fps=args.fps, fullscreen=args.fullscreen, reveal=args.reveal).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
