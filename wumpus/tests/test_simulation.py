import contextlib
import csv
import io
import os
import tempfile
import unittest

from wumpus import Agent, Attribute, Direction, SimulationConfig, WumpusWorld, play, run_episode, walk_to
from wumpus.cli import main
from wumpus.viz import PIL_AVAILABLE, draw_world_png


class EpisodeTests(unittest.TestCase):
    def test_fresh_world_gets_stuck_at_start(self):
        for seed in range(10):
            world, agent, stats = play(SimulationConfig(size=4, seed=seed))
            self.assertEqual(stats.outcome, "stuck")
            self.assertEqual(stats.decisions, 0)
            self.assertEqual(stats.moves, 0)
            self.assertEqual(stats.path_taken, [(0, 0)])
            self.assertEqual(agent.visited, {(0, 0)})

    def test_seeded_play_is_reproducible(self):
        a, _, _ = play(SimulationConfig(size=6, seed=42))
        b, _, _ = play(SimulationConfig(size=6, seed=42))
        self.assertEqual(list(a.cells()), list(b.cells()))

    def test_walk_uses_rotate_and_move(self):
        world = WumpusWorld(4)
        path = [world.position]
        moves, turns, hazard = walk_to(world, (2, 3), path)
        self.assertEqual(world.position, (2, 3))
        self.assertEqual((moves, turns, hazard), (5, 1, False))
        self.assertEqual(path, [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3)])
        self.assertEqual(world.facing, Direction.EAST)

    def test_walk_back_turns_around(self):
        world = WumpusWorld(4)
        walk_to(world, (3, 0), [])
        _, turns, _ = walk_to(world, (1, 0), [])
        self.assertEqual(turns, 2)
        self.assertEqual(world.facing, Direction.NORTH)

    def test_reaches_gold_on_a_known_safe_cell(self):
        world = WumpusWorld(4)
        world.grid[2][0].update((Attribute.GOLD, Attribute.GLITTER))
        agent = Agent()
        agent.safe_cells.add((2, 0))
        stats = run_episode(world, agent)
        self.assertEqual(stats.outcome, "gold")
        self.assertEqual(stats.decisions, 1)
        self.assertEqual(stats.moves, 2)
        self.assertEqual(stats.visited, {(0, 0), (2, 0)})

    def test_walking_through_a_pit_is_reported(self):
        world = WumpusWorld(4)
        world.grid[1][0].add(Attribute.PIT)
        agent = Agent()
        agent.safe_cells.add((2, 0))
        stats = run_episode(world, agent)
        self.assertTrue(stats.hazard_hit)
        self.assertEqual(stats.outcome, "stuck")

    def test_off_grid_safe_cells_are_ignored(self):
        world = WumpusWorld(4)
        agent = Agent()
        agent.safe_cells.update({(5, 0), (-1, 2)})
        stats = run_episode(world, agent, SimulationConfig(size=4, max_steps=3))
        self.assertEqual(stats.outcome, "stuck")
        self.assertEqual(stats.decisions, 0)
        self.assertEqual(world.position, (0, 0))

    def test_step_limit(self):
        world = WumpusWorld(4)
        agent = Agent()
        agent.safe_cells.update({(1, 0), (2, 0)})
        stats = run_episode(world, agent, SimulationConfig(size=4, max_steps=1))
        self.assertEqual(stats.outcome, "step_limit")
        self.assertEqual(stats.decisions, 1)
        self.assertEqual(world.position, (1, 0))


class CliTests(unittest.TestCase):
    def _run(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_run_prints_stats(self):
        text = self._run("run", "--seed", "3")
        self.assertIn("No safe move available, agent is stuck!", text)
        self.assertIn("outcome=stuck", text)

    def test_shoot_reports_outcome(self):
        text = self._run("shoot", "--seed", "1", "--shots", "2")
        self.assertIn("No arrows left to shoot!", text)
        self.assertEqual(text.count("shot from"), 2)

    def test_bench_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bench.csv")
            self._run("bench", "--count", "4", "--size", "5", "--csv", path)
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual([r["seed"] for r in rows], ["0", "1", "2", "3"])
        self.assertTrue(all(r["size"] == "5" for r in rows))

    @unittest.skipUnless(PIL_AVAILABLE, "Pillow not installed")
    def test_png_is_written(self):
        world, agent, _ = play(SimulationConfig(size=5, seed=7))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out", "world.png")
            draw_world_png(world, agent.visited, path)
            self.assertTrue(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
