import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_trace.api import (GENERATORS, SOLVERS, MIN_SIZE, MAX_SIZE, InvalidArgument,
                            generate, solve, validate_size)
from maze_trace.core.grid import Grid
from maze_trace.core.boundary import BoundaryAnalyzer
from maze_trace.core.complexity import MazeInspector
from maze_trace.core.trace import cleared_bits

class TestGenerate(unittest.TestCase):
    def test_all_kinds(self):
        for kind in GENERATORS:
            for n in (MIN_SIZE, 7, 15):
                with self.subTest(kind=kind, n=n):
                    result = generate(n, kind, seed=21)
                    # walled start + n*n - 1 carves + entrance/exit snapshot
                    self.assertEqual(len(result.steps), n * n + 1)
                    self.assertEqual(result.size, n)

                    final = result.final
                    self.assertTrue(MazeInspector.is_perfect(final))
                    self.assertTrue(MazeInspector.is_symmetric(final))

                    self.assertNotEqual(result.start, result.end)
                    for x, y in (result.start, result.end):
                        self.assertTrue(x in (0, n - 1) or y in (0, n - 1))

    def test_last_step_opens_entrance_and_exit(self):
        for kind in GENERATORS:
            result = generate(9, kind, seed=4)
            grid = result.final
            lost = cleared_bits(result.steps[-2], result.steps[-1])
            expected = sorted(
                (grid.index(*p), BoundaryAnalyzer.outer_direction(grid, grid.index(*p)))
                for p in (result.start, result.end)
            )
            self.assertEqual(lost, expected)

    def test_determinism(self):
        a = generate(4, "recursive-backtracker", seed=1234)
        b = generate(4, "recursive-backtracker", seed=1234)
        self.assertEqual(a.steps, b.steps)
        self.assertEqual((a.start, a.end), (b.start, b.end))

        c = generate(10, "wilson", rng=random.Random(8))
        d = generate(10, "wilson", rng=random.Random(8))
        self.assertEqual(c.steps, d.steps)

    def test_rng_and_seed_together(self):
        rng = random.Random(8)
        state = rng.getstate()
        with self.assertRaises(InvalidArgument):
            generate(10, "wilson", rng=rng, seed=8)
        self.assertEqual(rng.getstate(), state)

    def test_aliases(self):
        self.assertEqual(generate(5, "dfs", seed=3).steps,
                         generate(5, "recursive-backtracker", seed=3).steps)

    def test_invalid_size(self):
        for size in (MIN_SIZE - 1, MAX_SIZE + 1, 0, -5, "10", 10.0, True, None):
            with self.subTest(size=size):
                with self.assertRaises(InvalidArgument):
                    generate(size, "eller", seed=1)
        self.assertEqual(validate_size(MAX_SIZE), MAX_SIZE)

    def test_unknown_kind(self):
        with self.assertRaises(InvalidArgument):
            generate(10, "binary-tree", seed=1)
        with self.assertRaises(InvalidArgument):
            generate(10, None, seed=1)

    def test_invalid_argument_is_value_error(self):
        self.assertTrue(issubclass(InvalidArgument, ValueError))

    def test_to_dict(self):
        result = generate(4, "eller", seed=2)
        doc = result.to_dict()
        self.assertEqual(len(doc["steps"]), 17)
        self.assertTrue(all(isinstance(v, int) for v in doc["steps"][-1]))
        self.assertEqual(doc["start"], {"x": result.start[0], "y": result.start[1]})

class TestSolve(unittest.TestCase):
    def setUp(self):
        self.maze = generate(8, "wilson", seed=77)

    def test_all_kinds(self):
        shortest = None
        for kind in SOLVERS:
            result = solve(self.maze.final, self.maze.start, self.maze.end, kind)
            self.assertTrue(result.found)
            self.assertEqual(result.path[0], self.maze.start)
            self.assertEqual(result.path[-1], self.maze.end)
            if shortest is None:
                shortest = len(result.path)
            self.assertEqual(len(result.path), shortest)

    def test_flat_list_input(self):
        cells = list(self.maze.steps[-1])
        by_grid = solve(self.maze.final, self.maze.start, self.maze.end, "a-star")
        by_list = solve(cells, list(self.maze.start), list(self.maze.end), "astar")
        self.assertEqual(by_grid, by_list)

    def test_open_grid_scenario(self):
        grid = Grid(4)
        for idx in range(16):
            for _, d in grid.get_neighbors(idx):
                grid.clear_wall(idx, d)
        for kind in ("a-star", "dijkstra"):
            result = solve(grid, (0, 0), (3, 3), kind)
            self.assertEqual(len(result.path), 7)

    def test_start_equals_end(self):
        for kind in SOLVERS:
            result = solve(self.maze.final, (3, 3), (3, 3), kind)
            self.assertEqual(result.path, [(3, 3)])
            self.assertEqual(result.visits, [(3, 3)])

    def test_no_path_is_not_an_error(self):
        result = solve([15] * 16, (0, 0), (3, 3), "dijkstra")
        self.assertFalse(result.found)
        self.assertEqual(result.to_dict(), {"path": [], "visits": []})

    def test_invalid_input(self):
        with self.assertRaises(InvalidArgument):
            solve(self.maze.final, (0, 0), (1, 1), "djikstra")
        with self.assertRaises(InvalidArgument):
            solve([15] * 15, (0, 0), (1, 1), "dijkstra")
        with self.assertRaises(InvalidArgument):
            solve([15, 15, 15, 300], (0, 0), (1, 1), "dijkstra")
        with self.assertRaises(InvalidArgument):
            solve(self.maze.final, (0, 8), (1, 1), "a-star")
        with self.assertRaises(InvalidArgument):
            solve(self.maze.final, (0, 0, 0), (1, 1), "a-star")
        with self.assertRaises(InvalidArgument):
            solve(self.maze.final, (0, 0), ("1", 1), "a-star")

    def test_to_dict(self):
        result = solve(self.maze.final, self.maze.start, self.maze.end, "depth-first")
        doc = result.to_dict()
        self.assertEqual(doc["path"][0], list(self.maze.start))

if __name__ == '__main__':
    unittest.main()
