"""
Entry points: build a maze with a named generator, solve one with a named solver.

Both functions validate their arguments up front and raise InvalidArgument
before any grid is built or searched.
"""
import logging
import random
from array import array
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Type, Union

from maze_trace.core.grid import Grid
from maze_trace.core.boundary import BoundaryAnalyzer
from maze_trace.algo.base import Generator
from maze_trace.algo.dfs import RecursiveBacktracker
from maze_trace.algo.eller import EllersAlgorithm
from maze_trace.algo.wilson import WilsonsAlgorithm
from maze_trace.algo.solvers import Solver, DepthFirst, AStar, Dijkstra

logger = logging.getLogger(__name__)

MIN_SIZE = 4
MAX_SIZE = 50

Coord = Tuple[int, int]

GENERATORS: Dict[str, Type[Generator]] = {
    "recursive-backtracker": RecursiveBacktracker,
    "eller": EllersAlgorithm,
    "wilson": WilsonsAlgorithm,
}

SOLVERS: Dict[str, Type[Solver]] = {
    "depth-first": DepthFirst,
    "a-star": AStar,
    "dijkstra": Dijkstra,
}

# Short names
GENERATOR_ALIASES = {"dfs": "recursive-backtracker"}
SOLVER_ALIASES = {"dfs": "depth-first", "astar": "a-star"}


class InvalidArgument(ValueError):
    """Rejected input: bad size, unknown kind, malformed grid or coordinate."""


@dataclass
class GenerationResult:
    steps: List[array]
    start: Coord
    end: Coord

    @property
    def size(self) -> int:
        return int(round(len(self.steps[-1]) ** 0.5))

    @property
    def final(self) -> Grid:
        return Grid(self.size, self.steps[-1])

    def to_dict(self) -> dict:
        return {
            "steps": [list(s) for s in self.steps],
            "start": {"x": self.start[0], "y": self.start[1]},
            "end": {"x": self.end[0], "y": self.end[1]},
        }


@dataclass
class SolveResult:
    path: List[Coord] = field(default_factory=list)
    visits: List[Coord] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict:
        return {
            "path": [list(p) for p in self.path],
            "visits": [list(v) for v in self.visits],
        }


def _resolve(kind: str, registry: Dict[str, type], aliases: Dict[str, str], what: str) -> type:
    if not isinstance(kind, str):
        raise InvalidArgument(f"{what} type must be a string, got {kind!r}")
    name = aliases.get(kind, kind)
    if name not in registry:
        raise InvalidArgument(f"{what} type '{kind}' not supported.")
    return registry[name]


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidArgument(f"Size must be an integer between {MIN_SIZE} and {MAX_SIZE}.")
    return size


def generate(size: int, kind: str = "recursive-backtracker",
             rng: Optional[random.Random] = None, seed: int = None) -> GenerationResult:
    """
    Builds a size x size maze and opens an entrance and exit on the perimeter.

    steps[0] is the fully walled grid, then one snapshot per carved wall,
    then one last snapshot with the two outer walls opened.
    Pass either rng or seed; giving both is an error.
    """
    if rng is not None and seed is not None:
        raise InvalidArgument("Pass either 'rng' or 'seed', not both.")
    cls = _resolve(kind, GENERATORS, GENERATOR_ALIASES, "Algorithm")
    validate_size(size)

    grid = Grid(size)
    generator = cls(grid, rng=rng, seed=seed)
    steps = generator.run_all()

    start, end = BoundaryAnalyzer.open_entrances(grid)
    steps.append(grid.snapshot())

    logger.debug("Generated %dx%d maze with %s in %d carves", size, size, kind, generator.step_count)
    return GenerationResult(steps=steps, start=start, end=end)


def _as_grid(maze: Union[Grid, Sequence[int]]) -> Grid:
    if isinstance(maze, Grid):
        return maze
    try:
        return Grid.from_cells(maze)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgument(f"Invalid maze: {e}") from e


def _as_coord(grid: Grid, value, name: str) -> Coord:
    if (not isinstance(value, (tuple, list)) or len(value) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)):
        raise InvalidArgument(f"Invalid '{name}': expected [x, y] of integers.")
    x, y = value
    if not grid.in_bounds(x, y):
        raise InvalidArgument(f"Invalid '{name}': ({x}, {y}) outside {grid.size}x{grid.size} grid.")
    return (x, y)


def solve(maze: Union[Grid, Sequence[int]], start: Coord, end: Coord,
          kind: str = "depth-first") -> SolveResult:
    """
    Searches from start to end. An unreachable end gives an empty result, not an error.
    """
    cls = _resolve(kind, SOLVERS, SOLVER_ALIASES, "Algorithm")
    grid = _as_grid(maze)
    start = _as_coord(grid, start, "start")
    end = _as_coord(grid, end, "end")

    path, visits = cls(grid).solve(start, end)

    logger.debug("%s: path %d, visited %d", kind, len(path), len(visits))
    return SolveResult(path=list(path), visits=list(visits))
