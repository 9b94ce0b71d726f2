import random
from abc import ABC, abstractmethod
from array import array
from typing import Iterator, List, Optional
from maze_trace.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, seed: int = None):
        if any(cell != Grid.ALL_WALLS for cell in grid.cells):
            raise ValueError("generators need a fully walled grid")
        self.grid = grid
        self.seed = seed
        # Never fall back to the module-level random state
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.steps: List[array] = [grid.snapshot()]

    def carve(self, idx: int, dir_bit: int):
        """Clears one internal wall (both sides) and records a snapshot."""
        self.grid.clear_wall(idx, dir_bit)
        self.step_count += 1
        self.steps.append(self.grid.snapshot())

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> List[array]:
        """Helper to run the generator to completion. Returns the step trace."""
        for _ in self.run():
            pass
        return self.steps
