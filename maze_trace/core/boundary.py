import logging
from array import array
from collections import deque
from typing import List, Tuple
from maze_trace.core.grid import Grid

logger = logging.getLogger(__name__)

UNREACHED = -1

class BoundaryAnalyzer:
    @staticmethod
    def boundary_cells(size: int) -> List[int]:
        """
        Perimeter cell indices without duplicates.
        Enumeration order matters: it decides ties in farthest_pair.
        For each i: top row, bottom row, left column, right column.
        """
        seen = set()
        cells = []
        for i in range(size):
            for idx in (i, (size - 1) * size + i, i * size, i * size + size - 1):
                if idx not in seen:
                    seen.add(idx)
                    cells.append(idx)
        return cells

    @staticmethod
    def distances(grid: Grid, source: int) -> array:
        """Single-source BFS over open passages. Unreached cells stay at -1."""
        dist = array('i', [UNREACHED] * len(grid.cells))
        dist[source] = 0
        queue = deque([source])

        while queue:
            current = queue.popleft()
            d = dist[current] + 1
            for nidx in grid.get_open_neighbors(current):
                if dist[nidx] == UNREACHED:
                    dist[nidx] = d
                    queue.append(nidx)
        return dist

    @staticmethod
    def farthest_pair(grid: Grid) -> Tuple[int, int, int]:
        """
        Returns (start_idx, end_idx, distance) for the boundary pair with the
        largest maze distance. Ties go to the first pair found.
        """
        edges = BoundaryAnalyzer.boundary_cells(grid.size)
        start = end = edges[0]
        best = UNREACHED

        for s in edges:
            dist = BoundaryAnalyzer.distances(grid, s)
            for t in edges:
                if dist[t] > best:
                    best = dist[t]
                    start, end = s, t
        return start, end, best

    @staticmethod
    def outer_direction(grid: Grid, idx: int) -> int:
        """
        The outside wall of a perimeter cell. Corners resolve North > West > South > East.
        """
        x, y = grid.coords(idx)
        n = grid.size
        if y == 0:
            return Grid.NORTH
        if x == 0:
            return Grid.WEST
        if y == n - 1:
            return Grid.SOUTH
        if x == n - 1:
            return Grid.EAST
        raise ValueError(f"Cell ({x}, {y}) is not on the boundary")

    @staticmethod
    def open_entrances(grid: Grid) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """
        Picks entrance and exit, opens their outer walls in place and
        returns their (x, y) coordinates.
        """
        start, end, dist = BoundaryAnalyzer.farthest_pair(grid)
        for idx in (start, end):
            grid.clear_wall(idx, BoundaryAnalyzer.outer_direction(grid, idx))

        logger.debug("Entrance %s, exit %s, distance %d", grid.coords(start), grid.coords(end), dist)
        return grid.coords(start), grid.coords(end)
