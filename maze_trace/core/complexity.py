from maze_trace.core.grid import Grid
from maze_trace.core.boundary import BoundaryAnalyzer, UNREACHED

def popcount_walls(val: int) -> int:
    return bin(val & Grid.ALL_WALLS).count("1")

class MazeInspector:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """Internal adjacencies open on both sides. Only looks East and South so each pair counts once."""
        n = grid.size
        passages = 0
        for y in range(n):
            for x in range(n):
                idx = y * n + x
                if x < n - 1 and not grid.has_wall(idx, Grid.EAST) and not grid.has_wall(idx + 1, Grid.WEST):
                    passages += 1
                if y < n - 1 and not grid.has_wall(idx, Grid.SOUTH) and not grid.has_wall(idx + n, Grid.NORTH):
                    passages += 1
        return passages

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """Every internal wall agrees with its mirror on the neighbour."""
        for idx in range(len(grid.cells)):
            for nidx, dir_bit in grid.get_neighbors(idx):
                if grid.has_wall(idx, dir_bit) != grid.has_wall(nidx, Grid.OPPOSITE[dir_bit]):
                    return False
        return True

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Spanning tree check: n*n - 1 passages and every cell reachable from cell 0.
        A connected graph with V - 1 edges has no cycles.
        """
        total = len(grid.cells)
        if MazeInspector.count_passages(grid) != total - 1:
            return False
        dist = BoundaryAnalyzer.distances(grid, 0)
        return UNREACHED not in dist

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for val in grid.cells:
            walls = popcount_walls(val)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = len(grid.cells)
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazeInspector.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
