from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Tuple
from maze_trace.core.grid import Grid

Coord = Tuple[int, int]

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Coord] = []
        # Exploration order, one entry per expanded cell
        self.visits: List[Coord] = []

    @abstractmethod
    def run(self, start: Coord, end: Coord) -> Iterator[str]:
        pass

    def solve(self, start: Coord, end: Coord) -> Tuple[List[Coord], List[Coord]]:
        """Runs to completion. Both lists are empty when end is unreachable."""
        self.path = []
        self.visits = []
        for _ in self.run(start, end):
            pass
        if not self.path:
            self.visits = []
        return self.path, self.visits

    def open_neighbors(self, pos: Coord) -> Iterator[Coord]:
        """Reachable neighbours in N, E, S, W order (own wall bit clear, in bounds)."""
        for nidx in self.grid.get_open_neighbors(self.grid.index(*pos)):
            yield self.grid.coords(nidx)

class DepthFirst(Solver):
    """
    Stack-based DFS carrying the path with each entry. Finds *a* path,
    not necessarily the shortest.
    """
    def run(self, start: Coord, end: Coord) -> Iterator[str]:
        stack: List[Tuple[Coord, List[Coord]]] = [(start, [start])]
        visited = {start}

        while stack:
            pos, path = stack.pop()
            self.visits.append(pos)

            if pos == end:
                self.path = path
                break

            for nxt in self.open_neighbors(pos):
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, path + [nxt]))

            if len(self.visits) % 100 == 0:
                yield f"Visited: {len(self.visits)}"

        yield "Solved" if self.path else "No path"

class AStar(Solver):
    """
    Open set is a list in slot order, stably sorted by f before every pop.
    Equal f pops in slot order; a node whose g improves keeps its slot.
    """
    def run(self, start: Coord, end: Coord) -> Iterator[str]:
        open_list: List[Coord] = [start]
        in_open = {start}

        g_score: Dict[Coord, int] = {start: 0}
        f_score: Dict[Coord, int] = {start: self.heuristic(start, end)}
        came_from: Dict[Coord, Coord] = {}

        while open_list:
            open_list.sort(key=f_score.__getitem__)
            current = open_list.pop(0)
            in_open.discard(current)

            self.visits.append(current)

            if current == end:
                self.path = self.reconstruct_path(came_from, start, end)
                break

            new_g = g_score[current] + 1
            for nxt in self.open_neighbors(current):
                if new_g < g_score.get(nxt, new_g + 1):
                    g_score[nxt] = new_g
                    f_score[nxt] = new_g + self.heuristic(nxt, end)
                    came_from[nxt] = current
                    if nxt not in in_open:
                        in_open.add(nxt)
                        open_list.append(nxt)

            if len(self.visits) % 100 == 0:
                yield f"Visited: {len(self.visits)}"

        yield "Solved" if self.path else "No path"

    @staticmethod
    def reconstruct_path(came_from: Dict[Coord, Coord], start: Coord, end: Coord) -> List[Coord]:
        path = [end]
        curr = end
        while curr != start:
            curr = came_from[curr]
            path.append(curr)
        path.reverse()
        return path

    def heuristic(self, a: Coord, b: Coord) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

class Dijkstra(AStar):
    """ Dijkstra is just A* with h(n) = 0; on unit edges it expands in BFS order. """
    def heuristic(self, a, b):
        return 0
