from typing import Iterator, List
from maze_trace.algo.base import Generator

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        total = len(self.grid.cells)
        visited = bytearray(total)

        # Start at cell 0, i.e. (0,0)
        visited[0] = 1

        # Stack of cell indices
        stack: List[int] = [0]

        while stack:
            current = stack[-1]

            # Find unvisited neighbors, N, E, S, W order
            neighbors = [
                (nidx, dir_bit)
                for nidx, dir_bit in self.grid.get_neighbors(current)
                if not visited[nidx]
            ]

            if neighbors:
                # Choose random neighbor
                nidx, dir_bit = self.rng.choice(neighbors)

                # Carve
                self.carve(current, dir_bit)
                visited[nidx] = 1

                stack.append(nidx)

                # Yield every N steps to keep callers responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                stack.pop()

        yield "Done"
