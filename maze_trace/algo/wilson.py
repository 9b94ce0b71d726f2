from typing import Dict, Iterator, List, Tuple
from maze_trace.algo.base import Generator

class WilsonsAlgorithm(Generator):
    """
    Uniform spanning tree via loop-erased random walks.

    Each walk starts on a random cell outside the tree and wanders until it
    touches the tree. Whenever it crosses its own path the loop is cut off,
    so only the loop-erased path gets carved.
    """
    def run(self) -> Iterator[str]:
        total = len(self.grid.cells)
        in_tree = bytearray(total)
        in_tree[self.rng.randrange(total)] = 1
        remaining = total - 1

        while remaining > 0:
            # Pick a random cell not in the tree
            cell = self.rng.randrange(total)
            while in_tree[cell]:
                cell = self.rng.randrange(total)

            path = self._walk(cell, in_tree)

            # Carve path into tree. path[i][1] is the step taken from path[i-1].
            for i in range(1, len(path)):
                prev = path[i - 1][0]
                self.carve(prev, path[i][1])
                in_tree[prev] = 1
                remaining -= 1

            yield f"Remaining: {remaining}"

        yield "Done"

    def _walk(self, cell: int, in_tree: bytearray) -> List[Tuple[int, int]]:
        """Random walk from cell until it hits the tree. Returns [(cell, dir_in), ...]."""
        path: List[Tuple[int, int]] = [(cell, 0)]
        # Where each cell sits on the current path
        position: Dict[int, int] = {cell: 0}

        while not in_tree[cell]:
            cell, dir_bit = self.rng.choice(list(self.grid.get_neighbors(cell)))
            if cell in position:
                # Loop erasure
                cut = position[cell] + 1
                for erased, _ in path[cut:]:
                    del position[erased]
                del path[cut:]
            else:
                position[cell] = len(path)
                path.append((cell, dir_bit))

        return path
