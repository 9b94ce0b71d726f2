from typing import Dict, Iterator, List
from maze_trace.core.grid import Grid
from maze_trace.algo.base import Generator

class EllersAlgorithm(Generator):
    """
    Row-by-row generator. Every column of the current row carries a set id;
    two cells share an id iff they are already connected somewhere above.

    Merging relabels the whole row, O(n) per merge. A union-find would make
    the same carve decisions.
    """
    JOIN_PROBABILITY = 0.5
    DROP_PROBABILITY = 0.5

    def run(self) -> Iterator[str]:
        n = self.grid.size
        next_set_id = 1
        # 0 = no set yet
        row_sets: List[int] = [0] * n

        for y in range(n):
            # 1. Fresh ids for columns that did not inherit one from above
            for x in range(n):
                if row_sets[x] == 0:
                    row_sets[x] = next_set_id
                    next_set_id += 1

            # 2. Random horizontal joins between different sets
            for x in range(n - 1):
                if row_sets[x] != row_sets[x + 1] and self.rng.random() < self.JOIN_PROBABILITY:
                    self._join(row_sets, y, x)

            if y == n - 1:
                # Last row: join everything still apart
                for x in range(n - 1):
                    if row_sets[x] != row_sets[x + 1]:
                        self._join(row_sets, y, x)
                break

            # 3. At least one passage down per set (not on the last row)
            groups: Dict[int, List[int]] = {}
            for x, set_id in enumerate(row_sets):
                groups.setdefault(set_id, []).append(x)

            next_row: List[int] = [0] * n
            for set_id, columns in groups.items():
                chosen = [x for x in columns if self.rng.random() < self.DROP_PROBABILITY]
                if not chosen:
                    chosen = [self.rng.choice(columns)]
                for x in chosen:
                    self.carve(y * n + x, Grid.SOUTH)
                    next_row[x] = set_id
            row_sets = next_row

            yield f"Row {y + 1}/{n}"

        yield "Done"

    def _join(self, row_sets: List[int], y: int, x: int):
        """Carves east of column x and retags the right-hand set with the left id."""
        self.carve(y * self.grid.size + x, Grid.EAST)
        keep, drop = row_sets[x], row_sets[x + 1]
        for col, set_id in enumerate(row_sets):
            if set_id == drop:
                row_sets[col] = keep
