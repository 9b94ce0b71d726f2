from array import array
from typing import Iterable, Iterator, Optional, Tuple

class Grid:
    # Bitmask Constants (stable contract with renderers: consumers test these bits)
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Neighbour order used everywhere: N, E, S, W
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('size', 'cells')

    def __init__(self, size: int, cells: Optional[Iterable[int]] = None):
        self.size = size
        # using 'B' (unsigned char) -> 1 byte per cell
        if cells is None:
            self.cells = array('B', [self.ALL_WALLS] * (size * size))
        else:
            self.cells = array('B', cells)
            if len(self.cells) != size * size:
                raise ValueError(f"Expected {size * size} cells, got {len(self.cells)}")

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Grid":
        """Builds a square grid from a flat row-major sequence of wall masks."""
        cells = list(cells)
        size = int(round(len(cells) ** 0.5))
        if size == 0 or size * size != len(cells):
            raise ValueError(f"{len(cells)} cells do not form a square grid")
        return cls(size, cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.size + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def coords(self, idx: int) -> Tuple[int, int]:
        if 0 <= idx < len(self.cells):
            return idx % self.size, idx // self.size
        raise IndexError(f"Cell index {idx} out of bounds")

    def neighbor_index(self, idx: int, dir_bit: int) -> Optional[int]:
        """Index of the cell across 'dir_bit' from idx, or None past the edge."""
        x, y = self.coords(idx)
        nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            return ny * self.size + nx
        return None

    def has_wall(self, idx: int, dir_bit: int) -> bool:
        return (self.cells[idx] & dir_bit) != 0

    def clear_wall(self, idx: int, dir_bit: int):
        """
        Removes the wall on side 'dir_bit' of cell idx.
        Also removes the OPPOSITE wall from the neighbour, if there is one;
        on the outer edge only the cell's own bit is cleared.
        """
        if not 0 <= idx < len(self.cells):
            raise IndexError(f"Cell index {idx} out of bounds")

        neighbor = self.neighbor_index(idx, dir_bit)

        # Remove wall from cell 1
        self.cells[idx] &= ~dir_bit
        # Remove opposite wall from cell 2
        if neighbor is not None:
            self.cells[neighbor] &= ~self.OPPOSITE[dir_bit]

    def snapshot(self) -> array:
        return array('B', self.cells)

    def copy(self) -> "Grid":
        return Grid(self.size, self.cells)

    def to_list(self):
        return self.cells.tolist()

    def get_neighbors(self, idx: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (neighbor_idx, direction_to_neighbor) for all in-bounds neighbours.
        Does NOT check walls (that's for pathfinding).
        """
        x, y = self.coords(idx)
        n = self.size
        # North
        if y > 0:
            yield (idx - n, self.NORTH)
        # East
        if x < n - 1:
            yield (idx + 1, self.EAST)
        # South
        if y < n - 1:
            yield (idx + n, self.SOUTH)
        # West
        if x > 0:
            yield (idx - 1, self.WEST)

    def get_open_neighbors(self, idx: int) -> Iterator[int]:
        """
        Yields neighbor indices that are NOT blocked by a wall.
        """
        val = self.cells[idx]
        for nidx, dir_bit in self.get_neighbors(idx):
            if not (val & dir_bit):
                yield nidx
