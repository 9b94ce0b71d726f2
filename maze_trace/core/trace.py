"""
Step-trace helpers for replay consumers.

A trace is the list of full grid snapshots recorded during generation.
These helpers turn it into a dense numpy array, into per-step diffs, and
back again, so a renderer can ship or apply only what changed.
"""
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from maze_trace.core.grid import Grid

Diff = Tuple[np.ndarray, np.ndarray]

def as_array(steps: Sequence[Sequence[int]]) -> np.ndarray:
    """Stacks snapshots into a (len(steps), n*n) uint8 array."""
    if not steps:
        return np.zeros((0, 0), dtype=np.uint8)
    return np.asarray([np.frombuffer(bytes(s), dtype=np.uint8) for s in steps])

def diffs(steps: Sequence[Sequence[int]]) -> List[Diff]:
    """
    For each step after the first: (changed_indices, new_values).
    """
    arr = as_array(steps)
    out = []
    for i in range(1, len(arr)):
        changed = np.flatnonzero(arr[i] != arr[i - 1])
        out.append((changed, arr[i][changed]))
    return out

def replay(initial: Sequence[int], step_diffs: Sequence[Diff]) -> Iterator[np.ndarray]:
    """Applies diffs to a copy of the initial snapshot, yielding every state."""
    state = np.frombuffer(bytes(initial), dtype=np.uint8).copy()
    yield state.copy()
    for indices, values in step_diffs:
        state[indices] = values
        yield state.copy()

def cleared_bits(before: Sequence[int], after: Sequence[int]) -> List[Tuple[int, int]]:
    """(index, wall bits cleared) for every cell that lost walls between two snapshots."""
    a = np.asarray(before, dtype=np.uint8)
    b = np.asarray(after, dtype=np.uint8)
    lost = a & ~b & Grid.ALL_WALLS
    return [(int(i), int(lost[i])) for i in np.flatnonzero(lost)]
