import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_trace.api import GENERATORS, generate, solve
from maze_trace.core.complexity import MazeInspector

def benchmark_size(size: int, seed: int = 42):
    print(f"\n--- Benchmarking {size}x{size} ({size*size} cells) ---")

    for algo in GENERATORS:
        gen_start = time.time()
        result = generate(size, algo, seed=seed)
        gen_time = time.time() - gen_start

        grid = result.final
        stats = MazeInspector.calculate_stats(grid)
        print(f"[{algo}] Generation Time: {gen_time:.4f}s, trace: {len(result.steps)} snapshots")
        print(f"[{algo}] Dead ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

        # Solver exploration differs between maze styles, not just path length
        for solver in ("depth-first", "a-star", "dijkstra"):
            t0 = time.time()
            res = solve(grid, result.start, result.end, solver)
            print(f"    {solver:<12} {time.time() - t0:.4f}s  path={len(res.path)}  visited={len(res.visits)}")

def run_suite():
    for size in (10, 25, 50):
        benchmark_size(size)

if __name__ == "__main__":
    run_suite()
