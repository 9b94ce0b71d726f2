import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_trace' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

GENERATOR_CHOICES = ["recursive-backtracker", "dfs", "eller", "wilson"]
SOLVER_CHOICES = ["depth-first", "dfs", "a-star", "astar", "dijkstra"]

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected an integer >= 1, got {value}")
    return n

def write_output(text: str, out: str = None):
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        print(text)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Trace: maze generation and solving with full step traces")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--size", type=int, default=10, help="Maze size (n x n)")
    gen_parser.add_argument("--algo", type=str, default="recursive-backtracker", choices=GENERATOR_CHOICES, help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--out", type=str, help="Output JSON path (default: stdout)")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead-end/corridor statistics")
    gen_parser.add_argument("--diffs", action="store_true", help="Encode the trace as first snapshot plus per-step diffs")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve a maze produced by 'generate'")
    solve_parser.add_argument("input_file", help="Path to maze JSON document")
    solve_parser.add_argument("--algo", type=str, default="depth-first", choices=SOLVER_CHOICES, help="Solver algorithm")
    solve_parser.add_argument("--start", type=str, help="Override start as JSON [x, y]")
    solve_parser.add_argument("--end", type=str, help="Override end as JSON [x, y]")
    solve_parser.add_argument("--out", type=str, help="Output JSON path (default: stdout)")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every generator and solver")
    bench_parser.add_argument("--size", type=int, default=50, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    bench_parser.add_argument("--repeat", type=positive_int, default=3, help="Runs per algorithm")

    return parser

def run_generate(args, logger):
    from maze_trace.api import generate
    from maze_trace.io.wire import WireCodec

    logger.info(f"Generating {args.size}x{args.size} maze with {args.algo}...")
    result = generate(args.size, args.algo, seed=args.seed)
    logger.info(f"{len(result.steps)} steps, entrance {result.start}, exit {result.end}")

    if args.stats:
        from maze_trace.core.complexity import MazeInspector
        logger.info(f"Stats: {MazeInspector.calculate_stats(result.final)}")

    write_output(WireCodec.dump_generation(result, diffs=args.diffs), args.out)
    if args.out:
        logger.info(f"Saved maze to {args.out}")

def run_solve(args, logger):
    from maze_trace.api import solve
    from maze_trace.io.wire import WireCodec

    logger.info(f"Loading {args.input_file}...")
    with open(args.input_file, "r", encoding="utf-8") as f:
        problem = WireCodec.load_problem(f.read())

    start = WireCodec.parse_coordinate(args.start, "start") if args.start else problem["start"]
    end = WireCodec.parse_coordinate(args.end, "end") if args.end else problem["end"]

    logger.info(f"Solving with {args.algo} from {start} to {end}...")
    result = solve(problem["maze"], start, end, args.algo)
    if result.found:
        logger.info(f"Path Length: {len(result.path)}, Visited: {len(result.visits)}")
    else:
        logger.warning("No path found")

    write_output(WireCodec.dump_solution(result, start, end), args.out)

def run_benchmark(args, logger):
    import time
    from maze_trace.api import GENERATORS, SOLVERS, generate, solve

    logger.info(f"Running Benchmark Suite (Size: {args.size}x{args.size})...")

    print(f"\n{'GENERATOR':<24} | {'TIME (s)':<10} | {'STEPS':<10}")
    print("-" * 50)
    mazes = {}
    for name in GENERATORS:
        t_start = time.time()
        for i in range(args.repeat):
            result = generate(args.size, name, seed=args.seed + i)
        duration = (time.time() - t_start) / args.repeat
        mazes[name] = result
        print(f"{name:<24} | {duration:<10.4f} | {len(result.steps):<10}")

    print(f"\n{'MAZE / SOLVER':<36} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 76)
    for maze_name, maze in mazes.items():
        grid = maze.final
        for name in SOLVERS:
            t_start = time.time()
            res = solve(grid, maze.start, maze.end, name)
            duration = time.time() - t_start
            label = f"{maze_name} / {name}"
            print(f"{label:<36} | {duration:<10.4f} | {len(res.path):<10} | {len(res.visits):<10}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_trace")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    from maze_trace.api import InvalidArgument
    try:
        if args.command == "generate":
            run_generate(args, logger)
        elif args.command == "solve":
            run_solve(args, logger)
        elif args.command == "benchmark":
            run_benchmark(args, logger)
    except InvalidArgument as e:
        logger.error(str(e))
        return 2
    except OSError as e:
        logger.error(f"{e.filename or 'I/O'}: {e.strerror or e}")
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
