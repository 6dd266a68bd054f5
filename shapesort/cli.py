"""Command line interface: load a shape file, sort it and report the timing."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from .config import SorterConfig, load_config
from .errors import ShapeSortError
from .loader import load_shapes
from .logging_config import setup_logging
from .performance.benchmark_system import BenchmarkStatus, create_sorting_benchmark
from .shapes import CompareType, Shape, shape_comparator
from .sort_manager import SortAlgorithm, SortManager, parse_algorithm

ALGORITHM_HELP = """\
sorting algorithm:
  b or bubble     - Bubble sort
  s or selection  - Selection sort
  i or insertion  - Insertion sort
  m or merge      - Merge sort
  q or quick      - Quick sort
  h or heap       - Heap sort
  z               - Heap sort (alternative)
"""

EXAMPLES = """\
examples:
  shapesort -fshapes1.txt -tv -sb
  shapesort -ta -sq -f"res/shapes1.txt"
  shapesort -fdata.txt -tarea -smerge
"""


def _filename(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    if not value.strip():
        raise argparse.ArgumentTypeError("filename cannot be empty")
    return value


def _compare_type(value: str) -> CompareType:
    try:
        return CompareType.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Values may be attached to their flag (``-fshapes.txt``) or follow it.
    Flags are accepted in either case and in any order.
    """
    parser = argparse.ArgumentParser(
        prog="shapesort",
        description="Sort geometric shapes from a file by height, base area or volume.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=ALGORITHM_HELP + "\n" + EXAMPLES,
    )
    parser.add_argument("-f", "-F", dest="filename", type=_filename,
                        help="path to the shapes data file")
    parser.add_argument("-t", "-T", dest="compare_type", type=_compare_type,
                        help="comparison criteria: h/height, a/area, v/volume (descending)")
    parser.add_argument("-s", "-S", dest="algorithm",
                        help="sorting algorithm, see below")
    parser.add_argument("--benchmark", metavar="SIZES", type=_sizes, default=None,
                        help="benchmark all algorithms on generated data of the given "
                             "comma-separated sizes instead of sorting a file")
    parser.add_argument("--config", default=None,
                        help="YAML config file (default: config/shapesort.yaml)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper, help="logging level")
    return parser


def _sizes(value: str) -> List[int]:
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid size list: {value}") from e
    if not sizes or any(size < 0 for size in sizes):
        raise argparse.ArgumentTypeError(f"invalid size list: {value}")
    return sizes


def checkpoints(length: int, interval: int) -> List[Tuple[str, int]]:
    """Indices printed after sorting: the first, every ``interval``-th and the last."""
    if length == 0:
        return []
    points = [("First shape", 0)]
    points.extend((f"Shape at index {i}", i) for i in range(interval, length, interval))
    last = length - 1
    if last > 0 and last % interval != 0:
        points.append(("Last shape", last))
    return points


def print_report(shapes: List[Shape], algorithm: SortAlgorithm, compare_type: CompareType,
                 elapsed: float, interval: int) -> None:
    print(f"\nSorting completed using {algorithm.value} sort")
    print(f"Sorted by: {compare_type.description} (descending)")
    print(f"Time taken: {elapsed * 1000:.2f} milliseconds")
    print()
    for label, index in checkpoints(len(shapes), interval):
        print(f"{label}: {shapes[index]}")


def run_benchmarks(sizes: List[int], config: SorterConfig) -> int:
    """Run the comparative benchmark and print the mean time per size."""
    benchmark = create_sorting_benchmark(config)
    try:
        results = benchmark.run_comparative_benchmark(sizes)
    finally:
        benchmark.close()

    failed = False
    for name, result in results.items():
        if result.status is not BenchmarkStatus.COMPLETED:
            print(f"{name}: failed ({result.error_message})", file=sys.stderr)
            failed = True
            continue
        for size_summary in result.get_summary_statistics().values():
            mean_ms = size_summary["execution_time"]["mean"] * 1000
            print(f"{name:<10} n={size_summary['input_size']:<8} {mean_ms:.3f} ms")
    return 1 if failed else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValueError, OSError) as e:
        parser.error(f"invalid config: {e}")
    setup_logging(args.log_level or config.log_level)

    if args.benchmark is not None:
        return run_benchmarks(args.benchmark, config)

    if args.filename is None:
        parser.error("filename is required (-f<filename>)")
    algorithm_name = args.algorithm or config.default_algorithm
    if algorithm_name is None:
        parser.error("sort type is required (-s<sort_algorithm>)")

    compare_type = args.compare_type
    try:
        if compare_type is None:
            compare_type = CompareType.parse(config.default_compare_type)
        algorithm = parse_algorithm(algorithm_name)

        shapes = load_shapes(args.filename)
        if not shapes:
            print("No shapes loaded from file.")
            return 0
        print(f"Loaded {len(shapes)} shapes from {args.filename}")

        elapsed = SortManager().execute(shapes, shape_comparator(compare_type), algorithm)
    except (ShapeSortError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # quick sort recurses once per element on sorted or tie-heavy input
        print(f"Error: {algorithm.value} sort exceeded the recursion limit on this input",
              file=sys.stderr)
        return 1

    print_report(shapes, algorithm, compare_type, elapsed, config.checkpoint_interval)
    return 0


if __name__ == "__main__":
    sys.exit(main())
