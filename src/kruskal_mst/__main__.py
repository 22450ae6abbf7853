"""Command line entry point for the Kruskal MST solver."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .kruskal import KruskalConfig, KruskalResult
from .runner import save_edges, solve_file, solve_stream
from .structures import HeapCapacityError

CONNECTED_MESSAGE = "All Nodes Are Connected!"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the minimum spanning tree weight of a weighted graph with Kruskal's algorithm."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Graph file (whitespace integers or a v1,v2,weight CSV); reads stdin when omitted",
    )
    parser.add_argument("--output", type=Path, help="Write the accepted edges to this CSV file")
    parser.add_argument(
        "--vertices",
        type=int,
        default=None,
        help="Vertex count for CSV input only (default: largest vertex id)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Report progress and statistics on stderr",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars in verbose mode",
    )
    args = parser.parse_args(argv)
    if args.vertices is not None and (args.input is None or args.input.suffix.lower() != ".csv"):
        parser.error("--vertices only applies to CSV input")
    return args


def print_result(result: KruskalResult) -> None:
    if result.all_connected:
        print(CONNECTED_MESSAGE)
    print(result.total_weight)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = KruskalConfig()
    if args.verbose is not None:
        config.verbose = args.verbose
    if args.disable_tqdm:
        config.use_tqdm = False

    try:
        if args.input is None:
            result = solve_stream(sys.stdin, config)
            if args.output is not None:
                save_edges(result, args.output)
        else:
            result = solve_file(args.input, args.output, config, vertex_count=args.vertices)
    except FileNotFoundError as exc:
        print(f"ERROR: File not found at '{exc.filename}'.", file=sys.stderr)
        return 1
    except HeapCapacityError as exc:
        print(f"ERROR: {exc}. Please update the declared edge count and try again.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
