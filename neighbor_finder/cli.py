"""Command-line interface for neighbor_finder."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from neighbor_finder import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="neighbor-finder",
        description="Nearest-neighbor reports over 2D integer points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report for points in a file (one "X Y" pair per line)
  neighbor-finder report points.txt

  # Type points interactively, finish with 'end'
  neighbor-finder report

  # Count neighbors within 3x the nearest distance, save JSON
  neighbor-finder report points.txt --radius-factor 3 --json output/report.json

  # Single queries against the points in a file
  neighbor-finder query points.txt --nearest 6 6
  neighbor-finder query points.txt --range 4 4 8 8
  neighbor-finder query points.txt --radius 6 6 2.9
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        help="Print nearest distance and neighbor count for every point",
    )
    report_parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Input text file (reads standard input when omitted)",
    )
    report_parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration YAML file",
    )
    report_parser.add_argument(
        "--json",
        type=Path,
        metavar="PATH",
        help="Also write a JSON report to PATH",
    )
    report_parser.add_argument(
        "--radius-factor",
        type=float,
        default=None,
        metavar="F",
        help="Count neighbors within F times the nearest distance (default: 2)",
    )
    report_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print summary statistics after the report",
    )
    report_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bar",
    )
    report_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    # Query command
    query_parser = subparsers.add_parser(
        "query",
        help="Run a single index query over the points in a file",
    )
    query_parser.add_argument(
        "input",
        type=Path,
        help="Input text file",
    )
    group = query_parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--nearest",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Nearest point distinct from (X, Y)",
    )
    group.add_argument(
        "--range",
        type=int,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        help="Points inside the rectangle",
    )
    group.add_argument(
        "--radius",
        type=float,
        nargs=3,
        metavar=("X", "Y", "R"),
        help="Points within distance R of (X, Y)",
    )
    query_parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration YAML file",
    )
    query_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        parser.print_help()
        return 1

    try:
        config = _load_config(parsed)
        _configure_logging(config.log_level, parsed.verbose)

        if parsed.command == "report":
            return run_report(parsed, config)
        elif parsed.command == "query":
            return run_query(parsed, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _load_config(args):
    from neighbor_finder.config import FinderConfig, load_config

    if args.config:
        return load_config(args.config)
    return FinderConfig()


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.INFO if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("neighbor_finder").setLevel(level)


def run_report(args, config) -> int:
    """Run report command."""
    from neighbor_finder.errors import ParseError
    from neighbor_finder.io import load_points, read_points_interactive
    from neighbor_finder.reporting import (
        compute_neighbors,
        format_report_lines,
        write_json_report,
    )

    if args.radius_factor is not None:
        if args.radius_factor <= 0:
            print(f"Error: --radius-factor must be positive, got {args.radius_factor}", file=sys.stderr)
            return 1
        config.radius_factor = args.radius_factor
    if args.no_progress:
        config.show_progress = False

    if args.input is not None:
        if not args.input.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1
        try:
            points = load_points(args.input)
        except ParseError as e:
            print(f"Invalid input file format({e}).")
            return 1
    else:
        points = read_points_interactive(
            sys.stdin,
            sys.stdout,
            end_token=config.end_token,
            prompt=config.prompt,
        )

    result = compute_neighbors(
        points,
        radius_factor=config.radius_factor,
        show_progress=config.show_progress and args.input is not None,
    )

    for line in format_report_lines(result, precision=config.precision):
        print(line)

    if args.stats and result.sufficient:
        _print_stats_summary(result)

    if args.json is not None:
        source = str(args.input) if args.input is not None else "<stdin>"
        path = write_json_report(result, args.json, config=config, source_file=source)
        if args.verbose:
            print(f"Wrote {path}")

    return 0


def run_query(args, config) -> int:
    """Run query command."""
    from neighbor_finder.geometry import Point, Rectangle
    from neighbor_finder.index import KdTree
    from neighbor_finder.io import load_points

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    tree = KdTree(load_points(args.input))
    if args.verbose:
        print(f"Indexed {tree.size} distinct points")

    if args.nearest is not None:
        nearest = tree.nearest(Point(*args.nearest))
        if nearest is None:
            print("No other point")
            return 0
        found = [nearest]
    elif args.range is not None:
        found = tree.range(Rectangle(*args.range))
    else:
        x, y, r = args.radius
        if not (x.is_integer() and y.is_integer()):
            print(f"Error: center coordinates must be integers, got ({x}, {y})", file=sys.stderr)
            return 1
        found = tree.radius(Point(int(x), int(y)), r)

    # Sorted for stable output, query order is unspecified
    for p in sorted(found, key=lambda p: (p.x, p.y)):
        print(p)
    if args.verbose:
        print(f"{len(found)} point(s)")
    return 0


def _print_stats_summary(result) -> None:
    """Print a summary of report statistics."""
    from neighbor_finder.reporting import calculate_neighbor_stats

    stats = calculate_neighbor_stats(result)
    radius = stats["radius"]
    counts = stats["neighbor_count"]

    print("\nSummary:")
    print(f"  Points: {stats['n_input']:,} ({stats['n_distinct']:,} distinct)")
    print(f"  Radius: mean {radius['mean']:.2f}, min {radius['min']:.2f}, max {radius['max']:.2f}")
    print(f"  Neighbors: mean {counts['mean']:.2f}, max {counts['max']:.0f}")
    print(f"  Isolated: {stats['isolated']:,}")


if __name__ == "__main__":
    sys.exit(main())
