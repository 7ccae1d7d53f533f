"""CLI entry point for ski route finding."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
import platform
import re
import time

import numpy as np
from skimap.config import DEFAULT_MAX_ELEVATION, DIRECTION_NAMES, RenderConfig, RouteConfig, SolverConfig
from skimap.derive import route_preview_rgb
from skimap.generate import random_elevations
from skimap.grid import EmptyGridError
from skimap.io import MapParseError, load_map, write_json, write_map_text, write_png_rgb
from skimap.paths import format_path
from skimap.route import find_route

_SIZE_RE = re.compile(r"^(\d+)[xX](\d+)$")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the longest, then steepest, downhill ski route on a map")
    parser.add_argument("map", nargs="?", help="Map file: 'width height' header then rows of elevations, or .json")
    parser.add_argument("--random", metavar="WxH", help="Generate a random map instead of reading one (e.g. 1000x1000)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for --random")
    parser.add_argument(
        "--max-elevation",
        type=int,
        default=DEFAULT_MAX_ELEVATION,
        help="Highest elevation for --random",
    )
    parser.add_argument(
        "--directions",
        default=",".join(DIRECTION_NAMES),
        help="Comma separated neighbour scan order; decides the listing order of tied routes",
    )
    parser.add_argument("--show-candidates", action="store_true", help="Also list every longest route before the steepness filter")
    parser.add_argument("--json", metavar="PATH", help="Write the result summary as JSON")
    parser.add_argument("--png", metavar="PATH", help="Write a preview image with the selected routes drawn in")
    parser.add_argument("--scale", type=int, default=RenderConfig().scale, help="Pixels per cell in the preview image")
    parser.add_argument("--save-map", metavar="PATH", help="Write the (generated) map in the text format")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.map is None) == (args.random is None):
        parser.error("give exactly one of a map file or --random WxH")

    try:
        config = RouteConfig(
            solver=SolverConfig(direction_order=tuple(name.strip() for name in args.directions.split(","))),
            render=RenderConfig(scale=args.scale),
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.random is not None:
        match = _SIZE_RE.match(args.random)
        if match is None:
            parser.error(f"--random expects WIDTHxHEIGHT, got {args.random!r}")
        width, height = int(match.group(1)), int(match.group(2))
        try:
            rows = random_elevations(width, height, max_elevation=args.max_elevation, seed=args.seed)
        except ValueError as exc:
            parser.error(str(exc))
        source = f"random {width}x{height} seed={args.seed}"
    else:
        try:
            rows = load_map(args.map)
        except (OSError, MapParseError) as exc:
            parser.error(str(exc))
        source = args.map

    if args.save_map:
        write_map_text(args.save_map, rows)

    run_start = time.perf_counter()
    try:
        result = find_route(rows, config=config)
    except EmptyGridError as exc:
        parser.error(f"{source}: {exc}")
    run_seconds = time.perf_counter() - run_start

    if args.show_candidates:
        print("Longest routes: " + ", ".join(format_path(path) for path in result.candidates))

    for path in result.paths:
        print(f"Steepest path {format_path(path)} has length {len(path)} and drop {path.steepness}")
    print(
        f"Map {source}: {result.metrics.cell_count} cells, "
        f"{result.metrics.start_point_count} start point(s), "
        f"{result.metrics.candidate_count} longest route(s), "
        f"{result.metrics.selected_count} steepest"
    )
    print(f"Search time: {run_seconds:.3f} s (solve {result.solve_seconds:.3f} s)")

    if args.json:
        meta = {
            **result.to_dict(),
            "source": source,
            "config": config.to_dict(),
            "generated_at_utc": datetime.now(timezone.utc).isoformat(),
            "solve_seconds": result.solve_seconds,
            "enumerate_seconds": result.enumerate_seconds,
            "python_version": platform.python_version(),
            "numpy_version": np.__version__,
        }
        write_json(args.json, meta)

    if args.png:
        write_png_rgb(args.png, route_preview_rgb(result.grid, result.paths, config=config.render))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
