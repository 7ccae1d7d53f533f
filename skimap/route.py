"""End-to-end longest and steepest route finding."""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Any, Iterable

import numpy as np

from skimap.config import RouteConfig
from skimap.grid import Cell, Grid, as_grid
from skimap.metrics import RouteMetrics, route_metrics
from skimap.paths import SkiPath, enumerate_longest_paths, find_best_start_points, format_path
from skimap.solver import solve_distances
from skimap.steepness import select_steepest


@dataclass(frozen=True)
class RouteResult:
    grid: Grid
    paths: tuple[SkiPath, ...]
    candidates: tuple[SkiPath, ...]
    start_points: tuple[Cell, ...]
    length: int
    steepness: Any
    metrics: RouteMetrics
    solve_seconds: float
    enumerate_seconds: float

    def to_dict(self) -> dict[str, Any]:
        """Deterministic JSON-ready summary; runtime fields are left out."""

        return {
            "length": self.length,
            "cells": self.length + 1,
            "steepness": self.steepness,
            "paths": [
                {
                    "route": format_path(path),
                    "elevations": list(path.elevations),
                    "coordinates": [list(xy) for xy in path.coordinates],
                }
                for path in self.paths
            ],
            "start_points": [list(cell.key) for cell in self.start_points],
            "metrics": self.metrics.to_dict(),
        }


def find_route(
    source: Grid | np.ndarray | Iterable[Iterable[Any]],
    *,
    config: RouteConfig | None = None,
) -> RouteResult:
    """Run solver, enumerator and selector over `source`.

    Raises `EmptyGridError` when the input holds no cells.
    """

    cfg = config or RouteConfig()
    grid = as_grid(source)

    solve_start = time.perf_counter()
    solve_distances(grid, config=cfg.solver)
    solve_seconds = time.perf_counter() - solve_start

    enumerate_start = time.perf_counter()
    best_distance, start_points = find_best_start_points(grid)
    candidates = enumerate_longest_paths(grid)
    steepest = select_steepest(candidates)
    enumerate_seconds = time.perf_counter() - enumerate_start

    metrics = route_metrics(
        grid,
        best_distance=best_distance,
        start_point_count=len(start_points),
        candidates=candidates,
        selected=steepest,
    )
    return RouteResult(
        grid=grid,
        paths=tuple(steepest),
        candidates=tuple(candidates),
        start_points=tuple(start_points),
        length=best_distance,
        steepness=steepest[0].steepness,
        metrics=metrics,
        solve_seconds=solve_seconds,
        enumerate_seconds=enumerate_seconds,
    )
