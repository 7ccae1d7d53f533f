"""Summary metrics for a solved ski map."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from skimap.grid import Grid
from skimap.paths import SkiPath


@dataclass(frozen=True)
class RouteMetrics:
    """Deterministic shape and search statistics of one route finding run."""

    cell_count: int
    row_count: int
    width: int
    ragged: bool
    best_distance: int
    start_point_count: int
    candidate_count: int
    selected_count: int
    terminal_cell_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def route_metrics(
    grid: Grid,
    *,
    best_distance: int,
    start_point_count: int,
    candidates: list[SkiPath],
    selected: list[SkiPath],
) -> RouteMetrics:
    """Collect statistics for a solved grid and its enumerated paths."""

    grid.require_solved()
    row_lengths = {len(row) for row in grid.rows()}
    terminal = sum(1 for cell in grid.cells() if cell.max_distance == 0)
    return RouteMetrics(
        cell_count=grid.size,
        row_count=grid.row_count,
        width=grid.width,
        ragged=len(row_lengths) > 1,
        best_distance=best_distance,
        start_point_count=start_point_count,
        candidate_count=len(candidates),
        selected_count=len(selected),
        terminal_cell_count=terminal,
    )
