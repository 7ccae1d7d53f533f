"""Enumeration of every longest descending path on a solved grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from skimap.grid import Cell, Grid


@dataclass(frozen=True)
class SkiPath:
    """Read-only view over grid cells from a start cell down to a terminal cell."""

    cells: tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    @property
    def length(self) -> int:
        """Number of edges (moves) along the path."""

        return len(self.cells) - 1

    @property
    def steepness(self) -> Any:
        return self.start.elevation - self.end.elevation

    @property
    def elevations(self) -> tuple[Any, ...]:
        return tuple(cell.elevation for cell in self.cells)

    @property
    def coordinates(self) -> tuple[tuple[int, int], ...]:
        return tuple(cell.key for cell in self.cells)


def format_path(path: SkiPath) -> str:
    """Render a path as dash-joined elevations, e.g. ``9-5-3-2-1``."""

    return "-".join(str(elevation) for elevation in path.elevations)


def find_best_start_points(grid: Grid) -> tuple[int, list[Cell]]:
    """Return the grid-wide maximum distance and every cell reaching it, in scan order."""

    grid.require_cells()
    grid.require_solved()

    best_distance = -1
    best: list[Cell] = []
    for cell in grid.cells():
        if cell.max_distance > best_distance:
            best_distance = cell.max_distance
            best = []
        if cell.max_distance == best_distance:
            best.append(cell)
    return best_distance, best


def paths_from_cell(
    grid: Grid,
    cell: Cell,
    *,
    memo: dict[tuple[int, int], list[SkiPath]] | None = None,
) -> list[SkiPath]:
    """Collect every maximal descent starting at `cell`.

    Good directions form a DAG (each step strictly descends), walked here
    with an explicit post-order stack keyed by coordinates. A cell reached
    through several parents is expanded once per `memo`; the resulting order
    matches a direction-by-direction recursive walk.
    """

    grid.require_solved()
    memo = {} if memo is None else memo

    stack: list[tuple[Cell, bool]] = [(cell, False)]
    while stack:
        current, expanded = stack.pop()
        if current.key in memo:
            continue

        below = [grid.neighbour(current, direction) for direction in current.good_directions]
        if not expanded:
            stack.append((current, True))
            for child in reversed(below):
                if child.key not in memo:
                    stack.append((child, False))
            continue

        if not below:
            memo[current.key] = [SkiPath((current,))]
        else:
            memo[current.key] = [
                SkiPath((current,) + tail.cells)
                for child in below
                for tail in memo[child.key]
            ]

    return list(memo[cell.key])


def enumerate_longest_paths(grid: Grid) -> list[SkiPath]:
    """Every path realising the grid-wide maximum distance, grouped by start point."""

    _, start_points = find_best_start_points(grid)
    memo: dict[tuple[int, int], list[SkiPath]] = {}
    paths: list[SkiPath] = []
    for start in start_points:
        paths.extend(paths_from_cell(grid, start, memo=memo))
    return paths
