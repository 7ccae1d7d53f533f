"""Longest strictly-descending distance for every cell of a ski map."""

from __future__ import annotations

import numpy as np

from skimap.config import SolverConfig
from skimap.grid import Cell, Direction, Grid, directions_in_order


def solve_distances(grid: Grid, *, config: SolverConfig | None = None) -> Grid:
    """Fill `max_distance` and `good_directions` for every cell of `grid`.

    Cells are visited from the lowest elevation upwards, so every strictly
    lower neighbour is final by the time a cell reads it. Equal elevations
    never feed each other; the stable sort keeps their row-major order.
    Solving an already solved grid returns it untouched when the direction
    order matches; a different order raises `ValueError`, since tie order is
    fixed at the first solve.
    """

    grid.require_cells()
    cfg = config or SolverConfig()
    if grid.solved:
        if grid.direction_order != cfg.direction_order:
            raise ValueError(
                f"grid was solved with direction order {grid.direction_order!r}, "
                f"cannot reuse it with {cfg.direction_order!r}; build a fresh grid"
            )
        return grid

    directions = directions_in_order(cfg.direction_order)

    for cell in cells_low_to_high(grid):
        _process_cell(grid, cell, directions)

    grid.mark_solved(cfg.direction_order)
    return grid


def cells_low_to_high(grid: Grid) -> list[Cell]:
    cells = list(grid.cells())
    elevations = np.array([cell.elevation for cell in cells])
    order = np.argsort(elevations, kind="stable")
    return [cells[int(i)] for i in order]


def _process_cell(grid: Grid, cell: Cell, directions: tuple[Direction, ...]) -> None:
    best = 0
    good: list[Direction] = []

    for direction in directions:
        neighbour = grid.neighbour(cell, direction)
        if neighbour is None or not neighbour.elevation < cell.elevation:
            continue

        via_neighbour = neighbour.max_distance + 1
        if via_neighbour > best:
            good = []
            best = via_neighbour
        if via_neighbour >= best:
            good.append(direction)

    cell.max_distance = best
    cell.good_directions = good
