"""Ski map data model: cardinal directions, cells and ragged grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

import numpy as np


class EmptyGridError(ValueError):
    """Raised when a grid with no cells reaches the route finder."""


class UnsolvedGridError(RuntimeError):
    """Raised when paths are requested before distances were computed."""


@dataclass(frozen=True)
class Direction:
    """Cardinal step between 4-connected cells."""

    name: str
    dx: int
    dy: int


WEST = Direction("west", -1, 0)
SOUTH = Direction("south", 0, 1)
EAST = Direction("east", 1, 0)
NORTH = Direction("north", 0, -1)

DIRECTIONS: dict[str, Direction] = {d.name: d for d in (WEST, SOUTH, EAST, NORTH)}


def directions_in_order(names: Iterable[str]) -> tuple[Direction, ...]:
    return tuple(DIRECTIONS[name] for name in names)


@dataclass(eq=False)
class Cell:
    """One grid position.

    `max_distance` and `good_directions` are written once by the distance
    solver; coordinates and elevation never change.
    """

    x: int
    y: int
    elevation: Any
    max_distance: int | None = None
    good_directions: list[Direction] = field(default_factory=list)

    @property
    def key(self) -> tuple[int, int]:
        return (self.x, self.y)


class Grid:
    """Row-major collection of cells; rows may differ in length.

    Lookups outside the data (negative or past the end of a row, or a
    missing row) return ``None``. A grid starts unsolved and becomes
    read-only once the distance solver marks it solved.
    """

    def __init__(self, rows: list[list[Cell]]) -> None:
        self._rows = rows
        self._solved = False
        self._direction_order: tuple[str, ...] | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "Grid":
        """Build cells from elevations indexed by row, then column."""

        return cls(
            [
                [Cell(x, y, elevation) for x, elevation in enumerate(row)]
                for y, row in enumerate(rows)
            ]
        )

    @classmethod
    def from_array(cls, elevations: np.ndarray) -> "Grid":
        if elevations.ndim != 2:
            raise ValueError("elevations must be a 2D array")
        return cls.from_rows(elevations.tolist())

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def direction_order(self) -> tuple[str, ...] | None:
        """Neighbour scan order the distances were solved with, ``None`` while unsolved."""

        return self._direction_order

    def mark_solved(self, direction_order: tuple[str, ...]) -> None:
        self._solved = True
        self._direction_order = tuple(direction_order)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self._rows), default=0)

    @property
    def size(self) -> int:
        return sum(len(row) for row in self._rows)

    def __len__(self) -> int:
        return self.size

    def rows(self) -> list[list[Cell]]:
        return self._rows

    def cells(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def cell_at(self, x: int, y: int) -> Cell | None:
        if y < 0 or y >= len(self._rows):
            return None
        row = self._rows[y]
        if x < 0 or x >= len(row):
            return None
        return row[x]

    def neighbour(self, cell: Cell, direction: Direction) -> Cell | None:
        return self.cell_at(cell.x + direction.dx, cell.y + direction.dy)

    def require_cells(self) -> None:
        if self.size == 0:
            raise EmptyGridError("grid contains no cells")

    def require_solved(self) -> None:
        if not self._solved:
            raise UnsolvedGridError("grid distances have not been computed; run solve_distances first")


def as_grid(source: Grid | np.ndarray | Iterable[Iterable[Any]]) -> Grid:
    """Coerce a grid, 2D array or nested rows into a `Grid`."""

    if isinstance(source, Grid):
        return source
    if isinstance(source, np.ndarray):
        return Grid.from_array(source)
    return Grid.from_rows(source)
