"""Selection of the steepest paths among equally long candidates."""

from __future__ import annotations

from typing import Sequence

from skimap.grid import EmptyGridError
from skimap.paths import SkiPath


def select_steepest(paths: Sequence[SkiPath]) -> list[SkiPath]:
    """Return the paths with the greatest elevation drop, keeping input order."""

    if not paths:
        raise EmptyGridError("no candidate paths to select from; the grid contains no cells")

    greatest = max(path.steepness for path in paths)
    return [path for path in paths if path.steepness == greatest]
