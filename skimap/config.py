"""Configuration models for route finding and rendering."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


DIRECTION_NAMES = ("west", "south", "east", "north")
DEFAULT_DIRECTION_ORDER = DIRECTION_NAMES
DEFAULT_MAX_ELEVATION = 1500


@dataclass(frozen=True)
class SolverConfig:
    """Controls neighbour scan order in the distance solver."""

    direction_order: tuple[str, ...] = DEFAULT_DIRECTION_ORDER

    def __post_init__(self) -> None:
        order = tuple(self.direction_order)
        if sorted(order) != sorted(DIRECTION_NAMES):
            raise ValueError(
                f"direction_order must be a permutation of {', '.join(DIRECTION_NAMES)}; got {order!r}"
            )
        object.__setattr__(self, "direction_order", order)


@dataclass(frozen=True)
class RenderConfig:
    """Route preview rendering configuration."""

    scale: int = 4
    palette: tuple[str, ...] = (
        "#2b5d34",
        "#5e8c3a",
        "#a7b35a",
        "#c9a66b",
        "#9c7b5b",
        "#bfbfbf",
        "#ffffff",
    )
    route_color: tuple[int, int, int] = (220, 30, 30)
    start_color: tuple[int, int, int] = (255, 215, 0)
    missing_color: tuple[int, int, int] = (0, 0, 0)

    def __post_init__(self) -> None:
        if self.scale < 1:
            raise ValueError("scale must be a positive integer")
        if len(self.palette) < 2:
            raise ValueError("palette needs at least two colours")


@dataclass(frozen=True)
class RouteConfig:
    """Primary route finding configuration."""

    solver: SolverConfig = field(default_factory=SolverConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
