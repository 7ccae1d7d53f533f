"""Longest and steepest ski route finding."""

from .config import RenderConfig, RouteConfig, SolverConfig
from .grid import EmptyGridError, Grid, UnsolvedGridError
from .route import RouteResult, find_route

__all__ = [
    "EmptyGridError",
    "Grid",
    "RenderConfig",
    "RouteConfig",
    "RouteResult",
    "SolverConfig",
    "UnsolvedGridError",
    "find_route",
]
