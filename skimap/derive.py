"""Raster previews of ski maps and selected routes."""

from __future__ import annotations

from typing import Iterable

from matplotlib.colors import ListedColormap
import numpy as np

from skimap.config import RenderConfig
from skimap.grid import Grid
from skimap.paths import SkiPath


def elevation_array(grid: Grid) -> tuple[np.ndarray, np.ndarray]:
    """Pad a ragged grid into a float array plus a mask of cells that exist."""

    height, width = grid.row_count, grid.width
    values = np.full((height, width), np.nan, dtype=np.float64)
    present = np.zeros((height, width), dtype=bool)
    for cell in grid.cells():
        values[cell.y, cell.x] = float(cell.elevation)
        present[cell.y, cell.x] = True
    return values, present


def elevation_preview_rgb(grid: Grid, *, config: RenderConfig | None = None) -> np.ndarray:
    """Colour elevations into discrete bands of the configured palette."""

    cfg = config or RenderConfig()
    values, present = elevation_array(grid)
    rgb = np.zeros(values.shape + (3,), dtype=np.uint8)
    rgb[...] = np.array(cfg.missing_color, dtype=np.uint8)
    if not np.any(present):
        return rgb

    lo = float(np.min(values[present]))
    hi = float(np.max(values[present]))
    scale = max(hi - lo, 1e-6)
    norm = np.clip((values - lo) / scale, 0.0, 1.0)

    cmap = ListedColormap(list(cfg.palette), name="ski_elevation")
    rgba = cmap(norm[present])
    rgb[present] = np.round(rgba[:, :3] * 255.0).astype(np.uint8)
    return rgb


def route_preview_rgb(
    grid: Grid,
    paths: Iterable[SkiPath],
    *,
    config: RenderConfig | None = None,
) -> np.ndarray:
    """Elevation preview with route cells and their start cells highlighted, upscaled."""

    cfg = config or RenderConfig()
    rgb = elevation_preview_rgb(grid, config=cfg)
    route_color = np.array(cfg.route_color, dtype=np.uint8)
    start_color = np.array(cfg.start_color, dtype=np.uint8)

    for path in paths:
        for cell in path.cells:
            rgb[cell.y, cell.x] = route_color
        rgb[path.start.y, path.start.x] = start_color

    return upscale_nearest(rgb, cfg.scale)


def upscale_nearest(raster: np.ndarray, factor: int) -> np.ndarray:
    if factor < 1:
        raise ValueError("factor must be a positive integer")
    if factor == 1:
        return raster
    return np.repeat(np.repeat(raster, factor, axis=0), factor, axis=1)
