"""Ski map readers and result writers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image


class MapParseError(ValueError):
    """Raised when a map file cannot be read as rows of integer elevations."""


def parse_map_text(text: str) -> list[list[int]]:
    """Parse the ``width height`` header format into rows of elevations.

    The header is checked but the rows themselves decide the shape, so ragged
    rows come back as they are. Blank lines are skipped.
    """

    lines = [(number, line.strip()) for number, line in enumerate(text.splitlines(), start=1)]
    lines = [(number, line) for number, line in lines if line]
    if not lines:
        raise MapParseError("Map is empty: expected a 'width height' header line.")

    header_number, header = lines[0]
    sizes = _parse_ints(header, header_number)
    if len(sizes) != 2 or min(sizes) < 0:
        raise MapParseError(
            f"Line {header_number}: header must be two non-negative integers 'width height', got {header!r}."
        )

    return [_parse_ints(line, number) for number, line in lines[1:]]


def parse_map_json(payload: Any) -> list[list[int]]:
    """Accept either a list of rows or an object with a ``rows`` key."""

    rows = payload.get("rows") if isinstance(payload, dict) else payload
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise MapParseError("JSON map must be a list of rows or an object with a 'rows' list.")
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise MapParseError(f"Row {y}, column {x}: elevation must be an integer, got {value!r}.")
    return rows


def load_map(path: str | Path) -> list[list[int]]:
    """Read a map file; ``.json`` files use the JSON layout, anything else the text format."""

    source = Path(path)
    text = source.read_text(encoding="utf-8")
    if source.suffix.lower() == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MapParseError(f"{source}: invalid JSON ({exc.msg} at line {exc.lineno}).") from exc
        return parse_map_json(payload)
    return parse_map_text(text)


def write_map_text(path: str | Path, rows: list[list[int]] | np.ndarray) -> None:
    rows = rows.tolist() if isinstance(rows, np.ndarray) else rows
    width = max((len(row) for row in rows), default=0)
    lines = [f"{width} {len(rows)}"]
    lines.extend(" ".join(str(value) for value in row) for row in rows)
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_png_rgb(path: str | Path, raster_rgb: np.ndarray) -> None:
    image = Image.fromarray(raster_rgb.astype(np.uint8))
    image.save(Path(path))


def write_json(path: str | Path, payload: dict[str, Any]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True)
    Path(path).write_text(text + "\n", encoding="utf-8")


def _parse_ints(line: str, number: int) -> list[int]:
    try:
        return [int(token) for token in line.split()]
    except ValueError as exc:
        raise MapParseError(f"Line {number}: expected space-separated integers, got {line!r}.") from exc
