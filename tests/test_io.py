from __future__ import annotations

import json
from pathlib import Path

from PIL import Image
import numpy as np
import pytest

from skimap.derive import elevation_array, elevation_preview_rgb, route_preview_rgb
from skimap.config import RenderConfig
from skimap.generate import random_elevations
from skimap.grid import Grid
from skimap.io import MapParseError, load_map, parse_map_json, parse_map_text, write_json, write_map_text, write_png_rgb
from skimap.route import find_route

SAMPLE_MAP = Path(__file__).resolve().parent.parent / "maps" / "sample_map.txt"


def test_parse_reference_text_format() -> None:
    rows = parse_map_text("4 4\n4 8 7 3\n2 5 9 3\n6 3 2 5\n4 4 1 6\n")

    assert rows == [[4, 8, 7, 3], [2, 5, 9, 3], [6, 3, 2, 5], [4, 4, 1, 6]]


def test_parse_text_keeps_ragged_rows_and_skips_blank_lines() -> None:
    rows = parse_map_text("3 2\n\n1 2 3\n4\n\n")

    assert rows == [[1, 2, 3], [4]]


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("", "header"),
        ("4\n1 2 3 4\n", "Line 1"),
        ("2 -1\n", "Line 1"),
        ("2 2\n1 2\n3 x\n", "Line 3"),
    ],
)
def test_parse_text_errors_name_the_line(text: str, fragment: str) -> None:
    with pytest.raises(MapParseError) as exc:
        parse_map_text(text)

    assert fragment in str(exc.value)


def test_parse_json_layouts() -> None:
    assert parse_map_json([[1, 2], [3]]) == [[1, 2], [3]]
    assert parse_map_json({"rows": [[5]]}) == [[5]]

    with pytest.raises(MapParseError):
        parse_map_json({"cells": []})
    with pytest.raises(MapParseError):
        parse_map_json([[1, "2"]])
    with pytest.raises(MapParseError):
        parse_map_json([[True]])


def test_load_map_dispatches_on_suffix(tmp_path) -> None:
    json_path = tmp_path / "map.json"
    json_path.write_text(json.dumps({"rows": [[3, 1]]}), encoding="utf-8")
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{", encoding="utf-8")

    assert load_map(json_path) == [[3, 1]]
    assert load_map(SAMPLE_MAP)[1] == [2, 5, 9, 3]
    with pytest.raises(MapParseError):
        load_map(bad_json)


def test_written_map_reads_back(tmp_path) -> None:
    rows = random_elevations(6, 4, seed=4)
    out_path = tmp_path / "map.txt"
    write_map_text(out_path, rows)

    assert out_path.read_text(encoding="utf-8").splitlines()[0] == "6 4"
    assert load_map(out_path) == rows.tolist()


def test_write_json_is_sorted(tmp_path) -> None:
    out_path = tmp_path / "result.json"
    write_json(out_path, {"b": 1, "a": [1, 2]})

    text = out_path.read_text(encoding="utf-8")
    assert text.index('"a"') < text.index('"b"')
    assert json.loads(text) == {"a": [1, 2], "b": 1}


def test_elevation_array_pads_ragged_rows() -> None:
    values, present = elevation_array(Grid.from_rows([[1, 2], [3]]))

    assert values.shape == (2, 2)
    assert present.tolist() == [[True, True], [True, False]]
    assert np.isnan(values[1, 1])


def test_elevation_preview_marks_missing_cells() -> None:
    config = RenderConfig(missing_color=(0, 0, 0))
    rgb = elevation_preview_rgb(Grid.from_rows([[1, 9], [5]]), config=config)

    assert rgb.shape == (2, 2, 3)
    assert rgb.dtype == np.uint8
    assert rgb[1, 1].tolist() == [0, 0, 0]
    assert rgb[0, 0].tolist() != rgb[0, 1].tolist()


def test_route_preview_png(tmp_path) -> None:
    config = RenderConfig(scale=3)
    result = find_route([[4, 8, 7, 3], [2, 5, 9, 3], [6, 3, 2, 5], [4, 4, 1, 6]])
    rgb = route_preview_rgb(result.grid, result.paths, config=config)

    assert rgb.shape == (12, 12, 3)
    start = result.paths[0].start
    assert rgb[start.y * 3, start.x * 3].tolist() == list(config.start_color)
    end = result.paths[0].end
    assert rgb[end.y * 3 + 2, end.x * 3 + 2].tolist() == list(config.route_color)

    out_path = tmp_path / "route.png"
    write_png_rgb(out_path, rgb)
    with Image.open(out_path) as image:
        assert image.mode == "RGB"
        assert image.size == (12, 12)
