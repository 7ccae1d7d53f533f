from __future__ import annotations

import json
from pathlib import Path

from PIL import Image
import pytest

from cli.main import main

SAMPLE_MAP = Path(__file__).resolve().parent.parent / "maps" / "sample_map.txt"


def test_sample_map_report(capsys) -> None:
    code = main([str(SAMPLE_MAP), "--show-candidates"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Longest routes: 8-5-3-2-1, 9-5-3-2-1" in out
    assert "Steepest path 9-5-3-2-1 has length 5 and drop 8" in out
    assert "16 cells" in out


def test_runtime_fields_only_in_written_json(tmp_path) -> None:
    out_path = tmp_path / "result.json"
    assert main([str(SAMPLE_MAP), "--json", str(out_path)]) == 0

    meta = json.loads(out_path.read_text(encoding="utf-8"))
    assert meta["steepness"] == 8
    assert meta["length"] == 4
    assert meta["paths"][0]["elevations"] == [9, 5, 3, 2, 1]
    assert meta["config"]["solver"]["direction_order"] == ["west", "south", "east", "north"]
    assert meta["solve_seconds"] >= 0.0
    assert "generated_at_utc" in meta
    assert meta["source"] == str(SAMPLE_MAP)


def test_random_map_with_preview_and_saved_map(tmp_path) -> None:
    png_path = tmp_path / "route.png"
    map_path = tmp_path / "map.txt"
    args = ["--random", "20x10", "--seed", "3", "--png", str(png_path), "--scale", "2", "--save-map", str(map_path)]

    assert main(args) == 0
    with Image.open(png_path) as image:
        assert image.mode == "RGB"
        assert image.size == (40, 20)
    assert map_path.read_text(encoding="utf-8").splitlines()[0] == "20 10"

    json_a = tmp_path / "a.json"
    json_b = tmp_path / "b.json"
    assert main([str(map_path), "--json", str(json_a)]) == 0
    assert main(["--random", "20x10", "--seed", "3", "--json", str(json_b)]) == 0
    a = json.loads(json_a.read_text(encoding="utf-8"))
    b = json.loads(json_b.read_text(encoding="utf-8"))
    assert a["paths"] == b["paths"]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["map.txt", "--random", "4x4"],
        ["--random", "4by4"],
        ["--random", "4x4", "--directions", "north,south"],
        ["--random", "4x4", "--scale", "0"],
        ["--random", "0x0"],
    ],
)
def test_usage_errors_exit_with_status_2(argv) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)

    assert exc.value.code == 2


def test_unreadable_map_is_a_usage_error(tmp_path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("2 2\n1 a\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main([str(bad)])
    assert exc.value.code == 2

    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])
