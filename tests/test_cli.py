"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

import pytest

from shapekit.analysis import ShapeAnalyzer
from shapekit.models import Point, rectangle, triangle

CLI = [sys.executable, "-m", "shapekit"]
ROOT = Path(__file__).parent.parent


def run_cli(*args: str) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode != 0
    return json.loads(result.stdout)


@pytest.fixture
def shapes_file(tmp_path):
    analyzer = ShapeAnalyzer()
    analyzer.add_shape(triangle(Point(x=0, y=0), Point(x=3, y=0), Point(x=0, y=4)))
    analyzer.add_shape(rectangle(Point(x=0, y=0), width=5, height=3, label="box"))
    return analyzer.save(tmp_path / "shapes.json")


class TestVersion:
    def test_version(self):
        from shapekit import __version__

        data = run_cli("version")
        assert data == {"ok": True, "version": __version__}


class TestDescribe:
    def test_describe(self, shapes_file):
        data = run_cli("describe", str(shapes_file))
        assert data["ok"] is True
        assert data["count"] == 2
        tri, box = data["shapes"]
        assert tri["kind"] == "triangle"
        assert tri["angle_type"] == "right"
        assert tri["side_type"] == "scalene"
        assert tri["area"] == pytest.approx(6.0)
        assert box["label"] == "box"
        assert box["quad_type"] == "rectangle"
        assert box["vertices"][2] == [5.0, 3.0]

    def test_describe_empty_collection(self, tmp_path):
        path = ShapeAnalyzer().save(tmp_path / "empty.json")
        data = run_cli("describe", str(path))
        assert data["ok"] is True
        assert data["shapes"] == []

    def test_missing_file(self, tmp_path):
        data = run_cli_expect_fail("describe", str(tmp_path / "nope.json"))
        assert data["ok"] is False
        assert "not found" in data["error"]

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"shapes": [{"kind": "triangle", "vertices": []}]}))
        data = run_cli_expect_fail("describe", str(path))
        assert data["ok"] is False
        assert "Invalid shape file" in data["error"]

    def test_binary_file(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        data = run_cli_expect_fail("describe", str(path))
        assert data["ok"] is False
        assert "not UTF-8" in data["error"]

    def test_directory_instead_of_file(self, tmp_path):
        data = run_cli_expect_fail("extremes", str(tmp_path))
        assert data["ok"] is False
        assert "Cannot read" in data["error"]

    def test_non_finite_coordinate(self, tmp_path):
        path = tmp_path / "nan.json"
        path.write_text(
            '{"shapes": [{"kind": "segment", "vertices": '
            '[{"x": 0, "y": 0}, {"x": Infinity, "y": 0}]}]}'
        )
        data = run_cli_expect_fail("describe", str(path))
        assert data["ok"] is False
        assert "Invalid shape file" in data["error"]


class TestExtremes:
    def test_extremes(self, shapes_file):
        data = run_cli("extremes", str(shapes_file))
        assert data["ok"] is True
        assert data["metric"]["max_area"]["label"] == "box"
        assert data["metric"]["min_perimeter"]["kind"] == "triangle"
        assert data["description"]["smallest"]["label"] == "box"
        assert data["description"]["largest"]["kind"] == "triangle"

    def test_empty_collection_fails(self, tmp_path):
        path = ShapeAnalyzer().save(tmp_path / "empty.json")
        data = run_cli_expect_fail("extremes", str(path))
        assert data["ok"] is False
        assert "no shapes" in data["error"]


class TestDemo:
    def test_demo(self):
        data = run_cli("demo")
        assert data["count"] == 6
        assert data["metric"]["max_area"]["kind"] == "square"
        assert data["metric"]["max_perimeter"]["kind"] == "rectangle"
        assert data["description"]["longest"]["kind"] == "segment"

    def test_demo_save(self, tmp_path):
        path = tmp_path / "demo.json"
        run_cli("demo", "--save", str(path))
        loaded = ShapeAnalyzer.load(path)
        assert len(loaded.shapes) == 6
