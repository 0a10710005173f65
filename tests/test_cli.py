"""Tests for the rapid command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from takeoff.cli.main import app, parse_lengths
from takeoff.models import InvalidArgumentError

runner = CliRunner()


class TestParseLengths:
    def test_parses_and_skips_blanks(self):
        assert parse_lengths(" 12, 10 ,,8.5") == [12.0, 10.0, 8.5]

    @pytest.mark.parametrize("text", ["", " , ", "12,abc", "12,-3"])
    def test_rejects(self, text):
        with pytest.raises(InvalidArgumentError):
            parse_lengths(text)


class TestDrywallCommand:
    def test_report(self):
        result = runner.invoke(app, [
            "drywall", "--height-feet", "8", "--lengths-feet", "12,10,12,10",
        ])
        assert result.exit_code == 0
        assert "RapidTakeoff - Drywall Takeoff" in result.output
        assert "Walls (ft): 12 + 10 + 12 + 10" in result.output
        assert "Net area:   352 sqft" in result.output
        assert "Sheets:     13" in result.output

    def test_price(self):
        result = runner.invoke(app, [
            "drywall", "--height-feet", "8", "--lengths-feet", "12,10,12,10",
            "--price-per-sheet", "12.5",
        ])
        assert "Est. cost:  $162.50" in result.output

    def test_bad_sheet(self):
        result = runner.invoke(app, [
            "drywall", "--height-feet", "8", "--lengths-feet", "12", "--sheet", "5x5",
        ])
        assert result.exit_code == 1
        assert "[ERROR] Sheet must be '4x8' or '4x12'." in result.output


class TestStudsCommand:
    def test_report(self):
        result = runner.invoke(app, [
            "studs", "--lengths-feet", "12,10,12,10", "--spacing-in", "16", "--waste", "0.05",
        ])
        assert result.exit_code == 0
        assert "Wall 2: 9 studs" in result.output
        assert "Base studs: 38" in result.output
        assert "Total studs: 40" in result.output

    def test_zero_spacing(self):
        result = runner.invoke(app, ["studs", "--lengths-feet", "12", "--spacing-in", "0"])
        assert result.exit_code == 1
        assert "[ERROR]" in result.output


class TestInsulationCommand:
    def test_report(self):
        result = runner.invoke(app, [
            "insulation", "--height-feet", "8", "--lengths-feet", "12,10,12,10",
            "--coverage-sqft", "40", "--name", "R-13",
        ])
        assert result.exit_code == 0
        assert "Product:    R-13" in result.output
        assert "Quantity:   10" in result.output

    def test_zero_coverage(self):
        result = runner.invoke(app, [
            "insulation", "--height-feet", "8", "--lengths-feet", "12", "--coverage-sqft", "0",
        ])
        assert result.exit_code == 1
        assert "Coverage must be greater than zero." in result.output


class TestProjectCommand:
    def test_report_and_svg(self, tmp_path, project_data):
        path = tmp_path / "garage.json"
        path.write_text(json.dumps(project_data), encoding="utf-8")
        svg = tmp_path / "garage.svg"

        result = runner.invoke(app, ["project", str(path), "--svg", str(svg)])

        assert result.exit_code == 0
        assert "RapidTakeoff - Garage" in result.output
        assert "Net area:      447 sqft" in result.output
        assert "Studs:            46 (base 46)" in result.output
        assert svg.read_text(encoding="utf-8").startswith("<svg")

    def test_unwritable_svg_path(self, tmp_path, project_data):
        path = tmp_path / "garage.json"
        path.write_text(json.dumps(project_data), encoding="utf-8")
        svg = tmp_path / "missing-dir" / "garage.svg"

        result = runner.invoke(app, ["project", str(path), "--svg", str(svg)])

        assert result.exit_code == 1
        assert "[ERROR] Cannot write" in result.output
        assert not isinstance(result.exception, OSError)
        assert not svg.exists()

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["project", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "[ERROR] Project file not found" in result.output

    def test_invalid_project(self, tmp_path, project_data):
        project_data["penetrations"][1]["wallIndex"] = 5
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(project_data), encoding="utf-8")

        result = runner.invoke(app, ["project", str(path)])
        assert result.exit_code == 1
        assert "references wall index 5" in result.output
