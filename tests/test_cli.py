"""Tests for the earth-geo command-line interface."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from earth_geo.cli import cli
from earth_geo.geo import distance
from earth_geo.point import GeoPoint


@pytest.fixture
def runner():
    return CliRunner()


class TestGeometryCommands:
    def test_distance(self, runner):
        result = runner.invoke(cli, ["distance", "0,0", "90,0"])
        expected = distance(GeoPoint(0, 0), GeoPoint(90, 0))
        assert result.exit_code == 0
        assert f"{expected:.3f} km" in result.output

    def test_distance_negative_coordinates(self, runner):
        result = runner.invoke(cli, ["distance", "-120.5,35.8", "-120.5,35.8,12"])
        assert result.exit_code == 0
        assert "0.000 km" in result.output

    def test_line_of_sight_on_ground(self, runner):
        result = runner.invoke(cli, ["line-of-sight", "0,0,0", "10,10,0"])
        assert result.exit_code == 0
        assert "0.000 km" in result.output

    def test_line_of_sight_out_of_domain(self, runner):
        result = runner.invoke(cli, ["line-of-sight", "0,0,-1", "0,0"])
        assert result.exit_code == 0
        assert "nan km" in result.output

    def test_comm_radius(self, runner):
        result = runner.invoke(cli, ["comm-radius", "0,0,1", "--signal-distance", "1000"])
        assert result.exit_code == 0
        assert "Horizon" in result.output
        assert "Radius" in result.output

    def test_comm_radius_requires_signal_distance(self, runner):
        result = runner.invoke(cli, ["comm-radius", "0,0,1"])
        assert result.exit_code == 2

    def test_bad_point(self, runner):
        result = runner.invoke(cli, ["distance", "abc,1", "0,0"])
        assert result.exit_code == 2
        assert "not a number" in result.output

    def test_verbose_flag(self, runner, caplog):
        result = runner.invoke(cli, ["--verbose", "line-of-sight", "0,0,-1", "0,0"])
        assert result.exit_code == 0
        assert logging.getLogger("earth_geo").level == logging.DEBUG
        assert "Line of sight undefined" in caplog.text

    def test_quiet_by_default(self, runner):
        result = runner.invoke(cli, ["line-of-sight", "0,0,-1", "0,0"])
        assert result.exit_code == 0
        assert logging.getLogger("earth_geo").level == logging.WARNING

    def test_distance_infinite_longitude(self, runner):
        result = runner.invoke(cli, ["distance", "inf,0", "0,0"])
        assert result.exit_code == 0
        assert "nan km" in result.output


class TestPointCommand:
    def test_table(self, runner):
        result = runner.invoke(cli, ["point", "10.5,45.25,0.1"])
        assert result.exit_code == 0
        assert "Longitude DMS" in result.output
        assert "10º30'0.00\"" in result.output

    def test_json(self, runner):
        result = runner.invoke(cli, ["point", "10.5,45.25,0.1", "--json"])
        assert result.exit_code == 0
        assert GeoPoint.from_json(result.output) == GeoPoint(10.5, 45.25, 0.1)

    def test_out_of_range_warns(self, runner):
        result = runner.invoke(cli, ["point", "200,95"])
        assert result.exit_code == 0
        assert "warning" in result.output
        assert "latitude 95.0 out of range" in result.output

    def test_infinite_longitude(self, runner):
        result = runner.invoke(cli, ["point", "inf,0"])
        assert result.exit_code == 0
        assert "longitude inf is not finite" in result.output
        assert "n/a" in result.output


class TestDMSCommands:
    def test_to_dms(self, runner):
        result = runner.invoke(cli, ["to-dms", "10.5"])
        assert result.exit_code == 0
        assert result.output == "10º30'0\"\n"

    def test_to_dms_precision(self, runner):
        result = runner.invoke(cli, ["to-dms", "10.5125", "--precision", "2"])
        assert result.exit_code == 0
        assert result.output == "10º30'45.00\"\n"

    def test_to_dms_negative(self, runner):
        result = runner.invoke(cli, ["to-dms", "-10.5"])
        assert result.exit_code == 0
        assert result.output == "-10º-30'0\"\n"

    def test_to_dms_rejects_nan(self, runner):
        result = runner.invoke(cli, ["to-dms", "nan"])
        assert result.exit_code == 2

    def test_from_dms(self, runner):
        result = runner.invoke(cli, ["from-dms", "10", "30", "0"])
        assert result.exit_code == 0
        assert result.output == "10.5\n"
