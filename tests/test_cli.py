#!filepath: tests/test_cli.py
import pytest
from typer.testing import CliRunner

from datekit import __version__
from datekit.cli import app


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_rfc2822(runner):
    result = runner.invoke(app, ["rfc2822", "Tue, 26 Jan 2016 13:48:02 GMT"])
    assert result.exit_code == 0
    assert "2016-01-26T13:48:02+00:00" in result.output


def test_iso8601(runner):
    result = runner.invoke(app, ["iso8601", "2016-01-19T08:07:37Z"])
    assert result.exit_code == 0
    assert "Tue, 19 Jan 2016 08:07:37 +0000" in result.output


def test_iso8601_invalid(runner):
    result = runner.invoke(app, ["iso8601", "yesterday"])
    assert result.exit_code == 1
    assert "invalid input" in result.output


@pytest.mark.parametrize("value, expected", [("2000", "True"), ("1900", "False"), ("2012-02-01", "True")])
def test_leap_year(runner, value, expected):
    result = runner.invoke(app, ["leap-year", value])
    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_timespan(runner):
    result = runner.invoke(app, ["timespan", "2000-02-01T10:00:00", "2000-02-01T15:20:10.453"])
    assert result.exit_code == 0
    assert result.output.strip() == "05:20:10.453"


def test_timespan_legacy(runner):
    args = ["timespan", "2000-02-01T10:00:00", "2000-02-01T10:00:00.999600"]

    assert runner.invoke(app, args).output.strip() == "00:00:01.000"
    assert runner.invoke(app, args + ["--legacy"]).output.strip() == "00:00:00.000"


def test_timespan_config_disables_carry(runner, make_config_file):
    cfg = make_config_file({"log": {"level": "ERROR"}, "datetime": {"carry_millis": False}})
    args = ["--config", str(cfg), "timespan", "2000-02-01T10:00:00", "2000-02-01T10:00:00.999600"]

    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert result.output.strip() == "00:00:00.000"


def test_clock_angle_degrees(runner):
    result = runner.invoke(app, ["clock-angle", "2016-04-05T21:00:00Z", "--degrees"])
    assert result.exit_code == 0
    assert float(result.output.strip()) == pytest.approx(90.0)


def test_leap_year_non_decimal_digit_is_user_error(runner):
    result = runner.invoke(app, ["leap-year", "²"])
    assert result.exit_code == 1
    assert "invalid input" in result.output


def test_leap_year_unicode_decimal_year(runner):
    result = runner.invoke(app, ["leap-year", "٢٠٠٠"])
    assert result.exit_code == 0
    assert result.output.strip() == "True"
