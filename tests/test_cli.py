"""Tests for the julian CLI."""

import unittest
from unittest.mock import patch

from click.testing import CliRunner

from julian.cli import cli
from julian.date import JulianDate


class TestJulianCLI(unittest.TestCase):
    """Validate CLI wiring for Julian date conversion."""

    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_from_calendar_utc(self) -> None:
        result = self.runner.invoke(cli, ["from-calendar", "2017", "1", "1", "--tz", "UTC"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "2457754.500000000")

    def test_from_calendar_with_time_and_zone(self) -> None:
        result = self.runner.invoke(
            cli,
            ["from-calendar", "2010", "2", "14", "5", "21", "0", "--tz", "America/Los_Angeles"],
        )
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertAlmostEqual(float(result.output), 2455242.05625, places=6)

    def test_from_calendar_normalizes_fields(self) -> None:
        result = self.runner.invoke(cli, ["from-calendar", "2016", "13", "1", "--tz", "UTC"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "2457754.500000000")

    def test_from_calendar_requires_timezone(self) -> None:
        result = self.runner.invoke(cli, ["from-calendar", "2017", "1", "1"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("timezone is required", result.output)

    def test_from_calendar_unknown_timezone(self) -> None:
        result = self.runner.invoke(
            cli, ["from-calendar", "2017", "1", "1", "--tz", "Nowhere/Special"]
        )
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown timezone", result.output)

    def test_to_datetime(self) -> None:
        result = self.runner.invoke(cli, ["to-datetime", "2451545.0"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("2000-01-01T12:00:00+00:00", result.output)
        self.assertIn("day number:   2451545", result.output)
        self.assertIn("day fraction: 0.000000000", result.output)
        self.assertIn("unix:         946728000", result.output)
        self.assertIn("century:      0.000000000000", result.output)

    def test_to_datetime_in_zone(self) -> None:
        result = self.runner.invoke(
            cli, ["to-datetime", "2451545.0", "--tz", "America/Los_Angeles"]
        )
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("2000-01-01T04:00:00-08:00", result.output)

    @patch("julian.cli.JulianDate.now")
    def test_now(self, mock_now) -> None:
        mock_now.return_value = JulianDate(2460754.25)
        result = self.runner.invoke(cli, ["now"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "2460754.250000000")

    def test_verbosity_flags(self) -> None:
        for flags in (["-v"], ["-vv"], ["--debug"], ["--quiet"]):
            with self.subTest(flags=flags):
                with patch("julian.cli.set_log_level") as mock_set_level:
                    result = self.runner.invoke(cli, flags + ["to-datetime", "2451545.0"])
                self.assertEqual(result.exit_code, 0, msg=result.output)
                mock_set_level.assert_called_once()


if __name__ == "__main__":
    unittest.main()
