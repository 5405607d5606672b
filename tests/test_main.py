"""Tests for the CLI entry point."""

import argparse
import asyncio
import json
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.main import _parse_location, main, parse_args, run_command
from src.service import SolarIntelService
from src.utils.exceptions import UpstreamError
from src.utils.logger import PACKAGE_LOGGER
from tests.fakes import FakeForecastClient, FakeNRELClient, failing

TILT_ARGS = ["optimal-tilt", "--lat", "39.74", "--lon", "-105.18"]


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    package = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package.handlers):
        package.removeHandler(handler)
        handler.close()


class TestParseArgs:
    def test_overview(self) -> None:
        args = parse_args(["overview", "--lat", "39.74", "--lon", "-105.18"])
        assert args.command == "overview"
        assert (args.lat, args.lon) == (39.74, -105.18)
        assert args.log_level == "WARNING"

    def test_pv_estimate_defaults(self) -> None:
        args = parse_args(["pv-estimate", "--lat", "1", "--lon", "2"])
        assert args.capacity == 4.0
        assert args.tilt is None
        assert args.module_type is None

    def test_compare_locations(self) -> None:
        args = parse_args(["compare", "Golden=39.74,-105.18", "33.45,-111.98", "--capacity", "6"])
        assert args.locations == [
            {"lat": 39.74, "lon": -105.18, "name": "Golden"},
            {"lat": 33.45, "lon": -111.98},
        ]
        assert args.capacity == 6.0

    def test_bad_location(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            _parse_location("39.74")

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestRunCommand:
    def test_dispatches_forecast(self) -> None:
        forecast = FakeForecastClient()
        service = SolarIntelService(nrel_client=FakeNRELClient(), forecast_client=forecast)
        args = parse_args(["radiation-forecast", "--lat", "10", "--lon", "20", "--days", "2"])

        output = asyncio.run(run_command(service, args))

        assert forecast.calls == [(10.0, 20.0, 2)]
        assert len(output["dailySummary"]) == 2

    def test_dispatches_compare(self) -> None:
        service = SolarIntelService(nrel_client=FakeNRELClient(), forecast_client=FakeForecastClient())
        args = parse_args(["compare", "A=10,0", "B=20,0"])

        output = asyncio.run(run_command(service, args))

        assert {r["name"] for r in output["rankedLocations"]} == {"A", "B"}


class TestMain:
    @patch("src.main.SolarIntelService.overview", new_callable=AsyncMock)
    def test_prints_json(self, mock_overview: AsyncMock, capsys: pytest.CaptureFixture) -> None:
        mock_overview.return_value = {"solarPotential": "Excellent"}

        main(["overview", "--lat", "33.45", "--lon", "-111.98"])

        assert json.loads(capsys.readouterr().out) == {"solarPotential": "Excellent"}

    @patch("src.main.SolarIntelService.overview", new_callable=AsyncMock)
    def test_provider_failure_exits_1(
        self, mock_overview: AsyncMock, capsys: pytest.CaptureFixture
    ) -> None:
        mock_overview.side_effect = UpstreamError(
            "NREL Solar Resource API returned HTTP 503", context={"status_code": 503}
        )

        with pytest.raises(SystemExit) as exc_info:
            main(["overview", "--lat", "33.45", "--lon", "-111.98"])

        assert exc_info.value.code == 1
        failure = json.loads(capsys.readouterr().out)
        assert failure["error"] == "upstream_error"
        assert failure["statusCode"] == 503

    def test_invalid_input_exits_2(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["overview", "--lat", "95", "--lon", "0"])

        assert exc_info.value.code == 2
        assert json.loads(capsys.readouterr().out)["error"] == "invalid_input"


class TestLogLevel:
    """--log-level governs every module logger."""

    @patch("src.service.OpenMeteoClient", return_value=FakeForecastClient())
    @patch("src.service.NRELClient", return_value=FakeNRELClient())
    def test_error_level_hides_info(
        self, _nrel: MagicMock, _forecast: MagicMock, capsys: pytest.CaptureFixture
    ) -> None:
        main(["--log-level", "ERROR", *TILT_ARGS])

        captured = capsys.readouterr()
        assert " - INFO - " not in captured.err
        assert json.loads(captured.out)["optimalConfig"]["tiltDegrees"] == 46

    @patch("src.service.OpenMeteoClient", return_value=FakeForecastClient())
    @patch("src.service.NRELClient", return_value=FakeNRELClient())
    def test_info_level_shows_module_records(
        self, _nrel: MagicMock, _forecast: MagicMock, capsys: pytest.CaptureFixture
    ) -> None:
        main(["--log-level", "INFO", *TILT_ARGS])

        assert "src.engine.tilt - INFO - " in capsys.readouterr().err

    @patch("src.service.OpenMeteoClient", return_value=FakeForecastClient())
    @patch("src.service.NRELClient", return_value=FakeNRELClient(pvwatts=failing(503)))
    def test_failure_logged_once(
        self, _nrel: MagicMock, _forecast: MagicMock, capsys: pytest.CaptureFixture
    ) -> None:
        with pytest.raises(SystemExit):
            main(["--log-level", "ERROR", *TILT_ARGS])

        assert capsys.readouterr().err.count(" - ERROR - ") == 1
