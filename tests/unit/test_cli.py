"""
Тесты для CLI (ldm-binding)
"""

import argparse
import json
import logging

import pytest

from src.cli import DEMO_NUCLIDES, build_parser, main, parse_nuclide, parse_precision
from src.reporting import HEADER


class TestParseNuclide:
    """Тесты разбора A:Z"""

    def test_valid(self) -> None:
        assert parse_nuclide("236:92") == (236, 92)

    @pytest.mark.parametrize("text", ["236", "236:92:1", "a:b", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_nuclide(text)


class TestParsePrecision:
    """Тесты разбора --precision"""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("5", 5), ("15", 15)])
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_precision(text) == expected

    @pytest.mark.parametrize("text", ["-1", "16", "two"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="precision"):
            parse_precision(text)

    @pytest.mark.parametrize("value", ["-1", "99"])
    def test_out_of_range_is_usage_error(
        self, value: str, capsys: pytest.CaptureFixture
    ) -> None:
        """Недопустимая точность — ошибка argparse (exit 2), а не traceback"""
        with pytest.raises(SystemExit) as exc_info:
            main(["--precision", value, "4:2"])
        assert exc_info.value.code == 2
        assert "precision must be in [0, 15]" in capsys.readouterr().err


class TestMain:
    """Тесты точки входа"""

    def test_demo_set(self, capsys: pytest.CaptureFixture) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.count(HEADER) == len(DEMO_NUCLIDES) == 4
        for name in ("Uranium", "Palladium", "Xenon", "Strontium"):
            assert name in out

    def test_explicit_nuclides(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["56:26", "208:82"]) == 0
        out = capsys.readouterr().out
        assert out.count(HEADER) == 2
        assert "Iron" in out
        assert "Lead" in out

    def test_json_output(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--json", "56:26"]) == 0
        reports = json.loads(capsys.readouterr().out)
        assert len(reports) == 1
        assert reports[0]["label"] == "Iron-56"

    def test_upper_isobar(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--upper-isobar", "236:92"]) == 0
        out = capsys.readouterr().out
        assert out.count(HEADER) == 2
        assert "Neptunium" in out

    def test_energy_unit(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--energy-unit", "keV", "4:2"]) == 0
        assert "keV/c^2" in capsys.readouterr().out

    def test_invalid_nucleon_counts(
        self, capsys: pytest.CaptureFixture, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.ERROR, logger="ldm.cli")
        assert main(["5:10"]) == 1
        assert capsys.readouterr().out == ""
        assert "InvalidNucleonCountsError" in caplog.text

    def test_out_of_range(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.ERROR, logger="ldm.cli")
        assert main(["300:119"]) == 1
        assert "OutOfRangeError" in caplog.text

    def test_bad_argument_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["not-a-nuclide"])
        assert exc_info.value.code == 2

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.nuclides == []
        assert args.energy_unit == "MeV"
        assert args.log_level == "WARNING"
