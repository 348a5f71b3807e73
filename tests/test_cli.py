"""Tests for the command line interface."""

import argparse
import json

import pytest

from recovery_engine.cli import build_parser, format_tsb, get_state_color, main, positive_int
from recovery_engine.models import RecoveryState


class TestHelpers:
    def test_state_colors(self):
        assert get_state_color(RecoveryState.READY) == "green"
        assert get_state_color(RecoveryState.MODERATE) == "yellow"
        assert get_state_color(RecoveryState.RECOVER) == "red"

    def test_format_tsb(self):
        assert "Fresh" in format_tsb(5.0)
        assert "Neutral" in format_tsb(-5.0)
        assert "Fatigued" in format_tsb(-15.0)

    def test_parser_rejects_unknown_range(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["trends", "--input", "x.json", "--range", "3W"])

    def test_positive_int(self):
        assert positive_int("3") == 3
        for bad in ("0", "-2", "three"):
            with pytest.raises(argparse.ArgumentTypeError):
                positive_int(bad)

    @pytest.mark.parametrize("window", ["0", "-2"])
    def test_trends_rejects_non_positive_window(self, window):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["trends", "--input", "x.json", "--sma", window])
        assert exc_info.value.code == 2

    def test_load_rejects_zero_lookback(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["load", "--input", "x.json", "--lookback", "0"])


class TestCommands:
    """Commands run end to end against a samples file."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1

    def test_score(self, samples_file, capsys):
        assert main(["score", "--input", str(samples_file), "--date", "2024-01-15"]) == 0
        assert "RECOVERY" in capsys.readouterr().out

    def test_baseline(self, samples_file, capsys):
        assert main(["baseline", "--input", str(samples_file), "--date", "2024-01-15"]) == 0
        assert "HRV median" in capsys.readouterr().out

    def test_baseline_reports_default(self, tmp_path, capsys):
        path = tmp_path / "short.json"
        path.write_text(json.dumps({"hrv": [{"date": "2024-01-14T06:00:00", "value": 40}]}))

        assert main(["baseline", "--input", str(path), "--date", "2024-01-15"]) == 0
        assert "default baseline" in capsys.readouterr().out

    def test_trends(self, samples_file, capsys):
        assert main(["trends", "--input", str(samples_file), "--metric", "rhr", "--sma", "3"]) == 0
        assert "Slope" in capsys.readouterr().out

    def test_load(self, samples_file, capsys):
        assert main(["load", "--input", str(samples_file), "--date", "2024-01-15"]) == 0
        assert "CTL" in capsys.readouterr().out

    def test_no_data_is_an_error(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("{}")

        assert main(["score", "--input", str(path), "--date", "2024-01-15"]) == 1
        assert "No HRV" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["score", "--input", str(tmp_path / "missing.json")]) == 1
        assert "Invalid samples file" in capsys.readouterr().out

    def test_bad_date(self, samples_file, capsys):
        assert main(["score", "--input", str(samples_file), "--date", "15/01/2024"]) == 2

    def test_trends_explicit_window(self, samples_file, capsys):
        assert main(["trends", "--input", str(samples_file), "--sma", "1"]) == 0
        assert "SMA(1)" in capsys.readouterr().out

    def test_trends_negative_window_exits_cleanly(self, samples_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["trends", "--input", str(samples_file), "--sma", "-2"])
        assert exc_info.value.code == 2

    def test_score_shows_directions(self, samples_file, capsys):
        assert main(["score", "--input", str(samples_file), "--date", "2024-01-15"]) == 0
        assert "↑" in capsys.readouterr().out
