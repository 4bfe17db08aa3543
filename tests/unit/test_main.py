"""
Unit tests for the terminal entry point helpers.
"""
import argparse

import pytest

from main import build_config, parse_command


class TestParseCommand:
    """Test player input parsing."""

    def test_reveal(self) -> None:
        assert parse_command("r 3 4") == ("r", 3, 4)

    def test_flag_is_case_insensitive(self) -> None:
        assert parse_command("F 0 12") == ("f", 0, 12)

    def test_quit(self) -> None:
        assert parse_command("Q") == ("q", None, None)

    @pytest.mark.parametrize("line", ["", "x 1 2", "r 1", "r a b"])
    def test_malformed_input_raises(self, line: str) -> None:
        with pytest.raises(ValueError):
            parse_command(line)


class TestBuildConfig:
    """Test combining presets with overrides."""

    def _args(self, **overrides) -> argparse.Namespace:
        values = {"difficulty": "hard", "rows": None, "cols": None, "mines": None}
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_preset(self) -> None:
        config = build_config(self._args())
        assert (config.rows, config.cols, config.num_mines) == (20, 30, 120)

    def test_overrides(self) -> None:
        config = build_config(self._args(rows=5, cols=6, mines=4))
        assert (config.rows, config.cols, config.num_mines) == (5, 6, 4)

    def test_invalid_override_raises(self) -> None:
        with pytest.raises(ValueError):
            build_config(self._args(rows=2, cols=2, mines=4))
