"""
Tests for main.py - the command-line runner.
"""

import json
import pytest
import sys
import os
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import EngineSettings
from main import run_game, build_parser, main


@patch("engine.core.time.sleep")
class TestRunGame:
    """Tests for run_game()."""

    def test_stops_at_max_ticks(self, mock_sleep):
        """run_game() ends after max_ticks when the snake survives."""
        settings = EngineSettings(rows=16, cols=32, tick_rate=10, borders=False)

        result = run_game(settings, player_variant="greedy", max_ticks=5, seed=3, quiet=True)

        assert result["ticks"] <= 5
        assert result["ticks"] == 5 or result["death_reason"] is not None
        assert result["player"] == "greedy"
        assert result["score"] == result["consumed"] * 10

    def test_summary_is_json_serializable(self, mock_sleep):
        """The summary can be dumped as JSON, final board included."""
        settings = EngineSettings(rows=8, cols=8, tick_rate=10, borders=True)

        result = run_game(settings, player_variant="random", max_ticks=3, seed=1, quiet=True)

        data = json.loads(json.dumps(result))
        assert data["final_state"]["rows"] == 8
        assert data["final_state"]["cols"] == 8
        assert data["final_state"]["borders"] is True

    def test_prints_board_after_moves(self, mock_sleep, capsys):
        """Without quiet the board is printed after every move."""
        settings = EngineSettings(rows=8, cols=8, tick_rate=10, borders=False)

        run_game(settings, player_variant="greedy", max_ticks=2, seed=0, quiet=False)

        out = capsys.readouterr().out
        assert out.count("Score:") >= 1
        assert "H" in out

    def test_same_seed_same_game(self, mock_sleep):
        """A fixed seed makes games reproducible."""
        settings = EngineSettings(rows=10, cols=10, tick_rate=10, borders=True)

        first = run_game(settings, player_variant="random", max_ticks=30, seed=42, quiet=True)
        second = run_game(settings, player_variant="random", max_ticks=30, seed=42, quiet=True)

        assert first["final_state"] == second["final_state"]
        assert first["ticks"] == second["ticks"]

    def test_unknown_player_raises(self, mock_sleep):
        """An unknown player variant is rejected."""
        with pytest.raises(ValueError):
            run_game(EngineSettings(), player_variant="nobody", max_ticks=1, quiet=True)


class TestCli:
    """Tests for argument parsing and main()."""

    def test_parser_defaults(self):
        """Flags left out fall back to the environment settings."""
        args = build_parser().parse_args([])
        assert args.rows is None
        assert args.cols is None
        assert args.tick_rate is None
        assert args.borders is None
        assert args.player == "random"

    def test_parser_border_flags(self):
        """--borders and --wrap toggle the border mode."""
        parser = build_parser()
        assert parser.parse_args(["--borders"]).borders is True
        assert parser.parse_args(["--wrap"]).borders is False

    def test_parser_rejects_both_border_flags(self):
        """--borders and --wrap are mutually exclusive."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--borders", "--wrap"])

    @patch("config.load_dotenv")
    @patch("engine.core.time.sleep")
    def test_main_prints_result(self, mock_sleep, mock_load_dotenv, capsys, monkeypatch):
        """main() runs a game and prints the JSON summary."""
        monkeypatch.setenv("SNAKE_ROWS", "12")
        monkeypatch.setenv("SNAKE_COLS", "12")

        exit_code = main(["--rows", "8", "--max-ticks", "3", "--quiet", "--seed", "1", "--player", "greedy"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "Game Result Summary:" in out
        summary = json.loads(out.split("Game Result Summary:", 1)[1])
        assert summary["final_state"]["rows"] == 8
        assert summary["final_state"]["cols"] == 12
        assert summary["player"] == "greedy"
