"""
Tests for the headless simulation CLI.
"""

import sys
import os
from types import SimpleNamespace

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import cli.simulate as simulate  # noqa: E402


def test_run_simulation_stops_at_max_ticks_or_game_over():
    args = SimpleNamespace(seed=11, max_ticks=50, quiet=True, delay=0.0)

    result = simulate.run_simulation(args)

    assert result["ticks"] <= 50
    assert result["length"] == 2 + result["score"]
    if result["status"] == "over":
        assert result["end_reason"] in {"wall", "self", "board_full"}
    else:
        assert result["ticks"] == 50


def test_same_seed_gives_same_game():
    args = SimpleNamespace(seed=3, max_ticks=200, quiet=True, delay=0.0)
    assert simulate.run_simulation(args) == simulate.run_simulation(args)


def test_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(simulate, "load_dotenv", lambda: None)

    result = simulate.main(["--seed", "1", "--max-ticks", "5"])

    out = capsys.readouterr().out
    assert "Simulation Result Summary" in out
    assert "Tick 1 " in out
    assert result["ticks"] <= 5
