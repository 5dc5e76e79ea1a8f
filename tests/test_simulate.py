"""Tests for the headless round runner."""

import csv

from gridsnake.config import Config
from gridsnake.game import SnakeGame
from gridsnake.simulate import main, policy_random, policy_straight, run_rounds, write_csv

NO_FOOD_MS = 10 ** 9


class TestRunRounds:

    def test_straight_hits_top_wall(self, game):
        summaries = run_rounds(game, 3, policy_straight)
        assert len(summaries) == 3
        for s in summaries:
            assert (s.moves, s.score, s.reason) == (7, 0, "wall")

    def test_random_policy_finishes_rounds(self, game):
        summaries = run_rounds(game, 5, policy_random, seed=0)
        assert len(summaries) == 5
        assert all(s.reason in ("wall", "self") for s in summaries)

    def test_max_ticks_stops_early(self, game):
        assert run_rounds(game, 1, policy_straight, max_ticks=3) == []

    def test_only_new_rounds_returned(self, game):
        run_rounds(game, 2, policy_straight)
        assert len(run_rounds(game, 1, policy_straight)) == 1
        assert len(game.history) == 3


class TestOutput:

    def test_write_csv(self, tmp_path, game):
        out = tmp_path / "rounds.csv"
        write_csv(run_rounds(game, 2, policy_straight), str(out))
        with open(out, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["round", "moves", "score", "reason"]
        assert rows[1:] == [["1", "7", "0", "wall"], ["2", "7", "0", "wall"]]

    def test_main_writes_csv(self, tmp_path, capsys):
        out = tmp_path / "runs" / "straight.csv"
        assert main(["--rounds", "2", "--policy", "straight", "--out", str(out)]) == 0
        assert out.exists()
        assert "round,moves,score,reason" in capsys.readouterr().out

    def test_main_bad_arena(self, capsys):
        assert main(["--width", "0"]) == 2
        assert "error:" in capsys.readouterr().err


def test_quiet_game_has_no_timed_food():
    game = SnakeGame(Config(food_every_ms=NO_FOOD_MS), notify=lambda msg: None)
    run_rounds(game, 1, policy_straight)
    assert len(game.food) == 0


def test_cli_defaults_follow_config(tmp_path):
    out = tmp_path / "r.csv"
    assert main(["--rounds", "1", "--policy", "straight", "--out", str(out)]) == 0
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    # default 10x10 arena: from (3,3) heading up, the 7th move leaves the top
    assert rows[1][1] == "7"
