# src/gridsnake/simulate.py
from __future__ import annotations
import argparse
import csv
import os
import sys
from typing import Callable, List, Optional

import numpy as np  # type: ignore

from .config import Config, ConfigError
from .game import RoundSummary, SnakeGame
from .grid import Direction

Policy = Callable[[SnakeGame, np.random.Generator], Optional[Direction]]

DIRECTIONS = list(Direction)


# --------------------------
# Policies
# --------------------------
def policy_random(game: SnakeGame, rng: np.random.Generator) -> Optional[Direction]:
    """
    Press a uniformly random arrow key every tick.
    Reversals get refused by the snake, same as for a human.
    """
    return DIRECTIONS[rng.integers(len(DIRECTIONS))]


def policy_straight(game: SnakeGame, rng: np.random.Generator) -> Optional[Direction]:
    """Never touch the keys; the snake runs into the top wall."""
    return None


POLICIES = {
    "random": policy_random,
    "straight": policy_straight,
}


# --------------------------
# Round loop
# --------------------------
def run_rounds(
    game: SnakeGame,
    rounds: int,
    policy: Policy = policy_random,
    dt_ms: Optional[float] = None,
    max_ticks: int = 10_000,
    seed: Optional[int] = None,
) -> List[RoundSummary]:
    """
    Drive the game headless until `rounds` more rounds have ended.
    Each tick feeds dt_ms (default: one move interval) so the snake steps
    once per tick. Stops early after max_ticks ticks in total.
    """
    rng = np.random.default_rng(seed)
    dt = game.cfg.move_every_ms if dt_ms is None else dt_ms
    start = len(game.history)

    ticks = 0
    while len(game.history) - start < rounds and ticks < max_ticks:
        game.tick(dt, policy(game, rng))
        ticks += 1

    return game.history[start:]


def write_csv(summaries: List[RoundSummary], out_csv: str) -> None:
    rows = [("round", "moves", "score", "reason")]
    for i, s in enumerate(summaries, start=1):
        rows.append((i, s.moves, s.score, s.reason))
    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None) -> int:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="gridsnake-sim", description="Play rounds without a window.")
    parser.add_argument("--rounds", type=int, default=50)
    parser.add_argument("--policy", type=str, default="random", choices=sorted(POLICIES))
    parser.add_argument("--width", type=int, default=defaults.arena_width)
    parser.add_argument("--height", type=int, default=defaults.arena_height)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-ticks", type=int, default=100_000)
    parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="CSV file for per-round results (round,moves,score,reason)",
    )
    args = parser.parse_args(argv)

    try:
        cfg = Config(arena_width=args.width, arena_height=args.height, seed=args.seed)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # keep stdout for the CSV-style table
    game = SnakeGame(cfg, notify=lambda msg: None)

    print(f"Running {args.rounds} round(s) with policy={args.policy}")
    print("round,moves,score,reason")
    summaries = run_rounds(game, args.rounds, POLICIES[args.policy], max_ticks=args.max_ticks, seed=args.seed)
    for i, s in enumerate(summaries, start=1):
        print(f"{i},{s.moves},{s.score},{s.reason}")

    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        write_csv(summaries, args.out)
        print(f"\nSaved results → {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
