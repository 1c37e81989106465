from __future__ import annotations

import argparse
import logging
import random
import time

import numpy as np

from game.guess import render_row
from game.mastermind import Game
from game.players import RandomCodeMaker
from game.ruleset import DEFAULT_RULES
from solver.consistency_solver import ConsistencySolver, SolverConfig


def render(history, width=8):
    """Render a text-based representation of a guess history."""
    title = "| +++++++++++++ Mastermind ++++++++++++ |"
    colums = "| ++++ Guesses ++++ | ++++ Feedback +++ |"
    line = "+----" * width + "+"

    print(line)
    print(title)
    print(line)
    print(colums)
    print(line)
    for guess in history:
        print(render_row(guess))
        print(line)


def play_games(games, rounds, strategy, seed=None, verbose=False):
    """
    Auto-play games with random secrets and the consistency solver.

    Returns:
        tuple[list[int], list[float], int]: attempts per game, seconds per
        game, number of games won.
    """
    rng = random.Random(seed)
    needed_attempts = []
    times = []
    wins = 0

    for counter in range(1, games + 1):
        start_time = time.perf_counter()

        code_maker = RandomCodeMaker(rng=rng)
        solver = ConsistencySolver(SolverConfig(strategy=strategy))
        Game(code_maker, solver, max_round=rounds).play()

        end_time = time.perf_counter()
        times.append(end_time - start_time)
        needed_attempts.append(len(solver.history))
        if not solver.lost:
            wins += 1

        if verbose:
            render(solver.history)
            result = "lost" if solver.lost else "won"
            print(f"Game {counter}: {result} in {len(solver.history)} attempts.")

    return needed_attempts, times, wins


def main():
    ap = argparse.ArgumentParser(description="Auto-play Mastermind games.")
    ap.add_argument("--games", type=int, default=10, help="Number of games to play")
    ap.add_argument(
        "--rounds",
        type=int,
        default=DEFAULT_RULES["max_attempts"],
        help="Round budget per game",
    )
    ap.add_argument("--strategy", choices=["first", "minimax"], default="minimax")
    ap.add_argument("--seed", type=int, default=None, help="Seed for secret codes")
    ap.add_argument("--verbose", action="store_true", help="Render every board")
    args = ap.parse_args()
    if args.games < 1 or args.rounds < 1:
        ap.error("--games and --rounds must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    needed_attempts, times, wins = play_games(
        args.games, args.rounds, args.strategy, seed=args.seed, verbose=args.verbose
    )

    # Print overall statistics
    attempts = np.array(needed_attempts, dtype=np.int32)
    seconds = np.array(times, dtype=np.float64)
    n = len(times)
    print(f"\nGames won: {wins} of {n}.")
    print(f"Average time over {n} games: {np.mean(seconds):.4f} seconds.")
    print(f"Max time over {n} games: {np.max(seconds):.4f} seconds.")
    print(f"Min time over {n} games: {np.min(seconds):.4f} seconds.")
    print(f"Average attempts over {n} games: {np.mean(attempts):.2f} attempts.")
    print(f"Max attempts over {n} games: {np.max(attempts)} attempts.")
    print(f"Min attempts over {n} games: {np.min(attempts)} attempts.")


if __name__ == "__main__":
    main()
