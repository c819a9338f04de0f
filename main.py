#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py evaluate [--difficulty {beginner,intermediate,expert}] [--games N]
    python main.py watch [--difficulty ...] [--games N] [--delay SECONDS]
"""
import argparse
import logging
import os
import time

from src.minesweeper.agents import RandomAgent
from src.minesweeper.board import DIFFICULTIES, get_difficulty
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.evaluation import EvaluationConfig, Evaluator


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline on a preset."""
    difficulty = get_difficulty(args.difficulty)
    config = EvaluationConfig(
        difficulty=difficulty,
        num_episodes=args.games,
        seed=args.seed,
    )
    agent = RandomAgent.for_difficulty(difficulty, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games on {difficulty.label}...")
    results = Evaluator(config).evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def watch(args: argparse.Namespace) -> None:
    """Watch the random agent play in the terminal."""
    difficulty = get_difficulty(args.difficulty)
    env = MinesweeperEnv(difficulty=difficulty, render_mode="ansi")
    agent = RandomAgent.for_difficulty(difficulty, seed=args.seed)

    wins = 0
    for game in range(args.games):
        obs, info = env.reset(seed=args.seed if game == 0 else None)
        agent.reset()
        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, col = agent.action_to_position(action)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins} | Flags left: {info['flags_remaining']}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())
            time.sleep(args.delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play the engine with a baseline agent"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")
    watch_parser = subparsers.add_parser("watch", help="Watch the random agent play")
    for sub in (eval_parser, watch_parser):
        sub.add_argument(
            "--difficulty",
            choices=sorted(DIFFICULTIES),
            default="beginner",
            help="Board preset",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    eval_parser.add_argument(
        "--games", type=positive_int, default=100, help="Number of games to play"
    )
    watch_parser.add_argument(
        "--games", type=positive_int, default=3, help="Number of games to watch"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "evaluate":
        evaluate(args)
    elif args.command == "watch":
        watch(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
