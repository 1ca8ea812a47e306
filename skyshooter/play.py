"""
Command line entry point: play in a window or run a headless random episode
"""

import argparse
import logging

from .config import GameConfig, PRESETS


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the arcade shooter")
    parser.add_argument(
        "--preset",
        type=str,
        default="tiered",
        choices=sorted(PRESETS),
        help="Tuning preset (default: tiered)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for spawns (default: random)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run a random-policy episode without a window",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=3600,
        help="Episode length for --headless (default: 3600)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless:
        from .shooter_env import run_random_episode
        return run_random_episode(render=False, preset=args.preset, seed=args.seed,
                                  max_steps=args.max_steps)

    from .engine import ShooterGame
    from .window import play

    game = ShooterGame(GameConfig.from_preset(args.preset), seed=args.seed)
    final = play(game)
    print(f"Final score: {final.score}  Level: {final.level}")
    return final


if __name__ == "__main__":
    main()
