"""Command-line tools for headless snake sessions."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Headless snake engine runner and configuration tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play one game with the greedy autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--seconds", type=float, default=60.0,
        help="Simulated play time limit.",
    )
    sim_p.add_argument("--fps", type=int, default=60)
    sim_p.add_argument("--high-score", type=int, default=0)
    sim_p.add_argument(
        "--no-power-ups", action="store_true",
        help="Autopilot ignores power-ups when choosing a target.",
    )
    sim_p.add_argument(
        "--json", action="store_true",
        help="Print the final engine state as JSON.",
    )
    sim_p.add_argument(
        "--verbose", action="store_true", help="Log every game event.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write a game config as JSON.")
    cfg_p.add_argument("output", help="Destination path.")
    cfg_p.add_argument(
        "--from", dest="source", type=str, default=None,
        help="Validate and copy an existing config instead of the defaults.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_arcade.autopilot import GreedyPilot
    from snake_arcade.config import GameConfig
    from snake_arcade.engine import GameEngine
    from snake_arcade.events import LoggingObserver
    from snake_arcade.highscore import InMemoryHighScoreStore
    from snake_arcade.loop import FixedStepRunner

    if args.fps < 1:
        raise SystemExit("--fps must be at least 1.")

    config = GameConfig.load(args.config) if args.config else GameConfig()
    store = InMemoryHighScoreStore(args.high_score)
    engine = GameEngine(config, store=store, seed=args.seed)
    if args.verbose:
        engine.add_observer(LoggingObserver())

    runner = FixedStepRunner(engine)
    pilot = GreedyPilot(collect_power_ups=not args.no_power_ups)
    engine.start_playing()
    runner.run(args.seconds, 1.0 / args.fps, before_move=pilot.steer)

    if args.json:
        print(json.dumps(engine.get_state()))  # noqa: T201
    else:
        print(  # noqa: T201
            f"Simulation: {engine.state.value}, score {engine.score}, "
            f"high score {engine.high_score}, length {len(engine.snake)}, "
            f"{runner.moves} moves in {runner.frames} frames"
        )
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from snake_arcade.config import GameConfig

    config = GameConfig.load(args.source) if args.source else GameConfig()
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
