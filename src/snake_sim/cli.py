"""Command line entry point for headless snake simulations."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from snake_sim.config import GameConfig

logger = logging.getLogger(__name__)

# GameConfig fields that can be overridden from the command line.
_CONFIG_FLAGS = (
    "grid_width",
    "grid_height",
    "cell_size",
    "tick_seconds",
    "seed",
    "max_food_attempts",
)


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--cell-size", type=float, default=None)
    parser.add_argument("--tick-seconds", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-food-attempts", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Headless snake simulation tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a batch of games with random steering.",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument("--turn-probability", type=float, default=0.2)

    # --- play ---
    play_p = sub.add_parser(
        "play", help="Run one real-time game and print its final state.",
    )
    _add_config_flags(play_p)
    play_p.add_argument("--max-ticks", type=int, default=None)
    play_p.add_argument("--turn-probability", type=float, default=0.2)

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config file.")
    _add_config_flags(config_p)
    config_p.add_argument("output", help="Path for the JSON config.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    values = vars(args)
    overrides = {
        name: values[name] for name in _CONFIG_FLAGS
        if values.get(name) is not None
    }
    return replace(config, **overrides) if overrides else config


def _run_simulate(args: argparse.Namespace) -> int:
    from snake_sim.simulate import simulate

    result = simulate(
        _resolve_config(args),
        games=args.games,
        max_ticks_per_game=args.max_ticks,
        turn_probability=args.turn_probability,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_play(args: argparse.Namespace) -> int:
    import numpy as np

    from snake_sim.controls import RandomInput
    from snake_sim.loop import run_session
    from snake_sim.render import HeadlessRenderer
    from snake_sim.session import GameSession

    config = replace(_resolve_config(args), auto_restart=False)
    rng = np.random.default_rng(config.seed)
    session = GameSession(HeadlessRenderer(), config, rng=rng)
    controls = RandomInput(args.turn_probability, rng=rng)
    try:
        asyncio.run(run_session(session, controls, max_ticks=args.max_ticks))
        logger.info(
            "Game ended at tick %d with score %d.",
            session.tick_count, session.score,
        )
        print(json.dumps(session.get_state()))  # noqa: T201
    finally:
        session.close()
    return 0


def _run_config(args: argparse.Namespace) -> int:
    _resolve_config(args).save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "play": _run_play,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
