from __future__ import annotations

import argparse
import logging
import sys

from .analysis.batch import run_batch
from .core.catalog import BASELINE_SEED, DEFAULT_SETTINGS, ROULETTE_BETS, SLOT_PROFILES
from .core.config import load_limits
from .core.models import ConfigurationError
from .core.rng import random_seed
from .features.simulation.service import SimulationConfig, build_settings
from .ui.presenters import RichBatchPresenter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bankrollsim", description="Seeded Monte Carlo bankroll simulator (CLI)")
    p.add_argument("--machine", choices=("slot", "roulette"), default=DEFAULT_SETTINGS.machine)
    p.add_argument("--profile", choices=tuple(SLOT_PROFILES), default="balanced", help="Slot volatility profile")
    p.add_argument("--bet", choices=tuple(ROULETTE_BETS), default="even-money", help="Roulette bet type")
    p.add_argument("--spins", type=int, default=DEFAULT_SETTINGS.spins, help="Spins per session")
    p.add_argument("--bet-size", type=float, default=DEFAULT_SETTINGS.bet_size, help="Stake per spin")
    p.add_argument("--runs", type=int, default=1, help="Independent sessions to simulate")
    # If omitted, the baseline seed keeps output reproducible; --random-seed picks a fresh one.
    p.add_argument("--seed", type=int, default=None, help=f"Base seed (default {BASELINE_SEED})")
    p.add_argument("--random-seed", action="store_true", help="Use a fresh random base seed")
    p.add_argument("--display", type=int, default=None, help="Runs listed individually (default from env)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return p


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if args.random_seed:
        seed = random_seed()
    else:
        seed = args.seed if args.seed is not None else BASELINE_SEED

    limits = load_limits()
    config = SimulationConfig(
        machine=args.machine,
        spins=min(args.spins, limits.max_spins),
        bet_size=args.bet_size,
        profile=args.profile,
        bet=args.bet,
        runs=min(max(args.runs, 1), limits.max_runs),
        seed=seed,
    )
    try:
        settings = build_settings(config)
        result = run_batch(settings, config.runs, seed, display_cap=args.display)
    except ConfigurationError as exc:
        print(f"bankrollsim: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    RichBatchPresenter(no_color=args.no_color).show(result)


if __name__ == "__main__":
    main()
