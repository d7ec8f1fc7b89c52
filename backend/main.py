import argparse
import logging
import random
import signal
import sys
import threading
from typing import List, Optional

from config import Settings, load_settings
from display import InitializationError
from game_loop import run_loop

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Arrow keys steer, Ctrl-C quits."
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more detail (-v for INFO, -vv for DEBUG)")
    parser.add_argument("--log-file", type=str, required=False, default=None,
                        help="Where to write the log (the terminal belongs to the game)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement, for reproducible games")
    parser.add_argument("--tick-ms", type=positive_int, required=False, default=None,
                        help="Milliseconds between snake moves")
    parser.add_argument("--continuous", action="store_true",
                        help="Keep moving in the last direction instead of one step per key")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags win over environment settings."""
    if args.log_file:
        settings.log_file = args.log_file
    if args.seed is not None:
        settings.seed = args.seed
    if args.tick_ms is not None:
        settings.tick_ms = args.tick_ms
    if args.continuous:
        settings.continuous = True
    return settings


def resolve_log_level(configured: str, verbose: int) -> int:
    level = getattr(logging, configured, None)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose >= 2:
        return min(level, logging.DEBUG)
    if verbose == 1:
        return min(level, logging.INFO)
    return level


def configure_logging(settings: Settings, verbose: int) -> None:
    logging.basicConfig(
        filename=settings.log_file,
        level=resolve_log_level(settings.log_level, verbose),
        format=LOG_FORMAT,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = apply_args(load_settings(), args)
    configure_logging(settings, args.verbose)

    cancel = threading.Event()
    signal.signal(signal.SIGTERM, lambda signum, frame: cancel.set())

    rng = random.Random(settings.seed)
    logger.info("Starting loop (tick=%sms, seed=%s, continuous=%s)",
                settings.tick_ms, settings.seed, settings.continuous)
    try:
        run_loop(
            cancel=cancel,
            rng=rng,
            tick_interval=settings.tick_interval,
            continuous=settings.continuous,
        )
    except InitializationError as e:
        logger.critical("%s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
