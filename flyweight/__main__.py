#!/usr/bin/env python3
r"""Flyweight cache CLI.

Commands:
    python -m flyweight --version     Show version
    python -m flyweight info          Show detailed version and system info
    python -m flyweight demo          Replay the shared-car scenario
    python -m flyweight render        Acquire and render cars

Examples:
    # Replay the demo with debug logging
    python -m flyweight --log-level DEBUG demo

    # Render one registration
    python -m flyweight render "Model S" Tesla Electric --registration TS1234 --owner Alice

    # Render two registrations of the same model; the second reuses the first
    python -m flyweight render \
        --car "Model S" Tesla Electric TS1234 Alice \
        --car "Model S" Tesla Electric TS5678 Bob
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, Tuple

LOG_FORMAT = "[%(asctime)s] [%(levelname)-5s] [%(name)s:%(lineno)d] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("flyweight")

# (model, brand, engine type, registration number, owner)
DEMO_CARS: List[Tuple[str, str, str, str, str]] = [
    ("Model S", "Tesla", "Electric", "TS1234", "Alice"),
    ("Model S", "Tesla", "Electric", "TS5678", "Bob"),
    ("Mustang", "Ford", "Gasoline", "FD1234", "Charlie"),
]


def configure_logging(level: Optional[str] = None) -> None:
    """Route library logs to stderr at `level` (or $FLYWEIGHT_LOG_LEVEL, or INFO)."""
    level = (level or os.getenv("FLYWEIGHT_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
        force=True,
    )


def run_cars(cars: Sequence[Sequence[str]], strict: bool = False) -> int:
    """Acquire each car's shared model, print its details and a summary."""
    from .cache import FlyweightCache
    from .records import CarModel, CarUsage

    cache = FlyweightCache(CarModel, strict=strict)
    for model, brand, engine_type, registration_number, owner in cars:
        # create/reuse is reported on the flyweight.cache logger
        car = cache.acquire(model, brand, engine_type)
        usage = CarUsage(registration_number=registration_number, owner=owner)
        print(cache.render(car, usage))
        print()

    stats = cache.stats
    print(
        f"{len(cars)} car(s) share {stats.size} model(s) "
        f"({stats.misses} created, {stats.hits} reused)"
    )
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show detailed version and system information."""
    from ._version import print_version_info

    print_version_info()
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    return run_cars(DEMO_CARS, strict=args.strict)


def cmd_render(args: argparse.Namespace) -> int:
    cars = list(args.car or [])
    positional = (args.model, args.brand, args.engine)
    if any(value is not None for value in positional):
        if None in positional or args.registration is None or args.owner is None:
            print(
                "error: MODEL BRAND ENGINE need all three values plus "
                "--registration and --owner",
                file=sys.stderr,
            )
            return 2
        cars.insert(0, (*positional, args.registration, args.owner))
    if not cars:
        print("error: pass MODEL BRAND ENGINE or at least one --car", file=sys.stderr)
        return 2
    return run_cars(cars, strict=args.strict)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for flyweight."""
    from ._version import __version__
    from .utils import InvalidAttributes

    parser = argparse.ArgumentParser(
        prog="python -m flyweight",
        description="Flyweight Cache - shared intrinsic state, per-use extrinsic state",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m flyweight --version      Show version
  python -m flyweight info           Show detailed system info
  python -m flyweight demo           Replay the shared-car scenario
        """,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"flyweight {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $FLYWEIGHT_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show detailed version and system information",
        description="Display version, Python, platform, and dependency information.",
    )
    info_parser.set_defaults(func=cmd_info)

    # demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Replay the shared-car scenario",
        description="Acquire three cars, two of which share one model.",
    )
    demo_parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate attributes before building a model",
    )
    demo_parser.set_defaults(func=cmd_demo)

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Acquire and render cars given on the command line",
        description=(
            "Render MODEL BRAND ENGINE with --registration and --owner, "
            "and/or any number of --car entries."
        ),
    )
    render_parser.add_argument("model", nargs="?", metavar="MODEL")
    render_parser.add_argument("brand", nargs="?", metavar="BRAND")
    render_parser.add_argument("engine", nargs="?", metavar="ENGINE")
    render_parser.add_argument(
        "--registration",
        "-r",
        help="Registration number for MODEL BRAND ENGINE",
    )
    render_parser.add_argument(
        "--owner",
        "-o",
        help="Owner for MODEL BRAND ENGINE",
    )
    render_parser.add_argument(
        "--car",
        "-c",
        nargs=5,
        action="append",
        metavar=("MODEL", "BRAND", "ENGINE", "REGISTRATION", "OWNER"),
        help="One car; repeat to share models across registrations",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate attributes before building a model",
    )
    render_parser.set_defaults(func=cmd_render)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except InvalidAttributes as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
