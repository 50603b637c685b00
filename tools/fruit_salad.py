"""CLI entry point for :func:`editor.salad.run_salad`."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from console.io import LineSink, LineSource, StdinLineSource, StdoutLineSink
from domain.errors import SequenceError
from domain.models import SaladSettings
from editor.salad import run_salad

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Shuffle a fruit salad, then insert and remove fruit by index.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the shuffle so repeated runs produce the same salad.",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Keep the initial fruit in declaration order.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of diagnostics written to stderr.",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    *,
    source: LineSource | None = None,
    sink: LineSink | None = None,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")
    settings = SaladSettings(seed=args.seed, shuffle=not args.no_shuffle)

    try:
        report = run_salad(
            settings,
            source if source is not None else StdinLineSource(),
            sink if sink is not None else StdoutLineSink(),
        )
    except SequenceError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Final salad: %s", report.final)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
