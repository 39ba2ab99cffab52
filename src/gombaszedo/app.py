"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.path_generator import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_STEPS
from gombaszedo.game.session import DEFAULT_MUSHROOM_COUNT, MAX_MUSHROOM_COUNT


def _piece_rule(value: str) -> PieceRule:
    try:
        return PieceRule.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _bounded_int(low: int, high: int | None = None) -> Callable[[str], int]:
    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
        if number < low or (high is not None and number > high):
            bound = f">= {low}" if high is None else f"in [{low}, {high}]"
            raise argparse.ArgumentTypeError(f"must be {bound}, got {number}")
        return number

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gombaszedo",
        description="Collect the mushrooms in order, moving like a chess piece.",
    )
    parser.add_argument(
        "--piece",
        type=_piece_rule,
        default=PieceRule.ROOK,
        help="rook, bishop, queen or knight (default: rook)",
    )
    parser.add_argument(
        "--mushrooms",
        type=_bounded_int(1, MAX_MUSHROOM_COUNT),
        default=DEFAULT_MUSHROOM_COUNT,
    )
    parser.add_argument(
        "--mover",
        action="store_true",
        help="show the piece on the board at the start of the path",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--max-attempts", type=_bounded_int(1), default=DEFAULT_MAX_ATTEMPTS
    )
    parser.add_argument(
        "--max-steps", type=_bounded_int(1), default=DEFAULT_MAX_STEPS
    )
    parser.add_argument(
        "--language", choices=("English", "Hungarian"), default="English"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the Gombaszedő application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from gombaszedo.ui.bootstrap import run_application
    from gombaszedo.ui.dialogs.settings_dialog import AppSettings

    settings = AppSettings(
        language=args.language,
        piece_rule=args.piece,
        mushroom_count=args.mushrooms,
        show_mover=args.mover,
        max_attempts=args.max_attempts,
        max_steps=args.max_steps,
        seed=args.seed,
    )
    sys.exit(run_application([sys.argv[0]], settings))


if __name__ == "__main__":
    main()
