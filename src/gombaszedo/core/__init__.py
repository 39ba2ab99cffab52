"""Core domain layer — move rules and path generation, no Qt dependency.

Quick start::

    import random

    from gombaszedo.core import GenerationFailure, PieceRule, generate, square_name

    result = generate(PieceRule.KNIGHT, 5, rng=random.Random(42))
    if not isinstance(result, GenerationFailure):
        print([square_name(sq) for sq in result])
"""

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.move_rules import is_legal_move, legal_moves, move_tables
from gombaszedo.core.path_generator import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_STEPS,
    FailureReason,
    GenerationFailure,
    GenerationResult,
    GeneratorLimits,
    InvalidTargetLength,
    Path,
    PathGenerator,
    RandomSource,
    fisher_yates_shuffle,
    generate,
    split_mover,
)
from gombaszedo.core.types import (
    BOARD_SIZE,
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "PieceRule",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Move rules
    "is_legal_move",
    "legal_moves",
    "move_tables",
    # Path generation
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_STEPS",
    "FailureReason",
    "GenerationFailure",
    "GenerationResult",
    "GeneratorLimits",
    "InvalidTargetLength",
    "Path",
    "PathGenerator",
    "RandomSource",
    "fisher_yates_shuffle",
    "generate",
    "split_mover",
]
