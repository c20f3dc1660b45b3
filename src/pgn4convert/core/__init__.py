"""Core text layer — pure string transforms with zero external dependencies.

Quick start::

    from pgn4convert.core import BoardDimensions, CoordinateMapper, preprocess

    mapper = CoordinateMapper(BoardDimensions(8, 8))
    print(mapper.remap(preprocess("1. h5-h7 .. g10-g8")))  # 1. e2-e4 d7-d5
"""

from pgn4convert.core.notation import (
    CoordinateMapper,
    GameRecord,
    GatingAnnotation,
    preprocess,
    rewrite_gating,
    split_games,
)
from pgn4convert.core.types import (
    BoardDimensions,
    Square,
    dimensions_from_fen,
    parse_square,
    square_name,
)

__all__ = [
    # Types / helpers
    "BoardDimensions",
    "Square",
    "dimensions_from_fen",
    "parse_square",
    "square_name",
    # Text stages
    "CoordinateMapper",
    "GameRecord",
    "GatingAnnotation",
    "preprocess",
    "rewrite_gating",
    "split_games",
]
