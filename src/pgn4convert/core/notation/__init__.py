"""Notation package: PGN4 text stages and PGN tag helpers."""

from pgn4convert.core.notation.coords import PADDED_EXTENT, CoordinateMapper
from pgn4convert.core.notation.gating import (
    CASTLING_ALIASES,
    encode_gating,
    parse_gating,
    rewrite_gating,
)
from pgn4convert.core.notation.models import GameRecord, GatingAnnotation
from pgn4convert.core.notation.pgn import (
    PGN_RESULT_TOKENS,
    header_line,
    is_passthrough_token,
    parse_header_line,
    render_game,
    split_games,
)
from pgn4convert.core.notation.preprocess import (
    clean_token,
    preprocess,
    remove_separators,
    strip_captured_pieces,
)

__all__ = [
    "CASTLING_ALIASES",
    "PADDED_EXTENT",
    "PGN_RESULT_TOKENS",
    "CoordinateMapper",
    "GameRecord",
    "GatingAnnotation",
    "clean_token",
    "encode_gating",
    "header_line",
    "is_passthrough_token",
    "parse_gating",
    "parse_header_line",
    "preprocess",
    "remove_separators",
    "render_game",
    "rewrite_gating",
    "split_games",
    "strip_captured_pieces",
]
