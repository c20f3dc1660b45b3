"""Conversion layer: header rewriting, move resolution and the pipeline."""

from pgn4convert.convert.headers import HeaderRewriter, extract_variant_name
from pgn4convert.convert.models import ConversionResult, UnresolvedMove
from pgn4convert.convert.options import ConversionOptions, VariantPolicy
from pgn4convert.convert.pipeline import Pgn4Converter, convert_pgn4, resolve_dimensions
from pgn4convert.convert.resolver import MoveResolver, match_move

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "HeaderRewriter",
    "MoveResolver",
    "Pgn4Converter",
    "UnresolvedMove",
    "VariantPolicy",
    "convert_pgn4",
    "extract_variant_name",
    "match_move",
    "resolve_dimensions",
]
