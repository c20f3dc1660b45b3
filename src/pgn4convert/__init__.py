"""Convert four-player (PGN4) chess game records into standard PGN."""

from pgn4convert.convert import (
    ConversionOptions,
    ConversionResult,
    Pgn4Converter,
    VariantPolicy,
    convert_pgn4,
)
from pgn4convert.errors import (
    ConversionError,
    InvalidHeaderError,
    OracleUnavailableError,
    UnresolvedMoveError,
    UnsupportedVariantError,
)
from pgn4convert.oracle import RulesOracle, load_oracle

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "InvalidHeaderError",
    "OracleUnavailableError",
    "Pgn4Converter",
    "RulesOracle",
    "UnresolvedMoveError",
    "UnsupportedVariantError",
    "VariantPolicy",
    "convert_pgn4",
    "load_oracle",
]
