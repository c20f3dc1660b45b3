"""PGN4 → PGN conversion pipeline."""

from __future__ import annotations

import logging
import re

from pgn4convert.convert.headers import HeaderRewriter, extract_variant_name
from pgn4convert.convert.models import ConversionResult
from pgn4convert.convert.options import ConversionOptions, VariantPolicy
from pgn4convert.convert.resolver import MoveResolver
from pgn4convert.core.notation.coords import CoordinateMapper
from pgn4convert.core.notation.gating import rewrite_gating
from pgn4convert.core.notation.pgn import render_game, split_games
from pgn4convert.core.notation.preprocess import preprocess
from pgn4convert.core.types import BoardDimensions, dimensions_from_fen
from pgn4convert.errors import InvalidHeaderError, OracleUnavailableError
from pgn4convert.oracle.interfaces import RulesOracle

_LOGGER = logging.getLogger(__name__)

_DEFAULT_DIMENSIONS = BoardDimensions(8, 8)
_EMBEDDED_DIM_RE = re.compile(r"""^\[StartFen4 ".*'dim':'(\d+)x(\d+)'""", re.MULTILINE)
_SITE_RE = re.compile(r'^\[Site "(.*)"\]', re.MULTILINE)


def embedded_dimensions(text: str) -> BoardDimensions | None:
    """Board size declared in a ``StartFen4`` header, e.g. ``'dim':'8x8'``."""
    match = _EMBEDDED_DIM_RE.search(text)
    if match is None:
        return None
    return BoardDimensions(int(match.group(1)), int(match.group(2)))


def variant_dimensions(oracle: RulesOracle, variant: str) -> BoardDimensions:
    """Derive the native board size from the variant's starting FEN."""
    try:
        return dimensions_from_fen(oracle.starting_fen(variant))
    except ValueError as exc:
        _LOGGER.warning("Could not auto-detect dimensions for variant %s: %s", variant, exc)
        return _DEFAULT_DIMENSIONS


def _dimension_variant(
    text: str, oracle: RulesOracle, options: ConversionOptions
) -> str | None:
    variant = options.variant
    if variant is None:
        site = _SITE_RE.search(text)
        variant = extract_variant_name(site.group(1)) if site else None
    if variant is None:
        return None
    if variant in oracle.variants():
        return variant
    if options.unsupported_variant == VariantPolicy.FALLBACK:
        return options.fallback_variant
    return None


def resolve_dimensions(
    text: str, oracle: RulesOracle, options: ConversionOptions
) -> BoardDimensions:
    """Pick the native board size for a whole conversion run.

    Caller overrides win per axis, then the embedded ``dim`` metadata, then
    the starting position of the override or first detected variant, and
    finally 8x8.
    """
    if options.files is not None and options.ranks is not None:
        return BoardDimensions(options.files, options.ranks)

    derived = embedded_dimensions(text)
    if derived is None:
        variant = _dimension_variant(text, oracle, options)
        derived = (
            variant_dimensions(oracle, variant)
            if variant is not None
            else _DEFAULT_DIMENSIONS
        )

    dimensions = BoardDimensions(
        options.files or derived.files,
        options.ranks or derived.ranks,
    )
    _LOGGER.debug("Using board dimensions %s", dimensions)
    return dimensions


class Pgn4Converter:
    """Converts PGN4 text into standard PGN with a bound rules oracle."""

    __slots__ = ("_oracle", "_options")

    def __init__(
        self, oracle: RulesOracle, options: ConversionOptions | None = None
    ) -> None:
        if not oracle.supports_long_notation():
            raise OracleUnavailableError("Rules oracle cannot render long algebraic notation")
        self._oracle = oracle
        self._options = options or ConversionOptions()

    @property
    def options(self) -> ConversionOptions:
        return self._options

    def translate_text(self, line: str, mapper: CoordinateMapper) -> str:
        """Apply the pure text stages to a movetext *line*."""
        line = preprocess(line)
        if self._options.remap_coordinates:
            line = mapper.remap(line)
        return rewrite_gating(line, castling_square=self._options.gate_castling_square)

    def convert(self, text: str) -> ConversionResult:
        dimensions = resolve_dimensions(text, self._oracle, self._options)
        mapper = CoordinateMapper(dimensions)
        try:
            games = split_games(text)
        except ValueError as exc:
            raise InvalidHeaderError(str(exc)) from exc

        rewriter = HeaderRewriter(self._oracle, self._options)
        result = ConversionResult(text="", dimensions=dimensions, games=games)
        chunks: list[str] = []

        for index, game in enumerate(games):
            headers = rewriter.rewrite(game)
            assert game.variant is not None and game.start_fen is not None
            resolver = MoveResolver(
                self._oracle, game.variant, game.start_fen, game.history, game=index
            )
            lines: list[str] = []
            for line in game.lines:
                if not line.strip():
                    lines.append(line)
                    continue
                lines.append(resolver.resolve_line(self.translate_text(line, mapper)))
            result.unresolved.extend(resolver.unresolved)
            chunks.append(render_game(headers, lines))

        output = "\n".join(chunks)
        if text.endswith("\n"):
            output += "\n"
        result.text = output
        return result


def convert_pgn4(
    text: str, oracle: RulesOracle, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert PGN4 *text* into standard PGN."""
    return Pgn4Converter(oracle, options).convert(text)
