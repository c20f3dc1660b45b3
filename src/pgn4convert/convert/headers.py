"""Variant detection and canonical header generation."""

from __future__ import annotations

import logging
import re

from pgn4convert.convert.options import ConversionOptions, VariantPolicy
from pgn4convert.core.notation.models import GameRecord
from pgn4convert.errors import UnsupportedVariantError
from pgn4convert.oracle.interfaces import RulesOracle

_LOGGER = logging.getLogger(__name__)

_SITE_VARIANT_RE = re.compile(r'variants/([^/\]"]*)')

LEGACY_VARIANT_KEY = "Variant"
SITE_KEY = "Site"


def extract_variant_name(site: str) -> str | None:
    """Pull a variant name out of a site URL.

    ``www.chess.com/variants/seirawan-chess/game/1`` → ``'seirawan'``.
    """
    match = _SITE_VARIANT_RE.search(site)
    if match is None:
        return None
    name = match.group(1).replace("-chess", "", 1).replace("-", "")
    return name or None


def variant_title(variant: str) -> str:
    return variant[:1].upper() + variant[1:]


class HeaderRewriter:
    """Rewrites one game's header block and binds its variant/start FEN."""

    __slots__ = ("_oracle", "_options", "_variants")

    def __init__(self, oracle: RulesOracle, options: ConversionOptions) -> None:
        self._oracle = oracle
        self._options = options
        self._variants: list[str] | None = None

    @property
    def supported_variants(self) -> list[str]:
        if self._variants is None:
            self._variants = list(self._oracle.variants())
        return self._variants

    def validate(self, variant: str) -> str:
        """Return *variant*, or the fallback variant if the policy allows."""
        if variant in self.supported_variants:
            return variant
        if self._options.unsupported_variant == VariantPolicy.FALLBACK:
            fallback = self._options.fallback_variant
            if fallback not in self.supported_variants:
                raise UnsupportedVariantError(fallback, self.supported_variants)
            _LOGGER.warning("Unsupported variant: %s, defaulting to %s", variant, fallback)
            return fallback
        raise UnsupportedVariantError(variant, self.supported_variants)

    def rewrite(self, game: GameRecord) -> dict[str, str]:
        """Return the rewritten headers of *game*.

        Sets ``game.variant`` and ``game.start_fen`` as a side effect.
        """
        variant = self._options.variant
        if variant is not None:
            variant = self.validate(variant)

        headers: dict[str, str] = {}
        for key, value in game.headers.items():
            if key == LEGACY_VARIANT_KEY:
                continue
            if key == SITE_KEY:
                if self._options.variant is None:
                    detected = extract_variant_name(value)
                    if detected is not None:
                        _LOGGER.debug("Detected variant %s from site %s", detected, value)
                        variant = self.validate(detected)
                if variant is not None:
                    headers[LEGACY_VARIANT_KEY] = variant_title(variant)
                    continue
            headers[key] = value

        if variant is None:
            variant = self.validate(self._options.fallback_variant)
        if game.headers and LEGACY_VARIANT_KEY not in headers:
            headers[LEGACY_VARIANT_KEY] = variant_title(variant)

        game.variant = variant
        game.start_fen = self._oracle.starting_fen(variant)
        return headers
