"""Affine remap from padded four-player coordinates to native squares.

The four-player board is 14x14 with the two-player field in its middle;
the top-right corner of every native board is aligned with ``k11`` of the
padded system, so the shift on each axis is ``11 - native extent``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pgn4convert.core.types import BoardDimensions, Square, parse_square

_LOGGER = logging.getLogger(__name__)

PADDED_EXTENT = 11
_SQUARE_TOKEN_RE = re.compile(r"([a-l])([0-9]{1,2})")


@dataclass(slots=True, frozen=True)
class CoordinateMapper:
    """Shift squares between the padded and the native coordinate system."""

    dimensions: BoardDimensions

    @property
    def file_offset(self) -> int:
        return PADDED_EXTENT - self.dimensions.files

    @property
    def rank_offset(self) -> int:
        return PADDED_EXTENT - self.dimensions.ranks

    @property
    def is_identity(self) -> bool:
        return self.file_offset == 0 and self.rank_offset == 0

    def to_native(self, square: Square) -> Square:
        return square.shifted(-self.file_offset, -self.rank_offset)

    def to_padded(self, square: Square) -> Square:
        return square.shifted(self.file_offset, self.rank_offset)

    def _replace(self, match: re.Match[str]) -> str:
        padded = parse_square(match.group(0))
        native = self.to_native(padded)
        if not self.dimensions.contains(native):
            _LOGGER.debug("Square %s falls outside the %s board", padded, self.dimensions)
        return str(native)

    def remap(self, text: str) -> str:
        """Rewrite every square token of *text* into native coordinates.

        Every square token is shifted, including ones that land outside the
        native board (``a1`` becomes ``^-2`` on 8x8); such squares never match
        a legal move. Everything that is not a square token is untouched.
        """
        if self.is_identity:
            return text
        return _SQUARE_TOKEN_RE.sub(self._replace, text)
