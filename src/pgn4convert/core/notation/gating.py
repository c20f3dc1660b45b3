"""Re-encoding of gating moves (``Bf11-j7&@yH-f11``) as ``/``-suffixes."""

from __future__ import annotations

import re

from pgn4convert.core.notation.models import GatingAnnotation
from pgn4convert.core.types import parse_square

_GATING_RE = re.compile(r"([^ ]*)&@([a-z])([A-Z])-([a-l][0-9]{1,2})")

# King/rook square pairs written for castling, in native coordinates.
CASTLING_ALIASES: dict[str, str] = {
    "O-O": "O-O",
    "O-O-O": "O-O-O",
    "h1-e1": "O-O",
    "h8-e8": "O-O",
    "a1-e1": "O-O-O",
    "a8-e8": "O-O-O",
}


def _annotation(match: re.Match[str]) -> GatingAnnotation:
    base, color, piece, square = match.groups()
    return GatingAnnotation(base, color, piece, parse_square(square))


def parse_gating(token: str) -> GatingAnnotation | None:
    """Return the gating annotation carried by *token*, if any."""
    match = _GATING_RE.fullmatch(token)
    if match is None:
        return None
    return _annotation(match)


def encode_gating(annotation: GatingAnnotation, *, castling_square: bool = True) -> str:
    """Render *annotation* in the two-player ``move/Piece[square]`` form.

    Castling moves name the gating square because either the king's or the
    rook's origin can receive the piece; for other moves it is implied.
    """
    castle = CASTLING_ALIASES.get(annotation.base_move)
    if castle is None:
        return f"{annotation.base_move}/{annotation.piece_type}"
    if castling_square:
        return f"{castle}/{annotation.piece_type}{annotation.origin}"
    return f"{castle}/{annotation.piece_type}"


def rewrite_gating(text: str, *, castling_square: bool = True) -> str:
    """Rewrite every gating suffix in *text*."""

    def _replace(match: re.Match[str]) -> str:
        return encode_gating(_annotation(match), castling_square=castling_square)

    return _GATING_RE.sub(_replace, text)
