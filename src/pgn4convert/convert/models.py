"""Data models produced by a conversion run."""

from __future__ import annotations

from dataclasses import dataclass, field

from pgn4convert.core.notation.models import GameRecord
from pgn4convert.core.types import BoardDimensions


@dataclass(slots=True, frozen=True)
class UnresolvedMove:
    """A movetext token that no interpretation could match.

    Both numbers are 1-based, as printed in the warning log: game 1 is
    ``ConversionResult.games[0]`` and ply is the half-move the token would
    have been within that game.
    """

    game: int
    ply: int
    token: str


@dataclass(slots=True)
class ConversionResult:
    text: str
    dimensions: BoardDimensions
    games: list[GameRecord] = field(default_factory=list)
    unresolved: list[UnresolvedMove] = field(default_factory=list)
