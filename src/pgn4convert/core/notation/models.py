"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from pgn4convert.core.types import Square


@dataclass(slots=True, frozen=True)
class GatingAnnotation:
    """A reserve piece released together with *base_move*.

    ``color_tag`` is the four-player seat letter (``r``, ``y``, ...), which
    has no counterpart in two-player notation and is discarded on encoding.
    """

    base_move: str
    color_tag: str
    piece_type: str
    origin: Square


@dataclass(slots=True)
class GameRecord:
    """One game of the input stream: header tags plus raw movetext lines."""

    headers: dict[str, str] = field(default_factory=dict)
    lines: list[str] = field(default_factory=list)
    variant: str | None = None
    start_fen: str | None = None
    history: list[str] = field(default_factory=list)
