"""Rules oracle backed by Fairy-Stockfish through the pyffish binding.

pyffish is stateless: every call takes the variant, a FEN and a move list.
Position handles therefore only track the current FEN.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pyffish

from pgn4convert.oracle.interfaces import OraclePosition, RulesOracle


def _bare(san: str) -> str:
    return san.rstrip("+#")


class PyffishPosition(OraclePosition):
    """Position handle over a variant name and the FEN reached so far."""

    __slots__ = ("_variant", "_fen", "_moves")

    def __init__(self, variant: str, fen: str) -> None:
        self._variant = variant
        self._fen = fen
        self._moves: list[str] = []

    @property
    def fen(self) -> str:
        return self._fen

    @property
    def moves(self) -> list[str]:
        return list(self._moves)

    def push(self, uci: str) -> None:
        if uci not in self.legal_moves():
            raise ValueError(f"Illegal move: {uci}")
        self._fen = pyffish.get_fen(self._variant, self._fen, [uci])
        self._moves.append(uci)

    def legal_moves(self) -> list[str]:
        return list(pyffish.legal_moves(self._variant, self._fen, []))

    def san(self, uci: str) -> str:
        return pyffish.get_san(self._variant, self._fen, uci, False, pyffish.NOTATION_SAN)

    def lan(self, uci: str) -> str:
        return pyffish.get_san(self._variant, self._fen, uci, False, pyffish.NOTATION_LAN)

    def parse_san(self, text: str) -> str:
        """Match *text* against the SAN of every legal move.

        Check and mate suffixes are ignored on both sides.
        """
        wanted = _bare(text)
        matches = [uci for uci in self.legal_moves() if _bare(self.san(uci)) == wanted]
        if not matches:
            raise ValueError(f"Illegal move: {text}")
        if len(matches) > 1:
            raise ValueError(f"Ambiguous move: {text} → {matches}")
        return matches[0]

    def close(self) -> None:
        self._moves.clear()


class PyffishOracle(RulesOracle):
    """Serves every variant built into Fairy-Stockfish (seirawan included)."""

    __slots__ = ("_variants",)

    def __init__(self) -> None:
        self._variants: list[str] = list(pyffish.variants())

    def variants(self) -> list[str]:
        return list(self._variants)

    def starting_fen(self, variant: str) -> str:
        if variant not in self._variants:
            raise ValueError(f"Unknown variant: {variant}")
        return pyffish.start_fen(variant)

    @contextmanager
    def open_position(self, variant: str, fen: str) -> Iterator[PyffishPosition]:
        if variant not in self._variants:
            raise ValueError(f"Unknown variant: {variant}")
        position = PyffishPosition(variant, fen)
        try:
            yield position
        finally:
            position.close()

    def supports_long_notation(self) -> bool:
        return hasattr(pyffish, "NOTATION_LAN")
