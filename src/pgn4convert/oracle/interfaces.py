"""Protocols for the external rules oracle.

The converter never implements chess rules itself: legality, notation
parsing/rendering and starting positions all come from an object that
satisfies :class:`RulesOracle`. Moves cross this boundary as UCI strings.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol


class OraclePosition(Protocol):
    """A position handle bound to one variant and start FEN."""

    def push(self, uci: str) -> None:
        """Advance the position by a legal *uci* move."""
        ...

    def legal_moves(self) -> list[str]: ...

    def san(self, uci: str) -> str: ...

    def lan(self, uci: str) -> str: ...

    def parse_san(self, text: str) -> str:
        """Return the UCI move for *text*; raise ``ValueError`` if illegal."""
        ...

    def close(self) -> None: ...


class RulesOracle(Protocol):
    """Protocol for rules authorities consumed by the converter."""

    def variants(self) -> list[str]: ...

    def starting_fen(self, variant: str) -> str: ...

    def open_position(
        self, variant: str, fen: str
    ) -> AbstractContextManager[OraclePosition]: ...

    def supports_long_notation(self) -> bool: ...
