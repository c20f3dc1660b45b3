"""Rules oracle backed by python-chess and its variant boards."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import chess
import chess.variant

from pgn4convert.oracle.interfaces import OraclePosition, RulesOracle


class PythonChessPosition(OraclePosition):
    """Position handle wrapping a :class:`chess.Board` (or variant board)."""

    __slots__ = ("_board",)

    def __init__(self, board: chess.Board) -> None:
        self._board = board

    @property
    def board(self) -> chess.Board:
        return self._board

    def push(self, uci: str) -> None:
        self._board.push_uci(uci)

    def legal_moves(self) -> list[str]:
        return [move.uci() for move in self._board.legal_moves]

    def san(self, uci: str) -> str:
        return self._board.san(chess.Move.from_uci(uci))

    def lan(self, uci: str) -> str:
        return self._board.lan(chess.Move.from_uci(uci))

    def parse_san(self, text: str) -> str:
        return self._board.parse_san(text).uci()

    def close(self) -> None:
        self._board.clear_stack()


class PythonChessOracle(RulesOracle):
    """Serves every variant python-chess knows, keyed by UCI variant name."""

    __slots__ = ("_boards",)

    def __init__(self) -> None:
        self._boards: dict[str, type[chess.Board]] = {
            board_cls.uci_variant: board_cls
            for board_cls in chess.variant.VARIANTS
            if board_cls.uci_variant
        }

    def variants(self) -> list[str]:
        return list(self._boards)

    def _board_cls(self, variant: str) -> type[chess.Board]:
        try:
            return self._boards[variant]
        except KeyError:
            raise ValueError(f"Unknown variant: {variant}") from None

    def starting_fen(self, variant: str) -> str:
        return self._board_cls(variant).starting_fen

    @contextmanager
    def open_position(self, variant: str, fen: str) -> Iterator[PythonChessPosition]:
        position = PythonChessPosition(self._board_cls(variant)(fen))
        try:
            yield position
        finally:
            position.close()

    def supports_long_notation(self) -> bool:
        return hasattr(chess.Board, "lan")

