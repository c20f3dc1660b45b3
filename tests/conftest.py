"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

STUB_CHESS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
STUB_WIDE_FEN = "rnbqkbnr2/pppppppp2/10/10/10/10/PPPPPPPP2/RNBQKBNR2 w - - 0 1"

# history -> {uci: (san, lan)}
STUB_TREE: dict[tuple[str, ...], dict[str, tuple[str, str]]] = {
    (): {
        "e2e4": ("e4", "e2-e4"),
        "d2d4": ("d4", "d2-d4"),
        "g1f3": ("Nf3", "Ng1-f3"),
    },
    ("e2e4",): {
        "e7e5": ("e5", "e7-e5"),
        "d7d5": ("d5", "d7-d5"),
    },
    ("e2e4", "e7e5"): {
        "g1f3": ("Nf3", "Ng1-f3"),
        "f1c4": ("Bc4", "Bf1-c4"),
    },
    ("e2e4", "d7d5"): {
        "e4d5": ("exd5", "e4xd5"),
    },
    ("e2e4", "e7e5", "g1f3"): {
        "b8c6": ("Nc6", "Nb8-c6"),
    },
}


class StubPosition:
    def __init__(self, oracle: StubOracle) -> None:
        self._oracle = oracle
        self.history: list[str] = []
        self.closed = False

    def _moves(self) -> dict[str, tuple[str, str]]:
        return self._oracle.tree.get(tuple(self.history), {})

    def push(self, uci: str) -> None:
        if uci not in self._moves():
            raise ValueError(f"illegal move pushed: {uci}")
        self.history.append(uci)

    def legal_moves(self) -> list[str]:
        return list(self._moves())

    def san(self, uci: str) -> str:
        return self._moves()[uci][0]

    def lan(self, uci: str) -> str:
        self._oracle.lan_calls += 1
        return self._moves()[uci][1]

    def parse_san(self, text: str) -> str:
        for uci, (san, _lan) in self._moves().items():
            if san == text.rstrip("+#"):
                return uci
        raise ValueError(f"illegal san: {text}")

    def close(self) -> None:
        self.closed = True


class StubOracle:
    """Tiny scripted rules oracle for deterministic pipeline tests."""

    def __init__(self, *, long_notation: bool = True) -> None:
        self.tree = STUB_TREE
        self.fens = {"chess": STUB_CHESS_FEN, "wide": STUB_WIDE_FEN}
        self.long_notation = long_notation
        self.positions: list[StubPosition] = []
        self.lan_calls = 0

    def variants(self) -> list[str]:
        return list(self.fens)

    def starting_fen(self, variant: str) -> str:
        try:
            return self.fens[variant]
        except KeyError:
            raise ValueError(f"unknown variant: {variant}") from None

    @contextmanager
    def open_position(self, variant: str, fen: str) -> Iterator[StubPosition]:
        assert fen == self.starting_fen(variant)
        position = StubPosition(self)
        self.positions.append(position)
        try:
            yield position
        finally:
            position.close()

    def supports_long_notation(self) -> bool:
        return self.long_notation


@pytest.fixture
def stub_oracle() -> StubOracle:
    return StubOracle()
