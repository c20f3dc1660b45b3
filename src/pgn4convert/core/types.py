"""Square and board-extent types shared by the text stages.

Squares are kept symbolic (file letter + rank number) because the same text
is read in two coordinate systems: the padded four-player board before the
remap and the native board of the target variant after it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_SQUARE_RE = re.compile(r"^([a-z])(\d{1,2})$")


@dataclass(slots=True, frozen=True)
class BoardDimensions:
    """Native extent of the target board."""

    files: int = 8
    ranks: int = 8

    def __post_init__(self) -> None:
        if self.files < 1 or self.ranks < 1:
            raise ValueError(
                f"Board dimensions must be positive: {self.files}x{self.ranks}"
            )

    def contains(self, square: Square) -> bool:
        """Return *True* if *square* lies on a board of this extent."""
        return 0 <= square.file_index < self.files and 1 <= square.rank <= self.ranks

    def __str__(self) -> str:
        return f"{self.files}x{self.ranks}"


@dataclass(slots=True, frozen=True)
class Square:
    """A board square, e.g. ``Square("k", 11)``."""

    file: str
    rank: int

    @property
    def file_index(self) -> int:
        """File index counted from ``a`` (may be negative after a shift)."""
        return ord(self.file) - ord("a")

    @classmethod
    def from_indices(cls, file_index: int, rank: int) -> Square:
        return cls(chr(ord("a") + file_index), rank)

    def shifted(self, file_delta: int, rank_delta: int) -> Square:
        return Square.from_indices(self.file_index + file_delta, self.rank + rank_delta)

    def __str__(self) -> str:
        return square_name(self)


def square_name(square: Square) -> str:
    """Human-readable name, e.g. ``Square("e", 4)`` → ``'e4'``."""
    return f"{square.file}{square.rank}"


def parse_square(name: str) -> Square:
    """Parse a square name such as ``'e4'`` or ``'k11'``."""
    match = _SQUARE_RE.match(name)
    if match is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(match.group(1), int(match.group(2)))


def dimensions_from_fen(fen: str) -> BoardDimensions:
    """Count files and ranks of the placement field of *fen*.

    Empty-run counts may have several digits (``10`` on a 10-file board),
    and pocket suffixes such as ``[]`` are ignored.
    """
    placement = fen.split(" ")[0].split("[")[0]
    rows = placement.split("/")
    first = rows[0]
    files = 0
    for run in re.findall(r"\d+|[A-Za-z*]", first):
        files += int(run) if run.isdigit() else 1
    return BoardDimensions(files=files, ranks=len(rows))
