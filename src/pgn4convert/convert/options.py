"""Conversion settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class VariantPolicy(StrEnum):
    """What to do when a detected variant is not supported by the oracle."""

    FAIL = "fail"
    FALLBACK = "fallback"


@dataclass(slots=True, frozen=True)
class ConversionOptions:
    """Caller-supplied settings for one conversion run.

    Args:
        variant: Override variant; disables detection from site headers.
        files: Native board files; derived automatically when ``None``.
        ranks: Native board ranks; derived automatically when ``None``.
        unsupported_variant: Policy for variants the oracle does not know.
        fallback_variant: Variant used by the fallback policy and for games
            that carry no variant information at all.
        gate_castling_square: Keep the gating square after the piece letter
            for castling moves (``O-O/Ee8`` rather than ``O-O/E``).
        remap_coordinates: Shift squares from the padded four-player board
            into native coordinates.
    """

    variant: str | None = None
    files: int | None = None
    ranks: int | None = None
    unsupported_variant: VariantPolicy = VariantPolicy.FAIL
    fallback_variant: str = "chess"
    gate_castling_square: bool = True
    remap_coordinates: bool = True

    def __post_init__(self) -> None:
        for name in ("files", "ranks"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        if not self.fallback_variant:
            raise ValueError("fallback_variant must not be empty")
