"""Exception hierarchy for PGN4 conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for errors that abort a conversion."""


class OracleUnavailableError(ConversionError):
    """The rules oracle could not be initialized or lacks a required mode."""


class UnsupportedVariantError(ConversionError):
    """A detected variant is not among the oracle's supported variants."""

    def __init__(self, variant: str, available: list[str]) -> None:
        super().__init__(
            f"Unsupported variant: {variant}, available variants are: "
            + ", ".join(available)
        )
        self.variant = variant
        self.available = list(available)


class InvalidHeaderError(ConversionError):
    """A bracketed line is not a ``[Key "Value"]`` tag."""


class UnresolvedMoveError(ValueError):
    """No interpretation of a move token matched a legal move.

    Raised for a single token and handled by the resolver; it never aborts a
    conversion.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"Move {token} not found in UCI, SAN or LAN form")
        self.token = token
