"""Per-move resolution of mixed UCI/SAN/LAN tokens against the oracle."""

from __future__ import annotations

import logging

from pgn4convert.convert.models import UnresolvedMove
from pgn4convert.core.notation.pgn import is_passthrough_token
from pgn4convert.errors import UnresolvedMoveError
from pgn4convert.oracle.interfaces import OraclePosition, RulesOracle

_LOGGER = logging.getLogger(__name__)


def match_move(position: OraclePosition, token: str) -> str:
    """Return the UCI move that *token* denotes in *position*.

    Interpretations are tried in order: UCI, SAN as understood by the
    oracle's parser, then the LAN rendering of every legal move.
    """
    legal = position.legal_moves()
    if token in legal:
        return token

    try:
        uci = position.parse_san(token)
    except ValueError:
        pass
    else:
        if uci in legal:
            return uci

    for uci in legal:
        if position.lan(uci) == token:
            return uci

    raise UnresolvedMoveError(token)


class MoveResolver:
    """Translates the movetext of one game into the oracle's SAN.

    Every token is matched against a position rebuilt from the start FEN and
    the moves resolved so far, so a token that fails to resolve leaves the
    position untouched for the tokens after it.
    """

    __slots__ = ("_oracle", "_variant", "_start_fen", "_history", "_game", "unresolved")

    def __init__(
        self,
        oracle: RulesOracle,
        variant: str,
        start_fen: str,
        history: list[str] | None = None,
        *,
        game: int = 0,
    ) -> None:
        self._oracle = oracle
        self._variant = variant
        self._start_fen = start_fen
        self._history = history if history is not None else []
        self._game = game
        self.unresolved: list[UnresolvedMove] = []

    @property
    def history(self) -> list[str]:
        """UCI moves resolved so far in this game."""
        return self._history

    def resolve_token(self, token: str) -> str:
        """Resolve *token*, record it in the history and return its SAN.

        Raises :class:`UnresolvedMoveError` if no interpretation matches.
        """
        with self._oracle.open_position(self._variant, self._start_fen) as position:
            for uci in self._history:
                position.push(uci)
            uci = match_move(position, token)
            san = position.san(uci)

        self._history.append(uci)
        _LOGGER.debug("Converting move: %s -> %s (UCI) -> %s (SAN)", token, uci, san)
        return san

    def resolve_line(self, line: str) -> str:
        """Resolve every move token of a movetext *line*."""
        parts: list[str] = []
        for token in line.split():
            if is_passthrough_token(token):
                parts.append(token)
                continue
            try:
                parts.append(self.resolve_token(token))
            except UnresolvedMoveError:
                missed = UnresolvedMove(self._game + 1, len(self._history) + 1, token)
                _LOGGER.warning(
                    "Move %s not found in UCI, SAN or LAN format (game %d, ply %d)",
                    token,
                    missed.game,
                    missed.ply,
                )
                self.unresolved.append(missed)
                parts.append(token)
        return " ".join(parts)
