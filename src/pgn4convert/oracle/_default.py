"""Resolves the rules oracle used when the caller does not inject one."""

from __future__ import annotations

import logging

from pgn4convert.errors import OracleUnavailableError
from pgn4convert.oracle.interfaces import RulesOracle
from pgn4convert.oracle.pyffish import PyffishOracle
from pgn4convert.oracle.python_chess import PythonChessOracle

_LOGGER = logging.getLogger(__name__)

ORACLE_BACKENDS: dict[str, type[RulesOracle]] = {
    "pyffish": PyffishOracle,
    "python-chess": PythonChessOracle,
}
DEFAULT_BACKEND = "pyffish"


def load_oracle(backend: str = DEFAULT_BACKEND) -> RulesOracle:
    """Create and check a rules oracle.

    Raises :class:`~pgn4convert.errors.OracleUnavailableError` when the
    backend is unknown or the rules library cannot be set up.
    """
    try:
        oracle_cls = ORACLE_BACKENDS[backend]
    except KeyError:
        raise OracleUnavailableError(
            f"Unknown oracle backend: {backend}, choose from "
            + ", ".join(ORACLE_BACKENDS)
        ) from None

    try:
        oracle = oracle_cls()
        variants = oracle.variants()
    except Exception as exc:
        raise OracleUnavailableError(f"Failed to initialize rules oracle: {exc}") from exc
    if not variants:
        raise OracleUnavailableError("Rules oracle reports no supported variants")
    _LOGGER.debug("Rules oracle %s loaded with variants: %s", backend, ", ".join(variants))
    return oracle
