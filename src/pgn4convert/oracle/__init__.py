"""Rules oracle package: protocols, pyffish and python-chess adapters."""

from pgn4convert.oracle._default import DEFAULT_BACKEND, ORACLE_BACKENDS, load_oracle
from pgn4convert.oracle.interfaces import OraclePosition, RulesOracle
from pgn4convert.oracle.pyffish import PyffishOracle, PyffishPosition
from pgn4convert.oracle.python_chess import PythonChessOracle, PythonChessPosition

__all__ = [
    "DEFAULT_BACKEND",
    "ORACLE_BACKENDS",
    "OraclePosition",
    "PyffishOracle",
    "PyffishPosition",
    "PythonChessOracle",
    "PythonChessPosition",
    "RulesOracle",
    "load_oracle",
]
