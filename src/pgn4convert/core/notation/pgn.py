"""PGN tag-line and movetext-token helpers."""

from __future__ import annotations

import re

from pgn4convert.core.notation.models import GameRecord

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_MOVE_NUMBER_RE = re.compile(r"^\d")

PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
# Four-player clock/termination placeholders that carry no move.
PLACEHOLDER_TOKENS = frozenset({"T", "R", "S"})


def is_header_line(line: str) -> bool:
    return line.startswith("[")


def parse_header_line(line: str) -> tuple[str, str]:
    """Split a ``[Key "Value"]`` line; the value is returned verbatim.

    Quotes inside the value must be backslash-escaped; escapes are kept.
    """
    match = _PGN_HEADER_RE.match(line.strip())
    if match is None:
        raise ValueError(f"Invalid PGN header line: {line}")
    key, value = match.groups()
    return key, value


def header_line(key: str, value: str) -> str:
    return f'[{key} "{value}"]'


def is_passthrough_token(token: str) -> bool:
    """Return *True* for move numbers, results and placeholders."""
    return (
        bool(_MOVE_NUMBER_RE.match(token))
        or token in PGN_RESULT_TOKENS
        or token in PLACEHOLDER_TOKENS
    )


def split_games(text: str) -> list[GameRecord]:
    """Split a (possibly concatenated) PGN stream into game records.

    A header line that follows a non-header line opens a new game. Lines
    before the first header belong to an initial header-less record.
    """
    games: list[GameRecord] = []
    current: GameRecord | None = None
    in_headers = False

    for line in text.splitlines():
        if is_header_line(line):
            if current is None or not in_headers:
                current = GameRecord()
                games.append(current)
            in_headers = True
            key, value = parse_header_line(line)
            current.headers[key] = value
            continue

        in_headers = False
        if current is None:
            current = GameRecord()
            games.append(current)
        current.lines.append(line)

    return games


def render_game(headers: dict[str, str], lines: list[str]) -> str:
    out = [header_line(key, value) for key, value in headers.items()]
    out.extend(lines)
    return "\n".join(out)
