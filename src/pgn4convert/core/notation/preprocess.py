"""Text cleanup applied to four-player movetext before any remapping."""

from __future__ import annotations

import re

# Dual-board separator between the moves of consecutive seats.
_SEPARATOR_RE = re.compile(r" \.\. ")
# "xNf6": the captured piece letter is dropped, the square kept verbatim.
_CAPTURE_RE = re.compile(r"x[A-Z]([a-l][0-9]{1,2})")
# Stray termination/clock marker glued to the end of a move, including
# after a promotion piece ("d7-d8=QS"). A lone "=R" is the promotion itself.
_STRAY_MARKER_RE = re.compile(r"(?<=[\dO+#])[RST]$|(?<==[A-Z])[RST]$")


def remove_separators(text: str) -> str:
    return _SEPARATOR_RE.sub(" ", text)


def strip_captured_pieces(text: str) -> str:
    """Rewrite ``x<Piece><square>`` captures to ``x<square>``."""
    return _CAPTURE_RE.sub(r"x\1", text)


def clean_token(token: str) -> str:
    """Drop a stray trailing marker and collapse ``+#`` into ``#``."""
    token = _STRAY_MARKER_RE.sub("", token)
    return token.replace("+#", "#")


def preprocess(text: str) -> str:
    """Normalize one movetext line (or block) of four-player notation."""
    text = remove_separators(text)
    text = strip_captured_pieces(text)
    return " ".join(clean_token(token) for token in text.split(" "))
