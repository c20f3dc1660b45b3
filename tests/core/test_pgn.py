"""Tests for PGN tag helpers and game splitting."""

import pytest

from pgn4convert.core.notation.pgn import (
    header_line,
    is_passthrough_token,
    parse_header_line,
    render_game,
    split_games,
)


class TestHeaderLines:
    def test_parse(self) -> None:
        assert parse_header_line('[Site "www.chess.com/variants/x"]') == (
            "Site",
            "www.chess.com/variants/x",
        )

    def test_value_kept_verbatim(self) -> None:
        line = "[StartFen4 \"R-0,1-{'dim':'8x8'}-x,x\"]"
        key, value = parse_header_line(line)
        assert key == "StartFen4"
        assert header_line(key, value) == line

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid PGN header"):
            parse_header_line("[Broken]")

    def test_escaped_quote_in_value(self) -> None:
        line = r'[Event "The \"Four\" Open"]'
        assert parse_header_line(line) == ("Event", r'The \"Four\" Open')
        assert header_line(*parse_header_line(line)) == line

    def test_unescaped_quote_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid PGN header"):
            parse_header_line('[Event "The "Four" Open"]')

    def test_trailing_text_after_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid PGN header"):
            parse_header_line('[White "a"] [Black "b"]')


class TestPassthroughTokens:
    @pytest.mark.parametrize("token", ["1.", "12.", "1-0", "0-1", "1/2-1/2", "*", "T", "R", "S"])
    def test_passthrough(self, token: str) -> None:
        assert is_passthrough_token(token)

    @pytest.mark.parametrize("token", ["e4", "Nf3", "O-O", "e2e4"])
    def test_moves(self, token: str) -> None:
        assert not is_passthrough_token(token)


class TestSplitGames:
    def test_concatenated_games(self) -> None:
        text = '[Event "A"]\n\n1. e4 e5\n\n[Event "B"]\n[Site "x"]\n\n1. d4\n'
        games = split_games(text)
        assert [game.headers for game in games] == [
            {"Event": "A"},
            {"Event": "B", "Site": "x"},
        ]
        assert games[0].lines == ["", "1. e4 e5", ""]
        assert games[1].lines == ["", "1. d4"]

    def test_headerless_movetext(self) -> None:
        games = split_games("1. e4 e5")
        assert len(games) == 1
        assert games[0].headers == {}
        assert games[0].lines == ["1. e4 e5"]

    def test_render_game(self) -> None:
        assert render_game({"Variant": "Chess"}, ["", "1. e4"]) == '[Variant "Chess"]\n\n1. e4'
