"""Tests for PGN4 movetext cleanup."""

from pgn4convert.core.notation.preprocess import (
    clean_token,
    preprocess,
    remove_separators,
    strip_captured_pieces,
)


class TestSeparators:
    def test_dual_board_marker_removed(self) -> None:
        assert remove_separators("1. h5-h7 .. g10-g8") == "1. h5-h7 g10-g8"

    def test_marker_without_spaces_kept(self) -> None:
        assert remove_separators("1...e5") == "1...e5"


class TestCaptureCleanup:
    def test_captured_piece_dropped(self) -> None:
        assert strip_captured_pieces("e5xNf6") == "e5xf6"

    def test_two_digit_destination(self) -> None:
        assert strip_captured_pieces("Nh7xQg10") == "Nh7xg10"

    def test_plain_capture_untouched(self) -> None:
        assert strip_captured_pieces("h7xg8") == "h7xg8"

    def test_idempotent(self) -> None:
        text = "12. Bh5-g6 .. Nh7xNf6 13. e5xNf6 Qd4xRk11"
        once = strip_captured_pieces(text)
        assert strip_captured_pieces(once) == once


class TestTokenCleanup:
    def test_trailing_marker_removed(self) -> None:
        assert clean_token("Qd1-h5S") == "Qd1-h5"
        assert clean_token("Qh5xf7#T") == "Qh5xf7#"
        assert clean_token("O-OR") == "O-O"

    def test_standalone_marker_kept(self) -> None:
        assert clean_token("S") == "S"

    def test_promotion_piece_kept(self) -> None:
        assert clean_token("e7-e8=R") == "e7-e8=R"

    def test_marker_after_promotion_removed(self) -> None:
        assert clean_token("d7-d8=QS") == "d7-d8=Q"
        assert clean_token("e7-e8=NT") == "e7-e8=N"
        assert clean_token("e7-e8=RR") == "e7-e8=R"
        assert clean_token("e7-e8=Q+S") == "e7-e8=Q+"

    def test_check_mate_compound_collapsed(self) -> None:
        assert clean_token("Qh5xf7+#") == "Qh5xf7#"


def test_preprocess_applies_all_rules() -> None:
    line = "13. e5xNf6 .. Bi8-j9+# 14. d6-d7S .. R"
    assert preprocess(line) == "13. e5xf6 Bi8-j9# 14. d6-d7 R"
