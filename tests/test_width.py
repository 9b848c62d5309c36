"""Tests for boxgrid.width -- escape stripping and visible width."""

from __future__ import annotations

from boxgrid.width import pad_to_width, strip_ansi, visible_width


# ---------------------------------------------------------------------------
# strip_ansi
# ---------------------------------------------------------------------------


class TestStripAnsi:
    """Remove SGR and erase-line sequences, keep everything else."""

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("hello") == "hello"

    def test_strips_truecolor_sequence(self) -> None:
        text = "\x1b[38;2;255;255;255mstring\x1b[0m"
        assert strip_ansi(text) == "string"

    def test_strips_erase_line(self) -> None:
        assert strip_ansi("abc\x1b[K") == "abc"

    def test_strips_bare_reset(self) -> None:
        assert strip_ansi("\x1b[mabc") == "abc"

    def test_literal_bracket_sequence_is_kept(self) -> None:
        # No escape byte in front, so "[31m" is ordinary content.
        assert strip_ansi("[31mred") == "[31mred"

    def test_digits_and_semicolons_are_kept(self) -> None:
        assert strip_ansi("1;2;3m") == "1;2;3m"

    def test_nested_sequences(self) -> None:
        text = "\x1b[1m\x1b[38;2;0;0;0mx\x1b[0m\x1b[0m"
        assert strip_ansi(text) == "x"


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure display columns."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1mhi\x1b[0m") == 2

    def test_only_escapes(self) -> None:
        assert visible_width("\x1b[0m") == 0

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世界") == 4

    def test_mixed_ascii_and_wide(self) -> None:
        assert visible_width("A世B") == 4

    def test_combining_mark_is_zero_width(self) -> None:
        # e + combining acute accent is one column
        assert visible_width("e\u0301") == 1

    def test_emoji_counts_as_two(self) -> None:
        assert visible_width("\U0001f600") == 2

    def test_zwj_emoji_sequence_counts_as_two(self) -> None:
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        assert visible_width(family) == 2

    def test_zwj_between_letters_adds_nothing(self) -> None:
        assert visible_width("a\u200db") == 2

    def test_flag_counts_as_two(self) -> None:
        assert visible_width("\U0001f1ef\U0001f1f5") == 2

    def test_euro_sign_is_one_column(self) -> None:
        assert visible_width("€") == 1

    def test_box_drawing_is_one_column(self) -> None:
        assert visible_width("╔═╗") == 3

    def test_control_character_falls_back_to_one(self) -> None:
        assert visible_width("a\x07b") == 3

    def test_nul_falls_back_to_one(self) -> None:
        assert visible_width("a\x00b") == 3

    def test_tab_falls_back_to_one(self) -> None:
        assert visible_width("\t") == 1

    def test_lone_escape_byte_is_counted(self) -> None:
        # Not a complete sequence, so it is not stripped.
        assert visible_width("\x1bx") == 2

    def test_colored_wide_text(self) -> None:
        assert visible_width("\x1b[31m世\x1b[0m") == 2

    def test_repeated_measurement_is_stable(self) -> None:
        text = "café 世"
        assert visible_width(text) == visible_width(text) == 7


# ---------------------------------------------------------------------------
# pad_to_width
# ---------------------------------------------------------------------------


class TestPadToWidth:
    """Right-pad by display columns, not characters or bytes."""

    def test_pads_plain_text(self) -> None:
        assert pad_to_width("ab", 5) == "ab   "

    def test_colored_text_padded_by_visible_width(self) -> None:
        text = "\x1b[31mab\x1b[0m"
        padded = pad_to_width(text, 5)
        assert padded == text + "   "
        assert visible_width(padded) == 5

    def test_wide_text_gets_fewer_spaces(self) -> None:
        assert pad_to_width("世", 4) == "世  "

    def test_text_at_width_unchanged(self) -> None:
        assert pad_to_width("abc", 3) == "abc"

    def test_text_past_width_unchanged(self) -> None:
        assert pad_to_width("abcdef", 3) == "abcdef"

    def test_empty_text(self) -> None:
        assert pad_to_width("", 2) == "  "
