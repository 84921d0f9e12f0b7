"""Tests for mark types and codecs (core/marks.py)."""

from __future__ import annotations

import pytest

from xbar_tree.core.marks import (
    Bar,
    Bare,
    CategoryMarkCodec,
    Level,
    Phrase,
    StringMarkCodec,
    decode_category_mark,
)
from xbar_tree.exceptions import AnnotationError, InputError, MarkDecodeError


class TestDecodeCategoryMark:
    def test_phrase(self) -> None:
        assert decode_category_mark("NP") == Phrase("N")

    def test_bare(self) -> None:
        assert decode_category_mark("N") == Bare("N")

    def test_bar(self) -> None:
        assert decode_category_mark("N'") == Bar("N")

    def test_surrounding_whitespace_ignored(self) -> None:
        assert decode_category_mark("  VP \n") == Phrase("V")

    def test_unknown_suffix_is_fatal(self) -> None:
        with pytest.raises(MarkDecodeError, match="Unknown mark suffix"):
            decode_category_mark("N!")

    def test_empty_is_fatal(self) -> None:
        with pytest.raises(MarkDecodeError, match="empty"):
            decode_category_mark("   ")

    def test_too_long_is_fatal(self) -> None:
        with pytest.raises(MarkDecodeError, match="too long"):
            decode_category_mark("NPP")

    def test_decode_errors_are_not_recoverable(self) -> None:
        assert issubclass(MarkDecodeError, AnnotationError)
        assert not issubclass(MarkDecodeError, InputError)


class TestCategoryMarkDisplay:
    @pytest.mark.parametrize(
        ("mark", "expected"),
        [(Phrase("N"), "NP"), (Bar("N"), "N'"), (Bare("N"), "N")],
    )
    def test_str(self, mark: object, expected: str) -> None:
        assert str(mark) == expected

    @pytest.mark.parametrize("raw", ["NP", "N'", "N", "vP", "T'"])
    def test_display_matches_typed_form(self, raw: str) -> None:
        assert str(decode_category_mark(raw)) == raw

    def test_levels_are_ordered(self) -> None:
        assert Bare("N").level < Bar("N").level < Phrase("N").level
        assert Phrase("V").level is Level.PHRASE

    def test_marks_are_hashable_values(self) -> None:
        assert {Bare("N"), Bare("N"), Bar("N")} == {Bare("N"), Bar("N")}
        assert Bare("N") != Bar("N")


class TestCodecs:
    def test_string_codec_keeps_free_text(self) -> None:
        assert StringMarkCodec().decode(" Noun phrase! ") == "Noun phrase!"

    def test_string_codec_never_fails(self) -> None:
        assert StringMarkCodec().decode("") == ""

    def test_category_codec_delegates(self) -> None:
        assert CategoryMarkCodec().decode("DP") == Phrase("D")

    def test_category_codec_raises(self) -> None:
        with pytest.raises(MarkDecodeError):
            CategoryMarkCodec().decode("D?")
