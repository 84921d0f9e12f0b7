"""Tests for the post-order annotation pass (core/annotation.py).

The ``ask`` callable is a scripted feed that records every context it
was shown, which makes the prompt order directly observable.
"""

from __future__ import annotations

import pytest

from xbar_tree.core.annotation import annotate, leaf_context, pair_context
from xbar_tree.core.marks import Bar, Bare, CategoryMarkCodec, Phrase, StringMarkCodec
from xbar_tree.core.models import APair, AWord, Pair, Word, count_pairs, leaves
from xbar_tree.exceptions import MarkDecodeError


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _the_cat_sat() -> Pair:
    return Pair(Pair(Word("the"), Word("cat")), Word("sat"))


# ---------------------------------------------------------------------------
# Context strings
# ---------------------------------------------------------------------------

class TestContexts:
    def test_leaf_context(self) -> None:
        assert leaf_context("cat") == "[? cat]"

    def test_pair_context_shows_annotated_children(self) -> None:
        ctx = pair_context(AWord("D", "the"), AWord("N", "cat"))
        assert ctx == "[? [D the] [N cat]]"


# ---------------------------------------------------------------------------
# annotate
# ---------------------------------------------------------------------------

class TestAnnotate:
    def test_single_word(self, scripted: type) -> None:
        ask = scripted(["N"])
        result = annotate(Word("cat"), ask, StringMarkCodec())
        assert result == AWord("N", "cat")
        assert ask.asked == ["[? cat]"]

    def test_prompts_are_post_order(self, scripted: type) -> None:
        ask = scripted(["D", "N", "NP", "V", "S"])

        annotate(_the_cat_sat(), ask, StringMarkCodec())

        assert ask.asked == [
            "[? the]",
            "[? cat]",
            "[? [D the] [N cat]]",
            "[? sat]",
            "[? [NP [D the] [N cat]] [V sat]]",
        ]

    def test_result_is_isomorphic(self, scripted: type) -> None:
        tree = _the_cat_sat()
        ask = scripted(["D", "N", "NP", "V", "S"])

        result = annotate(tree, ask, StringMarkCodec())

        assert result == APair(
            "S",
            APair("NP", AWord("D", "the"), AWord("N", "cat")),
            AWord("V", "sat"),
        )
        assert leaves(result) == leaves(tree)
        assert count_pairs(result) == count_pairs(tree)

    def test_right_branching_order(self, scripted: type) -> None:
        tree = Pair(Word("a"), Pair(Word("b"), Word("c")))
        ask = scripted(["1", "2", "3", "4", "5"])

        annotate(tree, ask, StringMarkCodec())

        assert ask.asked == [
            "[? a]",
            "[? b]",
            "[? c]",
            "[? [2 b] [3 c]]",
            "[? [1 a] [4 [2 b] [3 c]]]",
        ]

    def test_one_prompt_per_node(self, scripted: type) -> None:
        tree = Pair(Pair(Word("a"), Word("b")), Pair(Word("c"), Word("d")))
        ask = scripted(["x"] * 7)
        annotate(tree, ask, StringMarkCodec())
        assert len(ask.asked) == 7
        assert ask.remaining == 0

    def test_category_codec(self, scripted: type) -> None:
        ask = scripted(["D", "N", "NP", "V'", "VP"])

        result = annotate(_the_cat_sat(), ask, CategoryMarkCodec())

        assert result == APair(
            Phrase("V"),
            APair(Phrase("N"), AWord(Bare("D"), "the"), AWord(Bare("N"), "cat")),
            AWord(Bar("V"), "sat"),
        )

    def test_decode_error_stops_immediately(self, scripted: type) -> None:
        ask = scripted(["D", "N!", "NP", "V", "VP"])

        with pytest.raises(MarkDecodeError):
            annotate(_the_cat_sat(), ask, CategoryMarkCodec())

        assert len(ask.asked) == 2

    def test_source_tree_untouched(self, scripted: type) -> None:
        tree = _the_cat_sat()
        annotate(tree, scripted(["a", "b", "c", "d", "e"]), StringMarkCodec())
        assert tree == _the_cat_sat()
