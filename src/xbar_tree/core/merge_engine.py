"""Merge Engine — folds a flat word sequence into one binary tree.

The working structure is an ordered list of constituent roots.  Each
successful merge replaces two adjacent roots with their :class:`Pair`,
so a sentence of N words reaches a single root after exactly N-1
merges, whatever order the user picks.

Rejected selections (malformed, out of range, not adjacent) raise
:class:`~xbar_tree.exceptions.InvalidSelectionError` and leave the
sequence untouched; :meth:`MergeEngine.run` reports them and asks again.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from xbar_tree.core.models import Constituent, Pair, Word
from xbar_tree.core.protocols import SelectionSource
from xbar_tree.exceptions import EmptySentenceError, InvalidSelectionError

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+")

_SELECTION_HINT = "Type two adjacent numbers from the list, e.g. 1 2."


# ---------------------------------------------------------------------------
# Tokenize
# ---------------------------------------------------------------------------

def tokenize(sentence: str) -> list[Word]:
    """Split *sentence* on whitespace into leaf constituents.

    Raises
    ------
    EmptySentenceError
        If the sentence contains no words.
    """
    words = [Word(token) for token in sentence.split()]
    if not words:
        raise EmptySentenceError(
            "The sentence must contain at least one word.",
        )
    return words


# ---------------------------------------------------------------------------
# Selection parsing and merging (pure)
# ---------------------------------------------------------------------------

def parse_selection(raw: str) -> tuple[int, int]:
    """Extract two 1-based positions from a raw selection line.

    Any run of non-digit characters separates numbers, so ``"1 2"``,
    ``"1,2"`` and ``"1-2"`` are equivalent.  The pair is returned
    normalized as ``(min, max)``.

    Raises
    ------
    InvalidSelectionError
        Unless the line holds exactly two numbers, both at least 1.
    """
    numbers = [int(part) for part in _NUMBER_RE.findall(raw)]
    if len(numbers) != 2:
        raise InvalidSelectionError(
            "You need to write two numbers from the constituent list.",
            hint=_SELECTION_HINT,
        )
    if min(numbers) < 1:
        raise InvalidSelectionError(
            "Positions start at 1.",
            hint=_SELECTION_HINT,
        )
    i, j = numbers
    return min(i, j), max(i, j)


def select_and_merge(sequence: list[Constituent], i: int, j: int) -> Pair:
    """Merge the constituents at 1-based positions *i* and *j* in place.

    The positions are unordered: the earlier one keeps its place and
    absorbs its right neighbour.  Returns the new :class:`Pair`.

    Raises
    ------
    InvalidSelectionError
        If the positions are equal, out of range, or not adjacent.  The
        sequence is not modified in that case.
    """
    first, second = min(i, j), max(i, j)

    if first == second:
        raise InvalidSelectionError(
            "Pick two different constituents.",
            hint=_SELECTION_HINT,
        )
    if first < 1 or second > len(sequence):
        raise InvalidSelectionError(
            f"Positions must be between 1 and {len(sequence)}.",
            hint=_SELECTION_HINT,
        )
    if second - first != 1:
        raise InvalidSelectionError(
            "The constituents must be adjacent!",
            hint=_SELECTION_HINT,
        )

    right = sequence.pop(second - 1)
    merged = Pair(sequence[first - 1], right)
    sequence[first - 1] = merged
    return merged


# ---------------------------------------------------------------------------
# Stateful driver
# ---------------------------------------------------------------------------

class MergeEngine:
    """Owns the in-progress sequence for one merge phase.

    Parameters
    ----------
    words:
        The tokenized sentence; must not be empty.
    """

    def __init__(self, words: Sequence[Constituent]) -> None:
        if not words:
            raise EmptySentenceError(
                "The sentence must contain at least one word.",
            )
        self._sequence: list[Constituent] = list(words)
        self._merges: int = 0

    @property
    def sequence(self) -> tuple[Constituent, ...]:
        """Snapshot of the current roots, left to right."""
        return tuple(self._sequence)

    @property
    def merges(self) -> int:
        """Number of successful merges so far."""
        return self._merges

    @property
    def is_complete(self) -> bool:
        return len(self._sequence) == 1

    def merge(self, i: int, j: int) -> Pair:
        """Merge positions *i* and *j*; see :func:`select_and_merge`."""
        merged = select_and_merge(self._sequence, i, j)
        self._merges += 1
        logger.debug("merge %d: %s", self._merges, merged.display())
        return merged

    def merge_raw(self, raw: str) -> Pair:
        """Parse a raw selection line and merge it."""
        i, j = parse_selection(raw)
        return self.merge(i, j)

    def result(self) -> Constituent:
        """Return the finished tree.

        Raises
        ------
        RuntimeError
            If more than one root remains.
        """
        if not self.is_complete:
            raise RuntimeError(
                f"Merging is not finished: {len(self._sequence)} roots remain.",
            )
        return self._sequence[0]

    def run(
        self,
        choose: SelectionSource,
        on_rejected: Callable[[InvalidSelectionError], None] | None = None,
    ) -> Constituent:
        """Ask *choose* for selections until a single root remains.

        Rejected selections are passed to *on_rejected* (when given) and
        the same question is asked again.
        """
        while not self.is_complete:
            raw = choose(self.sequence)
            try:
                self.merge_raw(raw)
            except InvalidSelectionError as exc:
                logger.debug("rejected selection %r: %s", raw, exc)
                if on_rejected is not None:
                    on_rejected(exc)
        return self.result()
