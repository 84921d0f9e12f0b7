"""X-bar mark projection rules for structured category marks.

Implemented:

* **Leaf normalization** — a word is always the bare head of its own
  category, so ``NP``/``N'``/``N`` on a leaf all collapse to ``N``.
* **Pair validation** — a pair may not be bare, and its category must
  be shared by a head child whose level does not exceed the pair's
  (``Bare < Bar < Phrase``).

Deriving a pair's mark from its children (which child heads the pair,
how specifiers and complements promote levels) is not decided yet; see
:func:`derive_projection`.
"""

from __future__ import annotations

from xbar_tree.core.marks import Bare, CategoryMark, Level
from xbar_tree.core.models import AnnotatedConstituent, APair, AWord, iter_postorder
from xbar_tree.exceptions import ConsistencyError

CategoryTree = AnnotatedConstituent[CategoryMark]


# ---------------------------------------------------------------------------
# Leaf normalization
# ---------------------------------------------------------------------------

def normalize_leaf(leaf: AWord[CategoryMark]) -> AWord[CategoryMark]:
    """Return *leaf* with its mark reduced to ``Bare(category)``."""
    if isinstance(leaf.mark, Bare):
        return leaf
    return AWord(Bare(leaf.mark.category), leaf.text)


def normalize_leaves(tree: CategoryTree) -> CategoryTree:
    """Return a copy of *tree* with every leaf normalized."""
    if isinstance(tree, AWord):
        return normalize_leaf(tree)
    return APair(
        tree.mark,
        normalize_leaves(tree.left),
        normalize_leaves(tree.right),
    )


# ---------------------------------------------------------------------------
# Pair validation
# ---------------------------------------------------------------------------

def head_candidates(pair: APair[CategoryMark]) -> list[CategoryTree]:
    """Children of *pair* that share its category."""
    category = pair.mark.category
    return [
        child
        for child in (pair.left, pair.right)
        if child.mark.category == category
    ]


def check_projection(pair: APair[CategoryMark]) -> None:
    """Validate one pair's mark against its children's marks.

    Raises
    ------
    ConsistencyError
        If the pair is bare, if no child shares its category, or if every
        same-category child sits at a higher level than the pair.
    """
    mark = pair.mark
    context = pair.display()

    if mark.level is Level.BARE:
        raise ConsistencyError(
            f"Non-word constituent cannot be a bare category: {context}",
            hint=f"Mark it {mark.category}' or {mark.category}P instead.",
        )

    candidates = head_candidates(pair)
    if not candidates:
        raise ConsistencyError(
            f"{mark} has no child of category {mark.category}: {context}",
            hint="A projection must share its category with its head.",
        )

    if all(child.mark.level > mark.level for child in candidates):
        raise ConsistencyError(
            f"{mark} cannot dominate a higher projection of "
            f"{mark.category}: {context}",
            hint="Projection levels only grow upwards: X < X' < XP.",
        )


def validate_projections(tree: CategoryTree) -> CategoryTree:
    """Normalize leaves, then check every pair bottom-up.

    Returns the normalized tree.  The first violation aborts with
    :class:`ConsistencyError`.
    """
    normalized = normalize_leaves(tree)
    for node in iter_postorder(normalized):
        if isinstance(node, APair):
            check_projection(node)
    return normalized


# ---------------------------------------------------------------------------
# Derivation stub
# ---------------------------------------------------------------------------

def derive_projection(left: CategoryTree, right: CategoryTree) -> CategoryMark:
    """Placeholder for inferring a pair's mark from its children.

    This function intentionally raises :class:`NotImplementedError`.
    Choosing the head child and the promotion rule for specifiers and
    complements needs a linguistic decision that has not been made;
    until then marks are typed by the user and only validated.
    """
    raise NotImplementedError(
        "Deriving a projection from child marks is not yet implemented. "
        "Annotate the pair manually."
    )
