"""Domain models for xbar-tree.

All models are **frozen** dataclasses — immutable value objects.  A
:class:`Pair` exclusively owns its two children; trees are never shared
or mutated in place, only wrapped into larger pairs.

Two tree families live here:

* :data:`Constituent` — the unannotated shape produced by merging.
* :data:`AnnotatedConstituent` — the same shape with a mark on every
  node, generic over the mark type ``M``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar, Union

M = TypeVar("M")


# ---------------------------------------------------------------------------
# Unannotated constituents
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Word:
    """A leaf holding one lexical token of the input sentence."""

    text: str

    def display(self) -> str:
        """Render the leaf as its bare text."""
        return self.text

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Pair:
    """An internal node created by merging two adjacent constituents."""

    left: Constituent
    right: Constituent

    def display(self) -> str:
        """Render both children independently bracketed, e.g. ``[a] [b]``."""
        return f"[{self.left.display()}] [{self.right.display()}]"

    def __str__(self) -> str:
        return self.display()


Constituent = Union[Word, Pair]


# ---------------------------------------------------------------------------
# Annotated constituents
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AWord(Generic[M]):
    """An annotated leaf: a word together with its mark."""

    mark: M
    text: str

    def display(self) -> str:
        return f"[{self.mark} {self.text}]"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class APair(Generic[M]):
    """An annotated internal node carrying its own mark."""

    mark: M
    left: AnnotatedConstituent[M]
    right: AnnotatedConstituent[M]

    def display(self) -> str:
        return f"[{self.mark} {self.left.display()} {self.right.display()}]"

    def __str__(self) -> str:
        return self.display()


AnnotatedConstituent = Union[AWord[M], APair[M]]


# ---------------------------------------------------------------------------
# Tree helpers (shape queries shared by both tree families)
# ---------------------------------------------------------------------------

def leaves(node: Constituent | AnnotatedConstituent[M]) -> list[str]:
    """Return the words under *node* in left-to-right order."""
    if isinstance(node, (Word, AWord)):
        return [node.text]
    return leaves(node.left) + leaves(node.right)


def count_pairs(node: Constituent | AnnotatedConstituent[M]) -> int:
    """Return the number of internal nodes under (and including) *node*."""
    if isinstance(node, (Word, AWord)):
        return 0
    return 1 + count_pairs(node.left) + count_pairs(node.right)


def iter_postorder(
    node: AnnotatedConstituent[M],
) -> Iterator[AnnotatedConstituent[M]]:
    """Yield annotated nodes children-first, left before right."""
    if isinstance(node, APair):
        yield from iter_postorder(node.left)
        yield from iter_postorder(node.right)
    yield node


# ---------------------------------------------------------------------------
# Renderer output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderArtifacts:
    """Files produced by a renderer for one tree."""

    vector: Path
    """Vector output (``.svg`` from Graphviz, ``.pdf`` from LaTeX)."""

    raster: Path
    """Raster output (``.png``)."""
