"""Post-order annotation pass.

Walks a finished :data:`Constituent` tree and asks for one mark per
node, children strictly before their parent, so that the prompt for a
pair can show both already-annotated children.
"""

from __future__ import annotations

from xbar_tree.core.models import AnnotatedConstituent, APair, AWord, Constituent, M, Word
from xbar_tree.core.protocols import MarkCodec, MarkSource


def leaf_context(text: str) -> str:
    """Prompt context for a word: ``[? word]``."""
    return f"[? {text}]"


def pair_context(
    left: AnnotatedConstituent[M],
    right: AnnotatedConstituent[M],
) -> str:
    """Prompt context for a pair: ``[? [m a] [m b]]``."""
    return f"[? {left.display()} {right.display()}]"


def annotate(
    node: Constituent,
    ask: MarkSource,
    codec: MarkCodec[M],
) -> AnnotatedConstituent[M]:
    """Build an isomorphic annotated tree, prompting post-order.

    Parameters
    ----------
    node:
        The finished constituent tree.
    ask:
        Called once per node with a context string; returns the raw line.
    codec:
        Turns each raw line into a mark.

    Raises
    ------
    MarkDecodeError
        Propagated from a structured codec; annotation stops immediately.
    """
    if isinstance(node, Word):
        mark = codec.decode(ask(leaf_context(node.text)))
        return AWord(mark, node.text)

    left = annotate(node.left, ask, codec)
    right = annotate(node.right, ask, codec)
    mark = codec.decode(ask(pair_context(left, right)))
    return APair(mark, left, right)
