"""Protocols (interfaces) consumed by the core layer.

These define the contracts that codecs and infrastructure adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
renderer implementations — preserving the dependency inversion
principle.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar

from xbar_tree.core.models import AnnotatedConstituent, Constituent, RenderArtifacts

M_co = TypeVar("M_co", covariant=True)

SelectionSource = Callable[[Sequence[Constituent]], str]
"""Shown the current sequence, returns one raw merge-selection line."""

MarkSource = Callable[[str], str]
"""Shown a ``[? ...]`` context string, returns one raw mark line."""


class MarkCodec(Protocol[M_co]):
    """Contract for turning one raw input line into a mark value."""

    def decode(self, raw: str) -> M_co:
        """Decode *raw* into a mark.

        Raises
        ------
        MarkDecodeError
            When a structured codec cannot interpret *raw*.
        """
        ...  # pragma: no cover


class Renderer(Protocol):
    """Contract for tree rendering backends.

    Any object that implements :meth:`render` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def render(self, tree: AnnotatedConstituent[Any]) -> RenderArtifacts:
        """Serialize *tree*, run the external tool and return its outputs.

        Implementations must map all subprocess and OS exceptions to
        :class:`~xbar_tree.exceptions.RenderError` subclasses.

        Raises
        ------
        RendererNotFoundError
            When the external binary is not on PATH.
        RenderError
            When the external process exits with a non-zero status.
        """
        ...  # pragma: no cover
