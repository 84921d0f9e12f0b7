"""Core / service layer — the constituent tree and its construction passes.

Rules
-----
* No ``print()`` calls.
* No subprocess or filesystem I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from xbar_tree.core.annotation import annotate
from xbar_tree.core.marks import (
    Bar,
    Bare,
    CategoryMark,
    CategoryMarkCodec,
    Level,
    Phrase,
    StringMarkCodec,
    decode_category_mark,
)
from xbar_tree.core.merge_engine import MergeEngine, parse_selection, select_and_merge, tokenize
from xbar_tree.core.models import (
    AnnotatedConstituent,
    APair,
    AWord,
    Constituent,
    Pair,
    RenderArtifacts,
    Word,
)
from xbar_tree.core.projection import normalize_leaf, validate_projections
from xbar_tree.core.protocols import MarkCodec, Renderer
from xbar_tree.core.render_service import RenderService

__all__: list[str] = [
    "APair",
    "AWord",
    "AnnotatedConstituent",
    "Bar",
    "Bare",
    "CategoryMark",
    "CategoryMarkCodec",
    "Constituent",
    "Level",
    "MarkCodec",
    "MergeEngine",
    "Pair",
    "Phrase",
    "RenderArtifacts",
    "RenderService",
    "Renderer",
    "StringMarkCodec",
    "Word",
    "annotate",
    "decode_category_mark",
    "normalize_leaf",
    "parse_selection",
    "select_and_merge",
    "tokenize",
    "validate_projections",
]
