"""Graphviz backed implementation of :class:`~xbar_tree.core.protocols.Renderer`.

The annotated tree is serialized to DOT and piped into ``dot``, which
writes an SVG and a PNG side by side.  Every subprocess / OS exception
is caught here and re-raised as a
:class:`~xbar_tree.exceptions.RenderError` subclass.
"""

from __future__ import annotations

import itertools
import logging
import subprocess
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from xbar_tree.core.models import AnnotatedConstituent, AWord, RenderArtifacts
from xbar_tree.exceptions import RenderError, RendererNotFoundError
from xbar_tree.infra.tool_detector import require_tool

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# DOT serialization (pure)
# ---------------------------------------------------------------------------

def _quote(label: str) -> str:
    escaped = label.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _write_node(
    lines: list[str],
    node: AnnotatedConstituent[Any],
    ids: Iterator[int],
) -> int:
    """Append DOT statements for *node*; return its node number."""
    node_n = next(ids)
    lines.append(f"n{node_n} [fontcolor=blue label={_quote(str(node.mark))}]")

    if isinstance(node, AWord):
        word_n = next(ids)
        lines.append(f"n{word_n} [label={_quote(node.text)}]")
        lines.append(f"n{node_n} -> n{word_n}")
        return node_n

    left_n = _write_node(lines, node.left, ids)
    right_n = _write_node(lines, node.right, ids)
    lines.append(f"n{node_n} -> {{n{left_n} n{right_n}}}")
    return node_n


def to_dot(tree: AnnotatedConstituent[Any]) -> str:
    """Serialize *tree* as a DOT digraph.

    Nodes are numbered ``n0, n1, …`` in pre-order.  Each node is labelled
    with its mark; each leaf gets an extra child labelled with its word.
    """
    lines = ["digraph {"]
    _write_node(lines, tree, itertools.count())
    lines.append("}")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class GraphvizRenderer:
    """Concrete :class:`Renderer` that shells out to Graphviz ``dot``.

    This class satisfies the :class:`~xbar_tree.core.protocols.Renderer`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    output_dir:
        Directory receiving ``<stem>.svg`` and ``<stem>.png``.
    stem:
        Base file name for both outputs.
    """

    def __init__(self, output_dir: Path, stem: str = "generated_tree") -> None:
        self._output_dir: Path = output_dir
        self._stem: str = stem

    def _build_command(self, dot: Path, svg: Path, png: Path) -> list[str]:
        return [
            str(dot),
            "-Tsvg", "-o", str(svg),
            "-Tpng", "-o", str(png),
            "-Nshape=none",
            "-Earrowhead=none",
        ]

    def render(self, tree: AnnotatedConstituent[Any]) -> RenderArtifacts:
        """Draw *tree* with ``dot``.

        Raises
        ------
        RendererNotFoundError
            If ``dot`` is not on PATH.
        RenderError
            If ``dot`` fails or the output directory cannot be created.
        """
        dot = require_tool("dot")
        artifacts = RenderArtifacts(
            vector=self._output_dir / f"{self._stem}.svg",
            raster=self._output_dir / f"{self._stem}.png",
        )
        command = self._build_command(dot, artifacts.vector, artifacts.raster)

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RenderError(
                f"Cannot create output directory {self._output_dir}: {exc}",
            ) from exc

        logger.debug("running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                input=to_dot(tree),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise RendererNotFoundError(
                f"Could not start dot: {exc}",
                hint="Run 'xbar-tree doctor' to check your Graphviz install.",
            ) from exc
        except OSError as exc:
            raise RenderError(f"Could not run dot: {exc}") from exc

        if completed.returncode != 0:
            raise RenderError(
                f"dot exited with status {completed.returncode}.",
                hint=completed.stderr.strip() or None,
            )
        return artifacts
