"""LaTeX / qtree backed implementation of :class:`~xbar_tree.core.protocols.Renderer`.

The annotated tree is written as a standalone document using the qtree
package, typeset with ``pdflatex`` and rasterized with ``pdftoppm``.
Every subprocess / OS exception is caught here and re-raised as a
:class:`~xbar_tree.exceptions.RenderError` subclass.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Any

from xbar_tree.core.models import AnnotatedConstituent, AWord, RenderArtifacts
from xbar_tree.exceptions import RenderError, RendererNotFoundError
from xbar_tree.infra.tool_detector import require_tool

logger = logging.getLogger(__name__)

_LATEX_SPECIALS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "[": "(",
    "]": ")",
}

_DOCUMENT = r"""\documentclass[border=10pt]{standalone}
\usepackage{qtree}
\begin{document}
%s
\end{document}
"""

_LOG_TAIL_LINES = 10


# ---------------------------------------------------------------------------
# qtree serialization (pure)
# ---------------------------------------------------------------------------

def latex_escape(text: str) -> str:
    """Quote *text* for use as a qtree label or leaf."""
    return "".join(_LATEX_SPECIALS.get(char, char) for char in text)


def to_qtree(tree: AnnotatedConstituent[Any]) -> str:
    r"""Serialize *tree* in qtree bracket notation.

    Labels are braced so a mark with spaces (or no text) stays one node
    label, for example ``\Tree [.{NP} [.{D} the ] [.{N} cat ] ]``.
    """
    return r"\Tree " + _bracket(tree)


def _bracket(node: AnnotatedConstituent[Any]) -> str:
    label = latex_escape(str(node.mark))
    if isinstance(node, AWord):
        return f"[.{{{label}}} {latex_escape(node.text)} ]"
    return f"[.{{{label}}} {_bracket(node.left)} {_bracket(node.right)} ]"


def to_latex_document(tree: AnnotatedConstituent[Any]) -> str:
    """Wrap :func:`to_qtree` output in a standalone LaTeX document."""
    return _DOCUMENT % to_qtree(tree)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class LatexRenderer:
    """Concrete :class:`Renderer` that typesets with pdflatex.

    Produces ``<stem>.pdf`` (vector) and ``<stem>.png`` (raster) in
    *output_dir*; the intermediate ``<stem>.tex`` is kept next to them.
    """

    def __init__(
        self,
        output_dir: Path,
        stem: str = "generated_tree",
        *,
        dpi: int = 150,
    ) -> None:
        self._output_dir: Path = output_dir
        self._stem: str = stem
        self._dpi: int = dpi

    def render(self, tree: AnnotatedConstituent[Any]) -> RenderArtifacts:
        """Typeset *tree* and convert the PDF to PNG.

        Raises
        ------
        RendererNotFoundError
            If ``pdflatex`` or ``pdftoppm`` is not on PATH.
        RenderError
            If either step fails or the ``.tex`` file cannot be written.
        """
        pdflatex = require_tool("pdflatex")
        pdftoppm = require_tool("pdftoppm")

        tex_path = self._output_dir / f"{self._stem}.tex"
        artifacts = RenderArtifacts(
            vector=self._output_dir / f"{self._stem}.pdf",
            raster=self._output_dir / f"{self._stem}.png",
        )

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            tex_path.write_text(to_latex_document(tree), encoding="utf-8")
        except OSError as exc:
            raise RenderError(f"Cannot write {tex_path}: {exc}") from exc

        self._run(
            "pdflatex",
            [
                str(pdflatex),
                "-interaction=nonstopmode",
                "-halt-on-error",
                f"-output-directory={self._output_dir}",
                str(tex_path),
            ],
        )
        # pdftoppm appends the extension itself.
        self._run(
            "pdftoppm",
            [
                str(pdftoppm),
                "-png",
                "-singlefile",
                "-r", str(self._dpi),
                str(artifacts.vector),
                str(self._output_dir / self._stem),
            ],
        )
        return artifacts

    @staticmethod
    def _run(tool: str, command: list[str]) -> None:
        """Run one step and map its failures to :class:`RenderError`."""
        logger.debug("running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise RendererNotFoundError(
                f"Could not start {tool}: {exc}",
                hint="Run 'xbar-tree doctor' to check your LaTeX install.",
            ) from exc
        except OSError as exc:
            raise RenderError(f"Could not run {tool}: {exc}") from exc

        if completed.returncode != 0:
            # pdflatex reports errors on stdout, pdftoppm on stderr.
            output = (completed.stderr or completed.stdout or "").strip()
            tail = "\n".join(output.splitlines()[-_LOG_TAIL_LINES:])
            raise RenderError(
                f"{tool} exited with status {completed.returncode}.",
                hint=tail or None,
            )
