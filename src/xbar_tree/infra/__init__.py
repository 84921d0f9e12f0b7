"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system and the
external renderers (Graphviz, pdflatex, pdftoppm).  Every raw subprocess
or OS exception must be caught here and re-raised as a
:class:`~xbar_tree.exceptions.XbarTreeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from xbar_tree.infra.graphviz_renderer import GraphvizRenderer, to_dot
from xbar_tree.infra.latex_renderer import LatexRenderer, to_qtree
from xbar_tree.infra.tool_detector import ToolStatus, detect_tool, require_tool

__all__: list[str] = [
    "GraphvizRenderer",
    "LatexRenderer",
    "ToolStatus",
    "detect_tool",
    "require_tool",
    "to_dot",
    "to_qtree",
]
