"""Core render service — hands a finished tree to a renderer.

This service delegates the actual drawing to a
:class:`~xbar_tree.core.protocols.Renderer` injected at construction
time.  It is responsible for:

* Delegating to the renderer.
* Ensuring only :class:`~xbar_tree.exceptions.XbarTreeError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no subprocess, no ``print()``.
"""

from __future__ import annotations

import logging
from typing import Any

from xbar_tree.core.models import AnnotatedConstituent, RenderArtifacts
from xbar_tree.core.protocols import Renderer
from xbar_tree.exceptions import RenderError, XbarTreeError

logger = logging.getLogger(__name__)


class RenderService:
    """Stateless service that drives one render.

    Parameters
    ----------
    renderer:
        Any object satisfying the :class:`Renderer` protocol.
    """

    def __init__(self, renderer: Renderer) -> None:
        self._renderer: Renderer = renderer

    def render(self, tree: AnnotatedConstituent[Any]) -> RenderArtifacts:
        """Render *tree* and return the produced files.

        Raises
        ------
        RenderError
            When the renderer fails for any reason.
        """
        try:
            artifacts = self._renderer.render(tree)
        except XbarTreeError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise RenderError(
                f"Unexpected renderer error: {exc}",
            ) from exc

        logger.debug(
            "rendered %s and %s", artifacts.vector, artifacts.raster,
        )
        return artifacts
