"""Run configuration assembled from command-line arguments.

There is no configuration file; :class:`AppConfig` is a frozen snapshot
of the parsed ``argparse`` namespace so that the rest of the run never
touches the namespace directly.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

MARK_STYLES: tuple[str, ...] = ("text", "category")
"""``text`` keeps free-form marks; ``category`` decodes ``X``/``X'``/``XP``."""

RENDERERS: tuple[str, ...] = ("dot", "latex", "none")

DEFAULT_STEM: str = "generated_tree"
DEFAULT_DPI: int = 150


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Options for a single interactive run."""

    sentence: str | None
    """Sentence given on the command line, or ``None`` to prompt for it."""

    mark_style: str = "text"
    renderer: str = "dot"
    output_dir: Path = Path(".")
    stem: str = DEFAULT_STEM
    dpi: int = DEFAULT_DPI
    verbose: bool = False

    @property
    def structured_marks(self) -> bool:
        return self.mark_style == "category"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> AppConfig:
        """Freeze a parsed namespace produced by the CLI parser."""
        return cls(
            sentence=args.target,
            mark_style=args.marks,
            renderer=args.renderer,
            output_dir=Path(args.output_dir),
            stem=args.stem,
            dpi=args.dpi,
            verbose=args.verbose,
        )
