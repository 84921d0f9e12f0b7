"""CLI application entry point and command routing for xbar-tree.

This module is the **sole error boundary** for the entire application.
It catches :class:`~xbar_tree.exceptions.XbarTreeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No tree logic lives here — all work is delegated to the core and
  infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from xbar_tree.cli import exit_codes
from xbar_tree.cli.console import configure_logging, console
from xbar_tree.config import DEFAULT_DPI, DEFAULT_STEM, MARK_STYLES, RENDERERS, AppConfig
from xbar_tree.core.protocols import Renderer
from xbar_tree.exceptions import XbarTreeError
from xbar_tree.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; the CLI supports:
    * ``xbar-tree``               — prompt for a sentence and build a tree
    * ``xbar-tree "the cat sat"`` — build a tree for the given sentence
    * ``xbar-tree doctor``        — environment diagnostics (only when it is
      the whole command line)
    * ``xbar-tree --version``
    """
    parser = argparse.ArgumentParser(
        prog="xbar-tree",
        description="Interactively build, annotate and draw a constituency tree.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Sentence to build a tree for (quoted). A bare 'xbar-tree doctor' "
        "runs diagnostics; add any option (e.g. --renderer dot) to build a "
        "tree for the word 'doctor' instead.",
    )
    parser.add_argument(
        "--marks",
        choices=MARK_STYLES,
        default="text",
        help="'text' keeps marks as typed; 'category' decodes X, X' and XP "
        "and checks projections (default: text).",
    )
    parser.add_argument(
        "--renderer",
        choices=RENDERERS,
        default="dot",
        help="External tool used to draw the tree (default: dot).",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="Directory for the rendered files (default: current directory).",
    )
    parser.add_argument(
        "--stem",
        default=DEFAULT_STEM,
        help=f"Base name of the rendered files (default: {DEFAULT_STEM}).",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=DEFAULT_DPI,
        help=f"PNG resolution for the latex renderer (default: {DEFAULT_DPI}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details (merges, external commands) to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_renderer(config: AppConfig) -> Renderer:
    """Instantiate the renderer selected by ``--renderer``."""
    if config.renderer == "latex":
        from xbar_tree.infra.latex_renderer import LatexRenderer

        return LatexRenderer(config.output_dir, config.stem, dpi=config.dpi)

    from xbar_tree.infra.graphviz_renderer import GraphvizRenderer

    return GraphvizRenderer(config.output_dir, config.stem)


def _handle_build(config: AppConfig) -> int:
    """Run the interactive build.

    Flow:
    1. Tokenize the sentence (prompting for it when not given).
    2. Merge adjacent constituents until one tree remains.
    3. Annotate every node, children before parents.
    4. Check X-bar projections when ``--marks category`` is used.
    5. Render the annotated tree unless ``--renderer none``.
    """
    from xbar_tree.cli.prompts import prompt_mark, prompt_merge, prompt_sentence, report_rejection
    from xbar_tree.core.annotation import annotate
    from xbar_tree.core.marks import CategoryMarkCodec, StringMarkCodec
    from xbar_tree.core.merge_engine import MergeEngine, tokenize
    from xbar_tree.core.projection import validate_projections
    from xbar_tree.core.render_service import RenderService

    if config.sentence is not None:
        words = tokenize(config.sentence)
    else:
        words = prompt_sentence()

    engine = MergeEngine(words)
    tree = engine.run(prompt_merge, on_rejected=report_rejection)

    console.print("\n[bold green]Done![/bold green]")
    console.print(console.escape(f"[{tree.display()}]"))

    console.print("\n[bold]Now let's annotate it[/bold]")
    if config.structured_marks:
        annotated = validate_projections(annotate(tree, prompt_mark, CategoryMarkCodec()))
    else:
        annotated = annotate(tree, prompt_mark, StringMarkCodec())

    console.print("\n[bold green]Done![/bold green]")
    console.print(console.escape(annotated.display()))

    if config.renderer == "none":
        return exit_codes.SUCCESS

    console.print(f"\n[bold]Drawing with {config.renderer}…[/bold]")
    artifacts = RenderService(_build_renderer(config)).render(annotated)
    console.print(
        f"[bold green]Wrote[/bold green] {artifacts.vector} and {artifacts.raster}"
    )
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from xbar_tree.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the xbar-tree CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)
    config = AppConfig.from_args(args)

    configure_logging(config.verbose)

    # Any option alongside "doctor" makes it a one-word sentence.
    if list(argv) == ["doctor"]:
        return _handle_doctor()

    return _handle_build(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except XbarTreeError as exc:
        console.print(f"[bold red]Error:[/bold red] {console.escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {console.escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
