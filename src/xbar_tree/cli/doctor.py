"""``xbar-tree doctor`` — can this machine build and draw trees?

Building needs a supported Python and questionary; drawing needs the
renderer binaries.  Each requirement becomes one status line, and a
missing renderer shows the same install hint the renderer itself would
raise with.
"""

from __future__ import annotations

import platform
import sys

from xbar_tree.cli import exit_codes
from xbar_tree.cli.console import console
from xbar_tree.exceptions import RendererNotFoundError
from xbar_tree.infra.tool_detector import require_tool
from xbar_tree.version import __version__

MIN_PYTHON: tuple[int, int] = (3, 10)

# Binary -> the --renderer choice that needs it.
RENDER_TOOLS: tuple[tuple[str, str], ...] = (
    ("dot", "dot"),
    ("pdflatex", "latex"),
    ("pdftoppm", "latex"),
)


def python_supported(version_info: tuple[int, ...]) -> bool:
    return tuple(version_info[:2]) >= MIN_PYTHON


def _line(status: str, name: str, detail: str) -> str:
    return f"{status:<5} {name:<12} {detail}"


def _build_requirements() -> list[tuple[str, str, str]]:
    """Return (status, name, detail) for what every run needs; status is OK or FAIL."""
    rows: list[tuple[str, str, str]] = []

    version = platform.python_version()
    if python_supported(sys.version_info):
        rows.append(("OK", "python", version))
    else:
        rows.append(("FAIL", "python", f"{version} (needs >= 3.10)"))

    try:
        import questionary
    except ModuleNotFoundError:
        rows.append(("FAIL", "questionary", "not installed (pip install questionary)"))
    else:
        rows.append(("OK", "questionary", str(getattr(questionary, "__version__", "installed"))))

    return rows


def _renderer_line(name: str, renderer: str) -> list[str]:
    """Status line for one binary, followed by its install hint when missing."""
    try:
        path = require_tool(name)
    except RendererNotFoundError as exc:
        lines = [_line("WARN", name, f"not found, needed by --renderer {renderer}")]
        if exc.hint:
            lines.extend(f"      {hint}" for hint in exc.hint.splitlines())
        return lines
    return [_line("OK", name, str(path))]


def run_doctor() -> int:
    """Print one line per requirement.

    Returns :data:`exit_codes.GENERAL_ERROR` when building is impossible.
    Missing renderer binaries only warn, since ``--renderer none`` still
    works without them.
    """
    requirements = _build_requirements()

    lines = [f"xbar-tree {__version__} on {platform.system()} {platform.machine()}"]
    lines.extend(_line(*row) for row in requirements)
    for name, renderer in RENDER_TOOLS:
        lines.extend(_renderer_line(name, renderer))

    failed = any(status == "FAIL" for status, _, _ in requirements)
    lines.append("Some checks failed." if failed else "Ready to build trees.")

    for line in lines:
        console.print(console.escape(line))

    return exit_codes.GENERAL_ERROR if failed else exit_codes.SUCCESS
