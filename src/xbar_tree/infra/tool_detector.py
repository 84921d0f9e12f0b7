"""Infrastructure: renderer binary detection and platform guidance.

This module is responsible for locating the external drawing and
typesetting tools (``dot``, ``pdflatex``, ``pdftoppm``) on the system
PATH and providing platform-specific installation guidance when one is
missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No permanent PATH modification.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from xbar_tree.exceptions import RendererNotFoundError

# Tool name -> per-platform package that provides it.
_PACKAGES: dict[str, dict[str, str]] = {
    "dot": {
        "windows": "Graphviz.Graphviz",
        "linux": "graphviz",
        "darwin": "graphviz",
    },
    "pdflatex": {
        "windows": "MiKTeX.MiKTeX",
        "linux": "texlive-latex-extra",
        "darwin": "--cask mactex-no-gui",
    },
    "pdftoppm": {
        "windows": "oschwartz10612.Poppler",
        "linux": "poppler-utils",
        "darwin": "poppler",
    },
}


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a tool detection probe.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether the tool was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system for the executable *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        resolved = Path(result).resolve()
        return ToolStatus(
            name=name,
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(name),
    )


def require_tool(name: str) -> Path:
    """Locate *name* or raise :class:`RendererNotFoundError`."""
    status = detect_tool(name)
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append(f"Install {name} using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise RendererNotFoundError(
            f"{name} is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    packages = _PACKAGES.get(name)
    system = platform.system().lower()
    if packages is None:
        return (f"Please install {name} and make sure it is on PATH.",)
    if system == "windows":
        return (f"winget install {packages['windows']}",)
    if system == "linux":
        package = packages["linux"]
        return (
            f"sudo apt install {package}",
            f"sudo dnf install {package}",
            f"sudo pacman -S {package}",
        )
    if system == "darwin":
        return (f"brew install {packages['darwin']}",)
    # Fallback — generic guidance.
    return (f"Please install {name} and make sure it is on PATH.",)
