"""Allow ``python -m xbar_tree`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m xbar_tree`` behaves identically to the ``xbar-tree``
console script.
"""

from __future__ import annotations

from xbar_tree.cli.app import cli

if __name__ == "__main__":
    cli()
