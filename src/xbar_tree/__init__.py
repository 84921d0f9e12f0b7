"""xbar-tree — interactive constituency tree builder.

Merge a typed sentence into a binary constituent tree, annotate every
node with an X-bar style mark, and render it with Graphviz or LaTeX.
"""

from xbar_tree.version import __version__

__all__: list[str] = ["__version__"]
