"""Custom exception hierarchy for xbar-tree.

All exceptions that cross layer boundaries must inherit from
:class:`XbarTreeError`.  Raw subprocess / OS exceptions raised while
rendering must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
XbarTreeError
├── InputError
│   ├── EmptySentenceError
│   └── InvalidSelectionError
├── InputCancelledError
├── AnnotationError
│   ├── MarkDecodeError
│   └── ConsistencyError
├── RenderError
│   └── RendererNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class XbarTreeError(Exception):
    """Base exception for all xbar-tree errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Recoverable input -----------------------------------------------------

class InputError(XbarTreeError):
    """Raised for malformed user input that can simply be asked for again.

    Prompt loops catch this class, report it, and re-prompt.  It never
    reaches the CLI error boundary during a normal run.
    """


class EmptySentenceError(InputError):
    """Raised when the typed sentence contains no words."""


class InvalidSelectionError(InputError):
    """Raised when a merge selection is malformed, out of range, or not adjacent."""


class InputCancelledError(XbarTreeError):
    """Raised when the user dismisses a prompt (Esc / Ctrl+D)."""


# --- Annotation consistency ------------------------------------------------

class AnnotationError(XbarTreeError):
    """Base class for fatal annotation errors."""


class MarkDecodeError(AnnotationError):
    """Raised when a structured mark cannot be decoded from raw input."""


class ConsistencyError(AnnotationError):
    """Raised when a tree's marks violate the X-bar projection rules."""


# --- Rendering -------------------------------------------------------------

class RenderError(XbarTreeError):
    """Raised when the external renderer fails or exits with an error."""


class RendererNotFoundError(RenderError):
    """Raised when a renderer binary cannot be located on the system PATH."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(XbarTreeError):
    """Raised when a required runtime dependency is not available."""
