"""Mark representations and the codecs that decode them from raw input.

Two interchangeable mark types are supported:

* plain strings — whatever the user typed, decoded by
  :class:`StringMarkCodec`;
* structured category marks — :class:`Phrase` (``NP``), :class:`Bar`
  (``N'``) and :class:`Bare` (``N``), decoded by
  :class:`CategoryMarkCodec`.

The annotation pass only ever sees a codec, so it stays generic over
the mark type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from xbar_tree.exceptions import MarkDecodeError


class Level(IntEnum):
    """X-bar projection level, ordered ``BARE < BAR < PHRASE``."""

    BARE = 0
    BAR = 1
    PHRASE = 2


# ---------------------------------------------------------------------------
# Structured category marks
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Phrase:
    """Full phrasal projection of *category*, displayed as ``XP``."""

    category: str

    @property
    def level(self) -> Level:
        return Level.PHRASE

    def __str__(self) -> str:
        return f"{self.category}P"


@dataclass(frozen=True, slots=True)
class Bar:
    """Intermediate projection of *category*, displayed as ``X'``."""

    category: str

    @property
    def level(self) -> Level:
        return Level.BAR

    def __str__(self) -> str:
        return f"{self.category}'"


@dataclass(frozen=True, slots=True)
class Bare:
    """Bare head of *category*, displayed as ``X``."""

    category: str

    @property
    def level(self) -> Level:
        return Level.BARE

    def __str__(self) -> str:
        return self.category


CategoryMark = Union[Phrase, Bar, Bare]

_SUFFIXES: dict[str, type[Phrase] | type[Bar]] = {
    "P": Phrase,
    "'": Bar,
}


def decode_category_mark(raw: str) -> CategoryMark:
    """Decode a one- or two-character mark such as ``N``, ``N'`` or ``NP``.

    The first character is the category symbol.  An optional second
    character selects the projection level: ``P`` for a phrase, ``'``
    for a bar projection, nothing for a bare head.

    Raises
    ------
    MarkDecodeError
        On an empty line, more than two characters, or an unknown suffix.
    """
    text = raw.strip()
    if not text:
        raise MarkDecodeError(
            "Mark must not be empty.",
            hint="Type a category such as N, N' or NP.",
        )
    if len(text) > 2:
        raise MarkDecodeError(
            f"Mark {text!r} is too long.",
            hint="A mark is one category letter plus an optional P or '.",
        )

    category = text[0]
    if len(text) == 1:
        return Bare(category)

    suffix = text[1]
    mark_class = _SUFFIXES.get(suffix)
    if mark_class is None:
        raise MarkDecodeError(
            f"Unknown mark suffix {suffix!r} in {text!r}.",
            hint="Use P for a phrase (NP) or ' for a bar level (N').",
        )
    return mark_class(category)


# ---------------------------------------------------------------------------
# Codecs
# ---------------------------------------------------------------------------

class StringMarkCodec:
    """Keep the typed mark as an open-ended string."""

    def decode(self, raw: str) -> str:
        return raw.strip()


class CategoryMarkCodec:
    """Decode typed marks into :data:`CategoryMark` values."""

    def decode(self, raw: str) -> CategoryMark:
        return decode_category_mark(raw)
