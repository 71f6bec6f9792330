"""Selector model: simple selector sequences chained by combinators.

A selector reads left to right in document order::

    nav.main > a:hover::before

is ``Selector(base=ElementSequence("nav", (ClassName("main"),)),
chain=((SelectorCombinator.CHILD, ElementSequence("a", (PseudoClass("hover"),))),),
pseudo_element="before")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SelectorCombinator(Enum):
    """Structural relationship between two chained sequences.

    The value is the rendered symbol; descendant is written as whitespace.
    """

    DESCENDANT = ""
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


# --- modifiers ----------------------------------------------------------------


@dataclass(frozen=True)
class ClassName:
    name: str


@dataclass(frozen=True)
class IdName:
    name: str


@dataclass(frozen=True)
class PseudoClass:
    """A pseudo-class such as ``hover`` or ``nth-child(2n)``."""

    name: str


Modifier = Union[ClassName, IdName, PseudoClass]


# --- simple selector sequences ------------------------------------------------


@dataclass(frozen=True)
class ElementSequence:
    """Type selector followed by modifiers, e.g. ``a.external:hover``."""

    element: str
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True)
class UniversalSequence:
    """Universal selector followed by modifiers.

    Renders ``*`` only without modifiers; ``*.foo`` is written ``.foo``.
    """

    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True)
class CustomSequence:
    """Arbitrary raw base text followed by modifiers."""

    raw: str
    modifiers: tuple[Modifier, ...] = ()


SimpleSequence = Union[ElementSequence, UniversalSequence, CustomSequence]


@dataclass(frozen=True)
class Selector:
    """A complete selector: base sequence, combinator chain, pseudo-element."""

    base: SimpleSequence
    chain: tuple[tuple[SelectorCombinator, SimpleSequence], ...] = ()
    pseudo_element: str | None = None
