"""Stylesheet model: properties, style blocks, declarations and the sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cssgen.model.media import MediaQuery
from cssgen.model.selector import Selector


@dataclass(frozen=True)
class Property:
    key: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class StyleBlock:
    """One selector group sharing one ordered list of properties.

    ``selector`` is the first selector of the group; ``selectors`` holds the
    rest, written after it separated by commas.
    """

    selector: Selector
    selectors: tuple[Selector, ...] = ()
    properties: tuple[Property, ...] = ()

    @property
    def all_selectors(self) -> tuple[Selector, ...]:
        return (self.selector, *self.selectors)


# --- declarations -------------------------------------------------------------


@dataclass(frozen=True)
class StyleBlockDeclaration:
    block: StyleBlock


@dataclass(frozen=True)
class MediaRule:
    """An ``@media`` rule; separate queries are alternatives (logical or)."""

    queries: tuple[MediaQuery, ...]
    blocks: tuple[StyleBlock, ...] = ()


# Reserved variants: modelled, but the serializer has no rule for them yet.


@dataclass(frozen=True)
class FontFaceRule:
    properties: tuple[Property, ...] = ()


@dataclass(frozen=True)
class KeyframesRule:
    name: str
    frames: tuple[StyleBlock, ...] = ()


@dataclass(frozen=True)
class SupportsRule:
    condition: str
    blocks: tuple[StyleBlock, ...] = ()


Declaration = Union[
    StyleBlockDeclaration, MediaRule, FontFaceRule, KeyframesRule, SupportsRule
]


# --- sheet --------------------------------------------------------------------


@dataclass(frozen=True)
class Import:
    """An ``@import`` of ``name``, optionally restricted to media queries."""

    name: str
    queries: tuple[MediaQuery, ...] = ()


@dataclass(frozen=True)
class Namespace:
    prefix: str
    uri: str


@dataclass(frozen=True)
class Stylesheet:
    """A complete stylesheet. Declaration order is cascade order."""

    charset: str | None = None
    imports: tuple[Import, ...] = ()
    namespaces: tuple[Namespace, ...] = ()
    declarations: tuple[Declaration, ...] = ()
