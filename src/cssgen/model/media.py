"""Media query model: an immutable boolean expression tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class MediaType(StrEnum):
    """Media types accepted in a type test."""

    ALL = "all"
    PRINT = "print"
    SCREEN = "screen"
    SPEECH = "speech"


@dataclass(frozen=True)
class FeatureQuery:
    """Test of a named device or viewport feature.

    ``value`` is ``None`` for a bare boolean-context test such as ``color``.
    """

    key: str
    value: str | None = None


@dataclass(frozen=True)
class TypeQuery:
    media_type: MediaType


@dataclass(frozen=True)
class AndQuery:
    left: MediaQuery
    right: MediaQuery


@dataclass(frozen=True)
class OrQuery:
    left: MediaQuery
    right: MediaQuery


@dataclass(frozen=True)
class NotQuery:
    query: MediaQuery


@dataclass(frozen=True)
class CustomQuery:
    """Raw query text emitted verbatim."""

    raw: str


MediaQuery = Union[FeatureQuery, TypeQuery, AndQuery, OrQuery, NotQuery, CustomQuery]
