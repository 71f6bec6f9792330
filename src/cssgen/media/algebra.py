"""Constructors and combinators for media query trees.

Every combinator produces exactly one node; nothing is reordered or
simplified at construction time. Double negation is collapsed only when
the tree is rendered (see :func:`cssgen.media.render.render_media_query`).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from cssgen.model.media import (
    AndQuery,
    CustomQuery,
    FeatureQuery,
    MediaQuery,
    MediaType,
    NotQuery,
    OrQuery,
    TypeQuery,
)

__all__ = [
    "feature",
    "media_type",
    "custom",
    "and_",
    "or_",
    "not_",
    "connect_with",
    "all_of",
    "any_of",
]

Combine = Callable[[MediaQuery, MediaQuery], MediaQuery]


def feature(key: str, value: object | None = None) -> FeatureQuery:
    """Feature test; non-string values are formatted with ``str``."""
    return FeatureQuery(key=key, value=None if value is None else str(value))


def media_type(kind: MediaType | str) -> TypeQuery:
    return TypeQuery(media_type=MediaType(kind))


def custom(raw: str) -> CustomQuery:
    return CustomQuery(raw=raw)


def and_(left: MediaQuery, right: MediaQuery) -> AndQuery:
    return AndQuery(left=left, right=right)


def or_(left: MediaQuery, right: MediaQuery) -> OrQuery:
    return OrQuery(left=left, right=right)


def not_(query: MediaQuery) -> NotQuery:
    return NotQuery(query=query)


def connect_with(combine: Combine, queries: Iterable[MediaQuery]) -> MediaQuery | None:
    """Fold *queries* pairwise from the right with *combine*.

    ``[a, b, c]`` becomes ``combine(a, combine(b, c))``. An empty input
    yields ``None`` and a single query is returned unchanged.
    """
    items = list(queries)
    if not items:
        return None
    result = items[-1]
    for query in reversed(items[:-1]):
        result = combine(query, result)
    return result


def all_of(queries: Iterable[MediaQuery]) -> MediaQuery | None:
    return connect_with(and_, queries)


def any_of(queries: Iterable[MediaQuery]) -> MediaQuery | None:
    return connect_with(or_, queries)
