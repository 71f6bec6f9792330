"""Canonical text rendering of media query trees."""

from __future__ import annotations

from cssgen.model.media import (
    AndQuery,
    CustomQuery,
    FeatureQuery,
    MediaQuery,
    NotQuery,
    OrQuery,
    TypeQuery,
)

__all__ = ["render_media_query"]

_NOT_PREFIX = "not "


def render_media_query(query: MediaQuery) -> str:
    """Render *query* to CSS media query text.

    Binary nodes are always parenthesized, so precedence never depends on
    context. Negation is collapsed on the rendered text: if the operand
    already renders with a leading ``"not "`` that prefix is stripped,
    otherwise one is added. A custom query starting with ``"not "`` is
    therefore collapsed as well.
    """
    if isinstance(query, FeatureQuery):
        if query.value is None:
            return query.key
        return f"({query.key}: {query.value})"

    if isinstance(query, TypeQuery):
        return query.media_type.value

    if isinstance(query, CustomQuery):
        return query.raw

    if isinstance(query, AndQuery):
        return f"({render_media_query(query.left)} and {render_media_query(query.right)})"

    if isinstance(query, OrQuery):
        return f"({render_media_query(query.left)} or {render_media_query(query.right)})"

    if isinstance(query, NotQuery):
        inner = render_media_query(query.query)
        if inner.startswith(_NOT_PREFIX):
            return inner[len(_NOT_PREFIX):]
        return _NOT_PREFIX + inner

    raise TypeError(f"Not a media query: {query!r}")
