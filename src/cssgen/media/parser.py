"""Lark Transformer that reads media query text into a MediaQuery tree.

The grammar reads the form produced by ``render_media_query``, not the
full CSS Media Queries level 3 syntax. ``not`` negates only the operand
that follows it, so ``not screen and color`` is ``(not screen) and color``
here, where a browser would negate the whole query. Media type names are
matched case-sensitively; ``Screen`` is a feature name. The keywords
``and``, ``or``, ``not`` and ``only`` cannot be used as bare feature names.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssgen.errors import MediaQueryParseError
from cssgen.media.algebra import all_of, any_of, feature, media_type, not_
from cssgen.model.media import MediaQuery, MediaType

__all__ = ["parse_media_query"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_MEDIA_TYPES = {t.value for t in MediaType}


class MediaQueryTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into media query model values."""

    def name(self, items: list[Token]) -> MediaQuery:
        ident = str(items[0])
        if ident in _MEDIA_TYPES:
            return media_type(ident)
        return feature(ident)

    def feature(self, items: list[Token | None]) -> MediaQuery:
        key, value = items
        # "(key: )" keeps an empty value rather than becoming a bare feature
        return feature(str(key), "" if value is None else str(value).strip())

    def negation(self, items: list[MediaQuery]) -> MediaQuery:
        return not_(items[0])

    # Chains fold right-associatively: a and b and c -> (a and (b and c)).

    def and_expr(self, items: list[MediaQuery]) -> MediaQuery:
        return all_of(items)  # type: ignore[return-value]

    def or_expr(self, items: list[MediaQuery]) -> MediaQuery:
        return any_of(items)  # type: ignore[return-value]


def parse_media_query(source: str) -> MediaQuery:
    """Parse media query text such as ``screen and (min-width: 600px)``."""
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
        query = MediaQueryTransformer().transform(tree)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise MediaQueryParseError(
            f"Invalid media query {source!r}: {e}", line=line, column=column, cause=e
        ) from e
    logger.debug("Parsed media query %r", source)
    return query
