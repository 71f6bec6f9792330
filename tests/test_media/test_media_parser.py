"""Tests for the media query text parser."""

import pytest

from cssgen.errors import CSSGenError, MediaQueryParseError
from cssgen.media import (
    and_,
    feature,
    media_type,
    not_,
    or_,
    parse_media_query,
    render_media_query,
)
from cssgen.model.media import MediaType, TypeQuery


class TestLeaves:
    def test_media_type(self):
        assert parse_media_query("screen") == TypeQuery(MediaType.SCREEN)

    def test_media_type_is_case_sensitive(self):
        assert parse_media_query("PRINT") == feature("PRINT")

    def test_empty_feature_value(self):
        assert parse_media_query("(min-width: )") == feature("min-width", "")

    def test_not_binds_to_next_operand(self):
        q = parse_media_query("not screen and color")
        assert q == and_(not_(media_type("screen")), feature("color"))

    def test_feature_with_value(self):
        assert parse_media_query("(min-width: 600px)") == feature("min-width", "600px")

    def test_feature_value_whitespace_trimmed(self):
        assert parse_media_query("( max-width :   40em )") == feature("max-width", "40em")

    def test_bare_feature(self):
        assert parse_media_query("color") == feature("color")

    def test_parenthesized_bare_feature(self):
        assert parse_media_query("(hover)") == feature("hover")

    def test_ratio_value(self):
        assert parse_media_query("(aspect-ratio: 16/9)") == feature("aspect-ratio", "16/9")

    def test_leading_only_ignored(self):
        assert parse_media_query("only screen") == media_type("screen")


class TestOperators:
    def test_and(self):
        q = parse_media_query("screen and (min-width: 600px)")
        assert q == and_(media_type("screen"), feature("min-width", "600px"))

    def test_or(self):
        assert parse_media_query("print or screen") == or_(media_type("print"), media_type("screen"))

    def test_not(self):
        assert parse_media_query("not print") == not_(media_type("print"))

    def test_and_binds_tighter_than_or(self):
        q = parse_media_query("print or screen and color")
        assert q == or_(media_type("print"), and_(media_type("screen"), feature("color")))

    def test_chain_folds_right(self):
        q = parse_media_query("screen and color and (orientation: landscape)")
        assert q == and_(
            media_type("screen"),
            and_(feature("color"), feature("orientation", "landscape")),
        )

    def test_groups(self):
        q = parse_media_query("(print or screen) and color")
        assert q == and_(or_(media_type("print"), media_type("screen")), feature("color"))

    def test_double_not(self):
        assert parse_media_query("not not screen") == not_(not_(media_type("screen")))


class TestRoundTrip:
    @pytest.mark.parametrize(
        "query",
        [
            and_(media_type("screen"), feature("min-width", "600px")),
            or_(not_(media_type("print")), and_(feature("color"), feature("hover", "hover"))),
            not_(or_(media_type("print"), media_type("speech"))),
        ],
    )
    def test_render_parse_render(self, query):
        text = render_media_query(query)
        assert render_media_query(parse_media_query(text)) == text


class TestRoundTripEdges:
    @pytest.mark.parametrize(
        "query",
        [
            feature("Screen"),
            feature("PRINT"),
            feature("min-width", ""),
            feature("-webkit-min-device-pixel-ratio", "2"),
            not_(feature("color")),
            and_(feature("All"), media_type("all")),
        ],
    )
    def test_round_trips(self, query):
        text = render_media_query(query)
        assert parse_media_query(text) == query
        assert render_media_query(parse_media_query(text)) == text

    @pytest.mark.parametrize("keyword", ["only", "not"])
    def test_keyword_feature_names_rejected(self, keyword):
        with pytest.raises(MediaQueryParseError):
            parse_media_query(render_media_query(feature(keyword)))


class TestErrors:
    def test_empty(self):
        with pytest.raises(MediaQueryParseError):
            parse_media_query("")

    def test_unbalanced(self):
        with pytest.raises(MediaQueryParseError):
            parse_media_query("(min-width: 600px")

    def test_dangling_operator(self):
        with pytest.raises(MediaQueryParseError) as exc_info:
            parse_media_query("screen and")
        assert isinstance(exc_info.value, CSSGenError)

    def test_position_reported(self):
        with pytest.raises(MediaQueryParseError) as exc_info:
            parse_media_query("screen ) print")
        assert exc_info.value.column is not None
