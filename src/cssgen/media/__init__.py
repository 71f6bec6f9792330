"""Media query algebra: construction, combination, rendering and parsing."""

from cssgen.media.algebra import (
    all_of,
    and_,
    any_of,
    connect_with,
    custom,
    feature,
    media_type,
    not_,
    or_,
)
from cssgen.media.features import Count, EnumValue, Length, Ratio, Resolution
from cssgen.media.parser import parse_media_query
from cssgen.media.render import render_media_query

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
    "render_media_query",
    "parse_media_query",
    "Length",
    "Ratio",
    "Resolution",
    "Count",
    "EnumValue",
]
