"""Typed media feature constructors.

Each feature accepts the value kind it is defined over, or an opaque
pre-formatted string::

    >>> from cssgen.media import render_media_query
    >>> render_media_query(min_width(Length(600, "px")))
    '(min-width: 600px)'
    >>> render_media_query(aspect_ratio(Ratio(16, 9)))
    '(aspect-ratio: 16/9)'

Passing the wrong kind (say, a ``Ratio`` to ``min_width``) raises
``TypeError``. This is a structural check only; units and keywords are
not validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cssgen.media.algebra import feature
from cssgen.model.media import FeatureQuery


def _number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# --- value kinds --------------------------------------------------------------


@dataclass(frozen=True)
class Length:
    value: float
    unit: str = "px"

    def __str__(self) -> str:
        if self.value == 0:
            return "0"
        return f"{_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Ratio:
    width: int
    height: int = 1

    def __str__(self) -> str:
        return f"{self.width}/{self.height}"


@dataclass(frozen=True)
class Resolution:
    value: float
    unit: str = "dppx"

    def __str__(self) -> str:
        return f"{_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Count:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EnumValue:
    keyword: str

    def __str__(self) -> str:
        return self.keyword


FeatureValue = Union[Length, Ratio, Resolution, Count, EnumValue]


def _typed(key: str, kind: type, value: object | None, optional: bool = False) -> FeatureQuery:
    if value is None:
        if not optional:
            raise TypeError(f"{key} requires a {kind.__name__} value")
        return feature(key)
    if not isinstance(value, (kind, str)):
        raise TypeError(
            f"{key} expects {kind.__name__} or str, got {type(value).__name__}"
        )
    return feature(key, value)


# --- dimensions -----------------------------------------------------------------


def width(value: Length | str) -> FeatureQuery:
    return _typed("width", Length, value)


def min_width(value: Length | str) -> FeatureQuery:
    return _typed("min-width", Length, value)


def max_width(value: Length | str) -> FeatureQuery:
    return _typed("max-width", Length, value)


def height(value: Length | str) -> FeatureQuery:
    return _typed("height", Length, value)


def min_height(value: Length | str) -> FeatureQuery:
    return _typed("min-height", Length, value)


def max_height(value: Length | str) -> FeatureQuery:
    return _typed("max-height", Length, value)


def aspect_ratio(value: Ratio | str) -> FeatureQuery:
    return _typed("aspect-ratio", Ratio, value)


def min_aspect_ratio(value: Ratio | str) -> FeatureQuery:
    return _typed("min-aspect-ratio", Ratio, value)


def max_aspect_ratio(value: Ratio | str) -> FeatureQuery:
    return _typed("max-aspect-ratio", Ratio, value)


# --- display quality ------------------------------------------------------------


def resolution(value: Resolution | str) -> FeatureQuery:
    return _typed("resolution", Resolution, value)


def min_resolution(value: Resolution | str) -> FeatureQuery:
    return _typed("min-resolution", Resolution, value)


def max_resolution(value: Resolution | str) -> FeatureQuery:
    return _typed("max-resolution", Resolution, value)


def color(value: Count | str | None = None) -> FeatureQuery:
    """Bits per color component; without a value, tests for any color."""
    return _typed("color", Count, value, optional=True)


def min_color(value: Count | str) -> FeatureQuery:
    return _typed("min-color", Count, value)


def max_color(value: Count | str) -> FeatureQuery:
    return _typed("max-color", Count, value)


def color_index(value: Count | str | None = None) -> FeatureQuery:
    return _typed("color-index", Count, value, optional=True)


def monochrome(value: Count | str | None = None) -> FeatureQuery:
    return _typed("monochrome", Count, value, optional=True)


def min_monochrome(value: Count | str) -> FeatureQuery:
    return _typed("min-monochrome", Count, value)


def max_monochrome(value: Count | str) -> FeatureQuery:
    return _typed("max-monochrome", Count, value)


# --- keyword features -----------------------------------------------------------


def orientation(value: EnumValue | str) -> FeatureQuery:
    return _typed("orientation", EnumValue, value)


def scan(value: EnumValue | str) -> FeatureQuery:
    return _typed("scan", EnumValue, value)


def grid(value: Count | str | None = None) -> FeatureQuery:
    return _typed("grid", Count, value, optional=True)


def hover(value: EnumValue | str) -> FeatureQuery:
    return _typed("hover", EnumValue, value)


def any_hover(value: EnumValue | str) -> FeatureQuery:
    return _typed("any-hover", EnumValue, value)


def pointer(value: EnumValue | str) -> FeatureQuery:
    return _typed("pointer", EnumValue, value)


def any_pointer(value: EnumValue | str) -> FeatureQuery:
    return _typed("any-pointer", EnumValue, value)


def prefers_color_scheme(value: EnumValue | str) -> FeatureQuery:
    return _typed("prefers-color-scheme", EnumValue, value)


def prefers_reduced_motion(value: EnumValue | str) -> FeatureQuery:
    return _typed("prefers-reduced-motion", EnumValue, value)
