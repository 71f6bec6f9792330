"""Tests for typed media feature constructors and value kinds."""

import pytest

from cssgen.media import Count, EnumValue, Length, Ratio, Resolution, render_media_query
from cssgen.media import features
from cssgen.model.media import FeatureQuery


class TestValueKinds:
    def test_length(self):
        assert str(Length(600, "px")) == "600px"

    def test_length_defaults_to_px(self):
        assert str(Length(12)) == "12px"

    def test_length_integral_float(self):
        assert str(Length(40.0, "em")) == "40em"

    def test_length_fraction(self):
        assert str(Length(37.5, "rem")) == "37.5rem"

    def test_zero_length_is_unitless(self):
        assert str(Length(0, "px")) == "0"

    def test_ratio(self):
        assert str(Ratio(16, 9)) == "16/9"

    def test_resolution(self):
        assert str(Resolution(2)) == "2dppx"
        assert str(Resolution(192, "dpi")) == "192dpi"

    def test_count(self):
        assert str(Count(8)) == "8"

    def test_enum_value(self):
        assert str(EnumValue("landscape")) == "landscape"


class TestFeatureConstructors:
    def test_min_width(self):
        assert features.min_width(Length(600)) == FeatureQuery("min-width", "600px")

    def test_max_height_string(self):
        assert features.max_height("50vh") == FeatureQuery("max-height", "50vh")

    def test_aspect_ratio_rendering(self):
        q = features.min_aspect_ratio(Ratio(4, 3))
        assert render_media_query(q) == "(min-aspect-ratio: 4/3)"

    def test_resolution(self):
        q = features.min_resolution(Resolution(2, "dppx"))
        assert render_media_query(q) == "(min-resolution: 2dppx)"

    def test_color_without_value(self):
        assert render_media_query(features.color()) == "color"

    def test_color_with_count(self):
        assert render_media_query(features.min_color(Count(8))) == "(min-color: 8)"

    def test_orientation(self):
        q = features.orientation(EnumValue("portrait"))
        assert render_media_query(q) == "(orientation: portrait)"

    def test_prefers_color_scheme(self):
        q = features.prefers_color_scheme("dark")
        assert render_media_query(q) == "(prefers-color-scheme: dark)"

    def test_grid_optional(self):
        assert features.grid() == FeatureQuery("grid", None)


class TestKindChecks:
    def test_wrong_kind_rejected(self):
        with pytest.raises(TypeError, match="min-width expects Length"):
            features.min_width(Ratio(16, 9))  # type: ignore[arg-type]

    def test_number_rejected(self):
        with pytest.raises(TypeError):
            features.width(600)  # type: ignore[arg-type]

    def test_required_value_missing(self):
        with pytest.raises(TypeError, match="requires"):
            features.min_width(None)  # type: ignore[arg-type]

    def test_enum_feature_rejects_length(self):
        with pytest.raises(TypeError):
            features.hover(Length(1))  # type: ignore[arg-type]
