"""cssgen -- a structured CSS stylesheet model with a deterministic serializer."""

from cssgen.config import RenderConfig
from cssgen.errors import (
    CSSGenError,
    LoadError,
    MediaQueryParseError,
    UnsupportedDeclarationError,
)
from cssgen.loader import load_stylesheet, load_stylesheet_file
from cssgen.media import parse_media_query, render_media_query
from cssgen.serialize import render

__version__ = "0.1.0"

__all__ = [
    "render",
    "render_media_query",
    "parse_media_query",
    "load_stylesheet",
    "load_stylesheet_file",
    "RenderConfig",
    "CSSGenError",
    "UnsupportedDeclarationError",
    "MediaQueryParseError",
    "LoadError",
]
