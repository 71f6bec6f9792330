from cssgen.serialize.selectors import render_modifier, render_selector, render_sequence
from cssgen.serialize.serializer import (
    prefix_queries,
    render,
    render_declaration,
    render_style_block,
)

__all__ = [
    "render",
    "render_declaration",
    "render_style_block",
    "render_selector",
    "render_sequence",
    "render_modifier",
    "prefix_queries",
]
