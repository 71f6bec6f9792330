"""Stylesheet serializer: renders a Stylesheet model to CSS text.

Output layout::

    @charset "UTF-8";

    @import url("print.css") only print;

    @namespace svg url("http://www.w3.org/2000/svg");

    a, a:visited {
        color: navy;
    }

    @media only screen {
        body {
            color: black;
        }
    }

Each of the four sections is rendered on its own and empty sections are
dropped, so an empty stylesheet renders to the empty string.
"""

from __future__ import annotations

import logging

from cssgen.config import RenderConfig
from cssgen.errors import UnsupportedDeclarationError
from cssgen.media.render import render_media_query
from cssgen.model.media import MediaQuery
from cssgen.model.stylesheet import (
    Declaration,
    Import,
    MediaRule,
    Namespace,
    Property,
    StyleBlock,
    StyleBlockDeclaration,
    Stylesheet,
)
from cssgen.serialize.selectors import render_selector

__all__ = ["render", "render_declaration", "render_style_block", "prefix_queries"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = RenderConfig()


def render(stylesheet: Stylesheet, config: RenderConfig | None = None) -> str:
    """Render *stylesheet* to CSS text.

    Raises :class:`UnsupportedDeclarationError` if any declaration has no
    rendering rule; nothing is returned in that case.
    """
    config = config or _DEFAULT_CONFIG
    logger.debug(
        "Rendering stylesheet: %d import(s), %d namespace(s), %d declaration(s)",
        len(stylesheet.imports),
        len(stylesheet.namespaces),
        len(stylesheet.declarations),
    )
    sections = [
        _render_charset(stylesheet.charset),
        "\n".join(_render_import(i) for i in stylesheet.imports),
        "\n".join(_render_namespace(n) for n in stylesheet.namespaces),
        config.block_separator.join(
            render_declaration(d, config) for d in stylesheet.declarations
        ),
    ]
    return config.block_separator.join(s for s in sections if s)


# --- preamble -----------------------------------------------------------------


def _render_charset(charset: str | None) -> str:
    if charset is None:
        return ""
    return f'@charset "{charset}";'


def _render_import(item: Import) -> str:
    if not item.queries:
        return f'@import url("{item.name}");'
    queries = ", ".join(render_media_query(q) for q in item.queries)
    return f'@import url("{item.name}") {prefix_queries(queries)};'


def _render_namespace(namespace: Namespace) -> str:
    if not namespace.prefix:
        return f'@namespace url("{namespace.uri}");'
    return f'@namespace {namespace.prefix} url("{namespace.uri}");'


# --- declarations -------------------------------------------------------------


def prefix_queries(text: str) -> str:
    """Apply the ``only``/``not`` prefix policy to a rendered query list.

    Legacy user agents that do not understand a media query treat a bare
    condition as matching everything; a leading ``only`` makes them skip
    the rule instead. ``not`` and ``only`` cannot both appear, so text that
    already starts with ``not`` is left alone.
    """
    if text.startswith("not "):
        return text
    return f"only {text}"


def render_declaration(
    declaration: Declaration, config: RenderConfig | None = None, indent: str = ""
) -> str:
    config = config or _DEFAULT_CONFIG

    if isinstance(declaration, StyleBlockDeclaration):
        return render_style_block(declaration.block, config, indent)

    if isinstance(declaration, MediaRule):
        return _render_media_rule(declaration, config, indent)

    logger.debug("No rendering rule for %s", type(declaration).__name__)
    raise UnsupportedDeclarationError(declaration)


def _render_media_rule(rule: MediaRule, config: RenderConfig, indent: str) -> str:
    queries = prefix_queries(_join_queries(rule.queries))
    logger.debug("Rendering @media %r with %d block(s)", queries, len(rule.blocks))
    inner = indent + config.indent_unit
    blocks = config.block_separator.join(
        render_style_block(b, config, inner) for b in rule.blocks
    )
    return f"{indent}@media {queries} {{\n{blocks}\n{indent}}}"


def _join_queries(queries: tuple[MediaQuery, ...]) -> str:
    return ",\n".join(render_media_query(q) for q in queries)


def render_style_block(
    block: StyleBlock, config: RenderConfig | None = None, indent: str = ""
) -> str:
    """Render one selector group and its properties at *indent*.

    A block without properties keeps an empty line between its braces.
    """
    config = config or _DEFAULT_CONFIG
    selectors = ", ".join(render_selector(s) for s in block.all_selectors)
    inner = indent + config.indent_unit
    properties = "\n".join(inner + _render_property(p) for p in block.properties)
    return f"{indent}{selectors} {{\n{properties}\n{indent}}}"


def _render_property(prop: Property) -> str:
    if prop.important:
        return f"{prop.key}: {prop.value} !important;"
    return f"{prop.key}: {prop.value};"
