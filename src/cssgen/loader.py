"""Build stylesheet models from JSON-shaped documents.

Document shape::

    {
      "charset": "UTF-8",
      "imports": [{"url": "print.css", "media": ["print"]}],
      "namespaces": [{"prefix": "svg", "uri": "http://www.w3.org/2000/svg"}],
      "rules": [
        {"selectors": ["a", {"element": "a", "modifiers": [":hover"]}],
         "properties": {"color": "red"}},
        {"media": ["screen and (min-width: 600px)"],
         "rules": [{"selectors": ["body"], "properties": {"margin": "0"}}]}
      ]
    }

Only the structure is checked. Keys, values and raw selector text are
passed through untouched.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cssgen.errors import LoadError, MediaQueryParseError
from cssgen.media.parser import parse_media_query
from cssgen.model.media import MediaQuery
from cssgen.model.selector import (
    ClassName,
    CustomSequence,
    ElementSequence,
    IdName,
    Modifier,
    PseudoClass,
    Selector,
    SelectorCombinator,
    SimpleSequence,
    UniversalSequence,
)
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

__all__ = ["load_stylesheet", "load_stylesheet_file"]

logger = logging.getLogger(__name__)

_COMBINATORS: dict[str, SelectorCombinator] = {
    "descendant": SelectorCombinator.DESCENDANT,
    "child": SelectorCombinator.CHILD,
    "adjacent": SelectorCombinator.ADJACENT_SIBLING,
    "general": SelectorCombinator.GENERAL_SIBLING,
    ">": SelectorCombinator.CHILD,
    "+": SelectorCombinator.ADJACENT_SIBLING,
    "~": SelectorCombinator.GENERAL_SIBLING,
}

_MODIFIERS: dict[str, type] = {
    ".": ClassName,
    "#": IdName,
    ":": PseudoClass,
}

_IMPORTANT = "!important"

_SHEET_KEYS = {"charset", "imports", "namespaces", "rules"}
_BLOCK_KEYS = {"selectors", "properties"}
_MEDIA_KEYS = {"media", "rules"}
_SEQUENCE_KEYS = {"element", "universal", "raw", "modifiers"}
_SELECTOR_KEYS = _SEQUENCE_KEYS | {"chain", "pseudo_element"}


def load_stylesheet(data: Mapping[str, Any]) -> Stylesheet:
    """Build a Stylesheet from a parsed JSON or TOML document."""
    _expect(data, Mapping, "")
    _check_keys(data, _SHEET_KEYS, "")

    charset = data.get("charset")
    if charset is not None:
        _expect(charset, str, "charset")

    imports = tuple(
        _load_import(item, f"imports[{i}]")
        for i, item in enumerate(_list(data, "imports", ""))
    )
    namespaces = tuple(
        _load_namespace(item, f"namespaces[{i}]")
        for i, item in enumerate(_list(data, "namespaces", ""))
    )
    declarations = tuple(
        _load_declaration(item, f"rules[{i}]")
        for i, item in enumerate(_list(data, "rules", ""))
    )
    logger.debug(
        "Loaded stylesheet: %d import(s), %d namespace(s), %d rule(s)",
        len(imports),
        len(namespaces),
        len(declarations),
    )
    return Stylesheet(
        charset=charset,
        imports=imports,
        namespaces=namespaces,
        declarations=declarations,
    )


def load_stylesheet_file(path: str | Path) -> Stylesheet:
    """Read a ``.json`` or ``.toml`` stylesheet document from *path*."""
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"cannot read {path.name}: {exc}", cause=exc) from exc
    except UnicodeDecodeError as exc:
        raise LoadError(f"cannot decode {path.name}: {exc}", cause=exc) from exc
    try:
        if path.suffix == ".toml":
            data = tomllib.loads(source)
        else:
            data = json.loads(source)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise LoadError(f"cannot decode {path.name}: {exc}", cause=exc) from exc
    return load_stylesheet(data)


# --- helpers ------------------------------------------------------------------


def _expect(value: Any, kind: type, path: str) -> None:
    if not isinstance(value, kind):
        raise LoadError(
            f"expected {kind.__name__}, got {type(value).__name__}", path=path
        )


def _check_keys(item: Mapping[str, Any], allowed: set[str], path: str) -> None:
    unknown = sorted(set(item) - allowed)
    if unknown:
        raise LoadError(f"unknown key(s): {', '.join(unknown)}", path=path)


def _list(item: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = item.get(key, [])
    _expect(value, list, _join(path, key))
    return value


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


# --- preamble -----------------------------------------------------------------


def _load_import(item: Any, path: str) -> Import:
    if isinstance(item, str):
        return Import(name=item)
    _expect(item, Mapping, path)
    _check_keys(item, {"url", "media"}, path)
    if "url" not in item:
        raise LoadError("missing 'url'", path=path)
    _expect(item["url"], str, _join(path, "url"))
    return Import(name=item["url"], queries=_load_queries(item, path))


def _load_namespace(item: Any, path: str) -> Namespace:
    _expect(item, Mapping, path)
    _check_keys(item, {"prefix", "uri"}, path)
    if "uri" not in item:
        raise LoadError("missing 'uri'", path=path)
    prefix = item.get("prefix", "")
    _expect(prefix, str, _join(path, "prefix"))
    _expect(item["uri"], str, _join(path, "uri"))
    return Namespace(prefix=prefix, uri=item["uri"])


def _load_queries(item: Mapping[str, Any], path: str) -> tuple[MediaQuery, ...]:
    queries: list[MediaQuery] = []
    for i, text in enumerate(_list(item, "media", path)):
        query_path = f"{_join(path, 'media')}[{i}]"
        _expect(text, str, query_path)
        try:
            queries.append(parse_media_query(text))
        except MediaQueryParseError as exc:
            raise LoadError(str(exc), path=query_path, cause=exc) from exc
    return tuple(queries)


# --- rules --------------------------------------------------------------------


def _load_declaration(item: Any, path: str) -> Declaration:
    _expect(item, Mapping, path)
    if "media" in item:
        _check_keys(item, _MEDIA_KEYS, path)
        queries = _load_queries(item, path)
        if not queries:
            raise LoadError("media rule needs at least one query", path=path)
        blocks = tuple(
            _load_block(block, f"{_join(path, 'rules')}[{i}]")
            for i, block in enumerate(_list(item, "rules", path))
        )
        return MediaRule(queries=queries, blocks=blocks)
    return StyleBlockDeclaration(block=_load_block(item, path))


def _load_block(item: Any, path: str) -> StyleBlock:
    _expect(item, Mapping, path)
    _check_keys(item, _BLOCK_KEYS, path)
    raw_selectors = _list(item, "selectors", path)
    if not raw_selectors:
        raise LoadError("style rule needs at least one selector", path=path)
    selectors = [
        _load_selector(sel, f"{_join(path, 'selectors')}[{i}]")
        for i, sel in enumerate(raw_selectors)
    ]
    return StyleBlock(
        selector=selectors[0],
        selectors=tuple(selectors[1:]),
        properties=_load_properties(item.get("properties", {}), _join(path, "properties")),
    )


def _load_properties(value: Any, path: str) -> tuple[Property, ...]:
    if isinstance(value, Mapping):
        return tuple(_property(str(k), v, False) for k, v in value.items())
    _expect(value, list, path)
    props: list[Property] = []
    for i, entry in enumerate(value):
        entry_path = f"{path}[{i}]"
        _expect(entry, Mapping, entry_path)
        _check_keys(entry, {"key", "value", "important"}, entry_path)
        if "key" not in entry or "value" not in entry:
            raise LoadError("property needs 'key' and 'value'", path=entry_path)
        props.append(
            _property(str(entry["key"]), entry["value"], bool(entry.get("important", False)))
        )
    return tuple(props)


def _property(key: str, value: Any, important: bool) -> Property:
    text = str(value).strip()
    if text.endswith(_IMPORTANT):
        text = text[: -len(_IMPORTANT)].rstrip()
        important = True
    return Property(key=key, value=text, important=important)


# --- selectors ----------------------------------------------------------------


def _load_selector(item: Any, path: str) -> Selector:
    if isinstance(item, str):
        return Selector(base=CustomSequence(raw=item))
    _expect(item, Mapping, path)
    _check_keys(item, _SELECTOR_KEYS, path)

    base = _load_sequence({k: v for k, v in item.items() if k in _SEQUENCE_KEYS}, path)
    chain: list[tuple[SelectorCombinator, SimpleSequence]] = []
    for i, link in enumerate(_list(item, "chain", path)):
        link_path = f"{_join(path, 'chain')}[{i}]"
        if not isinstance(link, list) or len(link) != 2:
            raise LoadError("chain entries are [combinator, sequence] pairs", path=link_path)
        name, sequence = link
        combinator = _COMBINATORS.get(name) if isinstance(name, str) else None
        if combinator is None:
            raise LoadError(f"unknown combinator {name!r}", path=link_path)
        chain.append((combinator, _load_sequence(sequence, link_path)))

    pseudo_element = item.get("pseudo_element")
    if pseudo_element is not None:
        _expect(pseudo_element, str, _join(path, "pseudo_element"))
    return Selector(base=base, chain=tuple(chain), pseudo_element=pseudo_element)


def _load_sequence(item: Any, path: str) -> SimpleSequence:
    if isinstance(item, str):
        return CustomSequence(raw=item)
    _expect(item, Mapping, path)
    _check_keys(item, _SEQUENCE_KEYS, path)
    modifiers = tuple(
        _load_modifier(m, f"{_join(path, 'modifiers')}[{i}]")
        for i, m in enumerate(_list(item, "modifiers", path))
    )
    bases = [k for k in ("element", "universal", "raw") if k in item]
    if len(bases) > 1:
        raise LoadError(f"conflicting selector bases: {', '.join(bases)}", path=path)
    if "element" in item:
        _expect(item["element"], str, _join(path, "element"))
        return ElementSequence(element=item["element"], modifiers=modifiers)
    if "raw" in item:
        _expect(item["raw"], str, _join(path, "raw"))
        return CustomSequence(raw=item["raw"], modifiers=modifiers)
    # No base given, or {"universal": true}.
    return UniversalSequence(modifiers=modifiers)


def _load_modifier(text: Any, path: str) -> Modifier:
    _expect(text, str, path)
    kind = _MODIFIERS.get(text[:1])
    if kind is None or len(text) < 2:
        raise LoadError(
            f"modifier {text!r} must start with '.', '#' or ':'", path=path
        )
    return kind(name=text[1:])
