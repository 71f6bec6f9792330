"""Selector rendering."""

from __future__ import annotations

from cssgen.model.selector import (
    ClassName,
    CustomSequence,
    ElementSequence,
    IdName,
    Modifier,
    PseudoClass,
    Selector,
    SimpleSequence,
    UniversalSequence,
)

__all__ = ["render_selector", "render_sequence", "render_modifier"]


def render_modifier(modifier: Modifier) -> str:
    if isinstance(modifier, ClassName):
        return f".{modifier.name}"
    if isinstance(modifier, IdName):
        return f"#{modifier.name}"
    if isinstance(modifier, PseudoClass):
        return f":{modifier.name}"
    raise TypeError(f"Not a selector modifier: {modifier!r}")


def _modifiers(modifiers: tuple[Modifier, ...]) -> str:
    return "".join(render_modifier(m) for m in modifiers)


def render_sequence(sequence: SimpleSequence) -> str:
    """Render a simple selector sequence.

    A universal sequence with modifiers drops the ``*``: ``*.foo`` is
    written ``.foo``.
    """
    if isinstance(sequence, ElementSequence):
        return sequence.element + _modifiers(sequence.modifiers)
    if isinstance(sequence, UniversalSequence):
        if not sequence.modifiers:
            return "*"
        return _modifiers(sequence.modifiers)
    if isinstance(sequence, CustomSequence):
        return sequence.raw + _modifiers(sequence.modifiers)
    raise TypeError(f"Not a simple selector sequence: {sequence!r}")


def render_selector(selector: Selector) -> str:
    """Render a selector chain, e.g. ``ul > li a::before``.

    Empty segments (the descendant combinator's symbol included) are
    dropped before joining with single spaces.
    """
    segments = [render_sequence(selector.base)]
    for combinator, sequence in selector.chain:
        segments.append(combinator.value)
        segments.append(render_sequence(sequence))
    text = " ".join(s for s in segments if s)
    if selector.pseudo_element:
        text += f"::{selector.pseudo_element}"
    return text
