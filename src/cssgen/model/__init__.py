"""cssgen model layer -- public type re-exports."""

from cssgen.model.media import (
    AndQuery,
    CustomQuery,
    FeatureQuery,
    MediaQuery,
    MediaType,
    NotQuery,
    OrQuery,
    TypeQuery,
)
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
    FontFaceRule,
    Import,
    KeyframesRule,
    MediaRule,
    Namespace,
    Property,
    StyleBlock,
    StyleBlockDeclaration,
    Stylesheet,
    SupportsRule,
)

__all__ = [
    # media
    "MediaType",
    "MediaQuery",
    "FeatureQuery",
    "TypeQuery",
    "AndQuery",
    "OrQuery",
    "NotQuery",
    "CustomQuery",
    # selector
    "SelectorCombinator",
    "ClassName",
    "IdName",
    "PseudoClass",
    "Modifier",
    "ElementSequence",
    "UniversalSequence",
    "CustomSequence",
    "SimpleSequence",
    "Selector",
    # stylesheet
    "Property",
    "StyleBlock",
    "StyleBlockDeclaration",
    "MediaRule",
    "FontFaceRule",
    "KeyframesRule",
    "SupportsRule",
    "Declaration",
    "Import",
    "Namespace",
    "Stylesheet",
]
