from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    indent_unit: str = "    "
    block_separator: str = "\n\n"  # between top-level blocks and rules

    @classmethod
    def with_indent(cls, width: int) -> RenderConfig:
        return cls(indent_unit=" " * width)
