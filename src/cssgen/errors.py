"""Error hierarchy for cssgen."""
from __future__ import annotations

from typing import Any


class CSSGenError(Exception):
    """Base error for all cssgen errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnsupportedDeclarationError(CSSGenError):
    """A declaration variant with no rendering rule was reached.

    Rendering aborts as a whole; no partial stylesheet is returned.
    """

    def __init__(self, declaration: Any) -> None:
        super().__init__(
            f"unsupported declaration variant: {type(declaration).__name__}"
        )
        self.declaration = declaration


class MediaQueryParseError(CSSGenError):
    """Raised when media query text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class LoadError(CSSGenError):
    """A stylesheet document does not have the expected structure."""

    def __init__(
        self, message: str, *, path: str = "", cause: Exception | None = None
    ) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message, cause=cause)
        self.path = path
