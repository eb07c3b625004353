"""Errors raised while reading front matter."""

from __future__ import annotations

from enum import Enum


class FormatErrorReason(str, Enum):
    MISSING_FRONT_MATTER = "missing_front_matter"
    UNTERMINATED_FRONT_MATTER = "unterminated_front_matter"
    MALFORMED_ASSIGNMENT = "malformed_assignment"
    INVALID_ENCODING = "invalid_encoding"


_DEFAULT_MESSAGES = {
    FormatErrorReason.MISSING_FRONT_MATTER: "missing front matter",
    FormatErrorReason.UNTERMINATED_FRONT_MATTER: "unterminated front matter",
    FormatErrorReason.MALFORMED_ASSIGNMENT: "malformed assignment",
    FormatErrorReason.INVALID_ENCODING: "not valid UTF-8",
}


class FormatError(ValueError):
    def __init__(
        self,
        reason: FormatErrorReason,
        message: str | None = None,
        *,
        line: int | None = None,
        source: str | None = None,
    ) -> None:
        self.reason = reason
        self.message = message or _DEFAULT_MESSAGES[reason]
        self.line = line
        self.source = source
        super().__init__(self._render())

    def _render(self) -> str:
        location = self.source or "<inline>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.message}"

    def with_source(self, source: str) -> "FormatError":
        return FormatError(self.reason, self.message, line=self.line, source=source)
