"""python-frontmatter handler for `+++` fenced TOML key = value blocks."""

from __future__ import annotations

import logging
import re
import tomllib

import frontmatter
from frontmatter.default_handlers import BaseHandler

from post_frontmatter.errors import FormatError, FormatErrorReason
from post_frontmatter.models.post import MetadataValue
from post_frontmatter.value_parsing import UnsupportedValueError, decode_assignment, format_value


logger = logging.getLogger(__name__)

KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")
ASSIGNMENT_RE = re.compile(r"^\s*([A-Za-z0-9_-]+)\s*=\s*(.*?)\s*$")
BOM = "\ufeff"


def split_lines(text: str) -> list[str]:
    """Split on \\n only, keeping line endings so the pieces join back to text."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


class PlusFenceHandler(BaseHandler):
    """
    Same fence as python-frontmatter's TOMLHandler, but values are decoded one
    assignment at a time so that a bad line can be reported by number or skipped,
    and the body is kept exactly as written.
    """

    FM_BOUNDARY = re.compile(r"^\+{3}\s*$")
    START_DELIMITER = "+++"
    END_DELIMITER = "+++"

    def __init__(self, *, strict: bool = True, source: str = "<inline>") -> None:
        super().__init__()
        self.strict = strict
        self.source = source

    def is_fence(self, line: str) -> bool:
        return self.FM_BOUNDARY.match(line) is not None

    def opening_index(self, lines: list[str]) -> int | None:
        for index, line in enumerate(lines):
            if not line.strip():
                continue
            return index if self.is_fence(line) else None
        return None

    def detect(self, text: str) -> bool:
        return self.opening_index(split_lines(text.removeprefix(BOM))) is not None

    def split(self, text: str) -> tuple[str, str]:
        fm, content, _first_line = self.split_with_position(text)
        return fm, content

    def split_with_position(self, text: str) -> tuple[str, str, int]:
        """
        Returns (front matter, body, line number of the first front matter line).
        The body is everything after the closing fence line, untouched.
        """
        lines = split_lines(text.removeprefix(BOM))
        opening = self.opening_index(lines)
        if opening is None:
            raise FormatError(FormatErrorReason.MISSING_FRONT_MATTER)
        for index in range(opening + 1, len(lines)):
            if self.is_fence(lines[index]):
                fm = "".join(lines[opening + 1 : index])
                content = "".join(lines[index + 1 :])
                return fm, content, opening + 2
        raise FormatError(FormatErrorReason.UNTERMINATED_FRONT_MATTER, line=opening + 1)

    def load(self, fm: str, first_line: int = 1) -> dict[str, MetadataValue]:
        metadata: dict[str, MetadataValue] = {}
        lines = [line.rstrip("\r\n") for line in split_lines(fm)]
        index = 0
        while index < len(lines):
            line = lines[index]
            line_no = first_line + index
            index += 1
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            match = ASSIGNMENT_RE.match(line)
            if match is None:
                self._reject("expected key = value", line_no)
                continue
            key, raw = match.group(1), match.group(2)

            # A multi-line array keeps absorbing lines until tomllib accepts it.
            statement = line
            consumed = 0
            try:
                while True:
                    try:
                        value = decode_assignment(statement, key)
                        break
                    except tomllib.TOMLDecodeError:
                        if not raw.startswith("[") or index + consumed >= len(lines):
                            raise
                        statement += "\n" + lines[index + consumed]
                        consumed += 1
            except tomllib.TOMLDecodeError as exc:
                self._reject(f"bad value for key {key!r}: {exc}", line_no)
                continue
            except UnsupportedValueError as exc:
                index += consumed
                self._reject(f"bad value for key {key!r}: {exc}", line_no)
                continue

            index += consumed
            if key in metadata:
                self._reject(f"duplicate key {key!r}", line_no)
                continue
            metadata[key] = value
        return metadata

    def export(self, metadata: dict[str, object], **kwargs: object) -> str:
        lines: list[str] = []
        for key, value in metadata.items():
            if not KEY_RE.match(key):
                raise ValueError(f"Key {key!r} cannot be written as a bare key.")
            lines.append(f"{key} = {format_value(value)}")  # type: ignore[arg-type]
        return "\n".join(lines)

    def format(self, post: frontmatter.Post, **kwargs: object) -> str:
        """Unlike BaseHandler.format, the content is appended without stripping."""
        block = self.export(post.metadata, **kwargs)
        lines = [self.START_DELIMITER, block, self.END_DELIMITER] if block else [self.START_DELIMITER, self.END_DELIMITER]
        return "\n".join(lines) + "\n" + post.content

    def _reject(self, message: str, line_no: int) -> None:
        if self.strict:
            raise FormatError(FormatErrorReason.MALFORMED_ASSIGNMENT, f"malformed assignment: {message}", line=line_no)
        logger.warning("Skipping line %d in %s: %s", line_no, self.source, message)
