"""Loading posts from files or inline text."""

from __future__ import annotations

import logging
from pathlib import Path

from post_frontmatter.errors import FormatError, FormatErrorReason
from post_frontmatter.io_utils import read_text
from post_frontmatter.models.parser_options import ParserOptions
from post_frontmatter.models.post import Post
from post_frontmatter.parser import parse


logger = logging.getLogger(__name__)


def read_post_file(path: Path) -> str:
    try:
        return read_text(path)
    except UnicodeDecodeError as exc:
        raise FormatError(
            FormatErrorReason.INVALID_ENCODING,
            f"not valid UTF-8 ({exc.reason})",
            source=str(path),
        ) from None


def read_post_source(post: Path | str) -> tuple[str, str]:
    """Returns (document text, source label)."""
    if isinstance(post, Path):
        return read_post_file(post), str(post)
    if "\n" not in post:
        post_path = Path(post)
        try:
            is_file = post_path.is_file()
        except OSError:
            is_file = False
        if is_file:
            return read_post_file(post_path), str(post_path)
    return post, "<inline>"


def load_post(post: Path | str, options: ParserOptions | None = None) -> Post:
    opts = options or ParserOptions()
    text, source_label = read_post_source(post)
    logger.debug("Parsing %s (strict=%s)", source_label, opts.strict)
    return parse(text, strict=opts.strict, source=source_label)
