"""Front matter parsing and serialization for posts."""

from __future__ import annotations

import frontmatter

from post_frontmatter.errors import FormatError
from post_frontmatter.handler import PlusFenceHandler
from post_frontmatter.models.post import Post


def parse(text: str, *, strict: bool = True, source: str | None = None) -> Post:
    """
    Split a document into its `+++` metadata block and body.
    Raises FormatError when the block is missing, unterminated, or (in strict
    mode) contains a line that is not a valid `key = value` assignment.
    """
    handler = PlusFenceHandler(strict=strict, source=source or "<inline>")
    try:
        fm, body, first_line = handler.split_with_position(text)
        metadata = handler.load(fm, first_line=first_line)
    except FormatError as exc:
        if source is None:
            raise
        raise exc.with_source(source) from None
    return Post(metadata=metadata, body=body)


def dumps(post: Post) -> str:
    # frontmatter.Post(content, **metadata) would reserve the "handler" key
    fm_post = frontmatter.Post(post.body)
    fm_post.metadata.update(post.metadata)
    return frontmatter.dumps(fm_post, handler=PlusFenceHandler())
