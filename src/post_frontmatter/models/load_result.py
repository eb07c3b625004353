"""Outcome of loading one post file in a batch."""

from __future__ import annotations

from dataclasses import dataclass

from post_frontmatter.errors import FormatError
from post_frontmatter.models.post import Post


@dataclass(frozen=True)
class LoadResult:
    source_path: str
    post: Post | None = None
    error: FormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
