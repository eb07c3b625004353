"""Post registry over one or more content roots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from post_frontmatter.errors import FormatError
from post_frontmatter.io_utils import iter_post_files
from post_frontmatter.models.load_result import LoadResult
from post_frontmatter.models.parser_options import ParserOptions
from post_frontmatter.models.post import Post
from post_frontmatter.models.post_metadata import PostMetadata
from post_frontmatter.post_loader import load_post


logger = logging.getLogger(__name__)


class PostRegistry:
    def __init__(self, content_roots: list[Path], options: ParserOptions | None = None):
        self.content_roots = content_roots
        self.options = options or ParserOptions()
        self._cache: dict[str, Post] = {}
        self._index: dict[str, Path] | None = None

    def _build_index(self) -> dict[str, Path]:
        index: dict[str, Path] = {}
        for root in self.content_roots:
            if not root.exists():
                continue
            for path in iter_post_files([root]):
                post_id = path.stem
                if post_id in index:
                    logger.debug("Ignoring %s; post id %r already maps to %s", path, post_id, index[post_id])
                    continue
                index[post_id] = path
        return index

    def _get_index(self) -> dict[str, Path]:
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def list_posts(self) -> list[str]:
        index = self._get_index()
        return sorted(index.keys())

    def path_for(self, post_id: str) -> Path:
        path = self._get_index().get(post_id)
        if path is None:
            raise FileNotFoundError(f"Post not found: {post_id} (searched: {self.content_roots})")
        return path

    def get(self, post_id: str) -> Post:
        if post_id in self._cache:
            return self._cache[post_id]
        loaded = load_post(self.path_for(post_id), self.options)
        self._cache[post_id] = loaded
        return loaded

    def load_all(self, on_error: Literal["skip", "abort"] = "skip") -> list[LoadResult]:
        """
        Parse every indexed post.
        With on_error="skip" broken posts are reported in the results and logged;
        with on_error="abort" the first FormatError propagates.
        """
        results: list[LoadResult] = []
        for post_id in self.list_posts():
            path = self.path_for(post_id)
            try:
                post = self.get(post_id)
            except FormatError as exc:
                if on_error == "abort":
                    raise
                logger.warning("Skipping post %s: %s", post_id, exc)
                results.append(LoadResult(source_path=str(path), error=exc))
                continue
            results.append(LoadResult(source_path=str(path), post=post))
        return results

    def summaries(self, include_drafts: bool = False) -> list[tuple[str, PostMetadata]]:
        """Typed metadata for every loadable post, newest first."""
        out: list[tuple[str, PostMetadata]] = []
        for result in self.load_all(on_error="skip"):
            if result.post is None:
                continue
            post_id = Path(result.source_path).stem
            try:
                meta = PostMetadata.model_validate(dict(result.post.metadata))
            except ValidationError as exc:
                logger.warning("Skipping post %s: unexpected metadata: %s", post_id, exc)
                continue
            if meta.draft and not include_drafts:
                continue
            out.append((post_id, meta))
        out.sort(key=lambda item: (item[1].sort_key(), item[0]), reverse=True)
        return out
