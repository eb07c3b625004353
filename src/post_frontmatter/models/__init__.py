"""Model types for parsed posts and loader configuration."""

from post_frontmatter.models.load_result import LoadResult
from post_frontmatter.models.parser_options import ParserOptions
from post_frontmatter.models.post import MetadataValue
from post_frontmatter.models.post import Post
from post_frontmatter.models.post_metadata import PostMetadata

__all__ = [
    "LoadResult",
    "MetadataValue",
    "ParserOptions",
    "Post",
    "PostMetadata",
]
