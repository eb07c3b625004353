"""Public package exports."""

from post_frontmatter.errors import FormatError
from post_frontmatter.errors import FormatErrorReason
from post_frontmatter.models import LoadResult
from post_frontmatter.models import ParserOptions
from post_frontmatter.models import Post
from post_frontmatter.models import PostMetadata
from post_frontmatter.parser import dumps
from post_frontmatter.parser import parse
from post_frontmatter.post_loader import load_post
from post_frontmatter.post_registry import PostRegistry

__all__ = [
    "FormatError",
    "FormatErrorReason",
    "LoadResult",
    "ParserOptions",
    "Post",
    "PostMetadata",
    "PostRegistry",
    "dumps",
    "load_post",
    "parse",
]
