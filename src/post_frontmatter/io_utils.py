"""Input/output helpers."""

from __future__ import annotations

from pathlib import Path

from post_frontmatter.models.post import Post
from post_frontmatter.parser import dumps

POST_SUFFIXES = (".md", ".markdown")


def read_text(path: Path) -> str:
    # newline="" keeps CRLF bodies byte-for-byte
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)


def write_post(path: Path, post: Post) -> None:
    write_text(path, dumps(post))


def iter_post_files(paths: list[Path]) -> list[Path]:
    """
    Expands directories into the post files beneath them.
    Explicit file arguments are kept whatever their suffix.
    """
    out: list[Path] = []
    for path in paths:
        if path.is_dir():
            out.extend(sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in POST_SUFFIXES))
        elif path.exists():
            out.append(path)
        else:
            raise FileNotFoundError(path)
    return out
