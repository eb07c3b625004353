"""CLI entrypoint."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
from pathlib import Path
from typing import Any

import yaml

from post_frontmatter.errors import FormatError
from post_frontmatter.io_utils import iter_post_files, write_text
from post_frontmatter.models.parser_options import ParserOptions
from post_frontmatter.parser import dumps, parse
from post_frontmatter.post_loader import load_post, read_post_file
from post_frontmatter.post_registry import PostRegistry


logger = logging.getLogger(__name__)


def describe_error(path: Path, exc: FormatError) -> str:
    location = str(path) if exc.line is None else f"{path}:{exc.line}"
    return f"error {location}: {exc.reason.value}: {exc.message}"


def metadata_for_yaml(metadata: dict[str, Any]) -> dict[str, Any]:
    return {key: list(value) if isinstance(value, tuple) else value for key, value in metadata.items()}


def cmd_check(args: argparse.Namespace, options: ParserOptions) -> int:
    failed = False
    for path in iter_post_files([Path(p) for p in args.paths]):
        try:
            load_post(path, options)
        except FormatError as exc:
            print(describe_error(path, exc))
            failed = True
            if args.fail_fast:
                break
            continue
        print(f"ok {path}")
    return 1 if failed else 0


def cmd_show(args: argparse.Namespace, options: ParserOptions) -> int:
    path = Path(args.file)
    try:
        post = load_post(path, options)
    except FormatError as exc:
        print(describe_error(path, exc))
        return 1
    print(
        yaml.safe_dump(
            metadata_for_yaml(dict(post.metadata)),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        ).rstrip()
    )
    if args.body:
        print("---")
        print(post.body, end="")
    return 0


def format_date(value: dt.date | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


def cmd_list(args: argparse.Namespace, options: ParserOptions) -> int:
    registry = PostRegistry([Path(p) for p in args.roots], options)
    for post_id, meta in registry.summaries(include_drafts=args.include_drafts):
        print(f"{format_date(meta.date)}  {post_id}  {meta.title}")
    return 0


def cmd_normalize(args: argparse.Namespace, options: ParserOptions) -> int:
    # Parsed strictly so malformed lines are reported rather than dropped from the rewrite.
    if not options.strict:
        logger.warning("normalize ignores --lenient; files with malformed lines are reported, not rewritten")
    failed = False
    changed = False
    for path in iter_post_files([Path(p) for p in args.paths]):
        try:
            text = read_post_file(path)
            post = parse(text, strict=True, source=str(path))
        except FormatError as exc:
            print(describe_error(path, exc))
            failed = True
            continue
        canonical = dumps(post)
        if canonical == text:
            continue
        changed = True
        if args.check:
            print(f"would rewrite {path}")
        else:
            write_text(path, canonical)
            print(f"rewrote {path}")
    if failed or (args.check and changed):
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="post-frontmatter")
    parser.add_argument("--lenient", action="store_true", help="Skip malformed front matter lines instead of failing")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate the front matter of posts")
    check.add_argument("paths", nargs="+", help="Post files or directories")
    check.add_argument("--fail-fast", action="store_true", help="Stop at the first broken post")
    check.set_defaults(handler=cmd_check)

    show = sub.add_parser("show", help="Print the metadata of one post as YAML")
    show.add_argument("file", type=str)
    show.add_argument("--body", action="store_true", help="Also print the body")
    show.set_defaults(handler=cmd_show)

    list_cmd = sub.add_parser("list", help="List posts newest first")
    list_cmd.add_argument("roots", nargs="+", help="Content directories")
    list_cmd.add_argument("--include-drafts", action="store_true")
    list_cmd.set_defaults(handler=cmd_list)

    normalize = sub.add_parser("normalize", help="Rewrite posts in canonical form (always parsed strictly)")
    normalize.add_argument("paths", nargs="+", help="Post files or directories")
    normalize.add_argument("--check", action="store_true", help="Only report files that would change")
    normalize.set_defaults(handler=cmd_normalize)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ParserOptions(strict=not args.lenient)
    try:
        return args.handler(args, options)
    except FileNotFoundError as exc:
        logger.error("No such file or directory: %s", exc)
        return 2
