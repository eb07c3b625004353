from datetime import date
from pathlib import Path

import pytest

from post_frontmatter.errors import FormatError, FormatErrorReason
from post_frontmatter.models import ParserOptions
from post_frontmatter.post_registry import PostRegistry


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    _write(root / "first.md", '+++\ntitle = "First"\ndate = 2020-01-01\n+++\nOne\n')
    _write(root / "second.md", '+++\ntitle = "Second"\ndate = 2021-05-05\ntags = ["rust"]\n+++\nTwo\n')
    _write(root / "broken.md", "No front matter here.\n")
    _write(root / "nested" / "third.markdown", '+++\ntitle = "Third"\ndate = 2022-02-02\ndraft = true\n+++\n')
    _write(root / "notes.txt", "ignored")
    return root


def test_list_posts_indexes_markdown_files(content_dir: Path) -> None:
    registry = PostRegistry([content_dir])

    assert registry.list_posts() == ["broken", "first", "second", "third"]


def test_get_caches_and_reports_missing(content_dir: Path) -> None:
    registry = PostRegistry([content_dir])

    post = registry.get("second")
    assert post.metadata["tags"] == ("rust",)
    assert registry.get("second") is post

    with pytest.raises(FileNotFoundError):
        registry.get("nope")


def test_first_root_wins_for_duplicate_ids(tmp_path: Path) -> None:
    _write(tmp_path / "a" / "post.md", '+++\ntitle = "from a"\n+++\n')
    _write(tmp_path / "b" / "post.md", '+++\ntitle = "from b"\n+++\n')
    registry = PostRegistry([tmp_path / "a", tmp_path / "b", tmp_path / "missing"])

    assert registry.get("post").metadata["title"] == "from a"


def test_load_all_skips_broken_posts(content_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
    registry = PostRegistry([content_dir])

    results = registry.load_all()

    assert [Path(r.source_path).stem for r in results] == ["broken", "first", "second", "third"]
    broken = results[0]
    assert not broken.ok
    assert broken.post is None
    assert broken.error is not None
    assert broken.error.reason == FormatErrorReason.MISSING_FRONT_MATTER
    assert all(r.ok for r in results[1:])
    assert "Skipping post broken" in caplog.text


def test_load_all_abort_raises(content_dir: Path) -> None:
    registry = PostRegistry([content_dir])

    with pytest.raises(FormatError):
        registry.load_all(on_error="abort")


def test_summaries_newest_first(content_dir: Path) -> None:
    registry = PostRegistry([content_dir])

    summaries = registry.summaries()
    assert [post_id for post_id, _meta in summaries] == ["second", "first"]
    assert summaries[0][1].title == "Second"
    assert summaries[0][1].date == date(2021, 5, 5)
    assert summaries[0][1].tags == ["rust"]

    with_drafts = registry.summaries(include_drafts=True)
    assert [post_id for post_id, _meta in with_drafts] == ["third", "second", "first"]


def test_lenient_registry_options(tmp_path: Path) -> None:
    _write(tmp_path / "post.md", '+++\ntitle = "ok"\ntitle: yaml style\n+++\n')

    with pytest.raises(FormatError):
        PostRegistry([tmp_path]).get("post")
    assert PostRegistry([tmp_path], ParserOptions(strict=False)).get("post").metadata["title"] == "ok"


def test_load_all_skips_invalid_utf8(tmp_path: Path) -> None:
    _write(tmp_path / "good.md", '+++\ntitle = "ok"\n+++\n')
    (tmp_path / "latin1.md").write_bytes(b'+++\ntitle = "\xff"\n+++\n')
    registry = PostRegistry([tmp_path])

    results = registry.load_all()

    assert [r.ok for r in results] == [True, False]
    assert results[1].error is not None
    assert results[1].error.reason == FormatErrorReason.INVALID_ENCODING
    assert [post_id for post_id, _meta in registry.summaries()] == ["good"]
