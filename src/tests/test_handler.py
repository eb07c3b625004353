import frontmatter
import pytest

from post_frontmatter.errors import FormatError, FormatErrorReason
from post_frontmatter.handler import PlusFenceHandler, split_lines


def test_split_lines_round_trips() -> None:
    text = "a\r\nb\n\nc"

    assert split_lines(text) == ["a\r\n", "b\n", "\n", "c"]
    assert "".join(split_lines(text)) == text


def test_detect() -> None:
    handler = PlusFenceHandler()

    assert handler.detect("+++\na = 1\n+++\n") is True
    assert handler.detect("\n\n+++\n") is True
    assert handler.detect("---\na: 1\n---\n") is False
    assert handler.detect(" +++\n") is False


def test_split_follows_base_handler_contract() -> None:
    handler = PlusFenceHandler()

    fm, content = handler.split('\n+++\ntitle = "x"\n+++\nbody')

    assert fm == 'title = "x"\n'
    assert content == "body"


def test_split_with_position_reports_first_line() -> None:
    fm, content, first_line = PlusFenceHandler().split_with_position("\n\n+++\na = 1\n+++\n")

    assert (fm, content, first_line) == ("a = 1\n", "", 4)


def test_load_line_numbers_are_offset() -> None:
    with pytest.raises(FormatError) as excinfo:
        PlusFenceHandler().load("a = 1\n???\n", first_line=10)

    assert excinfo.value.reason == FormatErrorReason.MALFORMED_ASSIGNMENT
    assert excinfo.value.line == 11


def test_export() -> None:
    handler = PlusFenceHandler()

    assert handler.export({"title": "x", "draft": True}) == 'title = "x"\ndraft = true'
    assert handler.export({}) == ""


def test_load_lenient_logs_source(caplog: pytest.LogCaptureFixture) -> None:
    handler = PlusFenceHandler(strict=False, source="posts/a.md")

    assert handler.load("a = 1\n???\nb = 2.5\n") == {"a": 1, "b": 2.5}
    assert "Skipping line 2 in posts/a.md" in caplog.text


def test_load_multiline_array_with_bracket_in_comment() -> None:
    metadata = PlusFenceHandler().load('tags = [ # see [1]\n  "a",\n]\ntitle = "x"\n')

    assert metadata == {"tags": ("a",), "title": "x"}


def test_lenient_unsupported_array_skips_its_continuation_lines(caplog: pytest.LogCaptureFixture) -> None:
    handler = PlusFenceHandler(strict=False)

    assert handler.load('ids = [\n  1,\n  2,\n]\ntitle = "x"\n') == {"title": "x"}
    assert "Skipping line 1" in caplog.text
    assert "Skipping line 2" not in caplog.text


def test_format_keeps_content_verbatim() -> None:
    post = frontmatter.Post("\n  body\n\n")
    post.metadata["title"] = "x"

    assert frontmatter.dumps(post, handler=PlusFenceHandler()) == '+++\ntitle = "x"\n+++\n\n  body\n\n'
