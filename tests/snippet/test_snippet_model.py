import pytest

from snippetgen.snippet import Snippet, is_docfx_snippet_id, is_valid_member_id


def _make_snippet(lines, snippet_id="Create"):
    return Snippet(id=snippet_id, lines=list(lines), source_file="ClientSnippets.cs", source_start_line=7)


def test_trim_uses_smallest_indentation():
    snippet = _make_snippet(["        a();", "            b();", "        c();"])

    snippet.trim_leading_spaces()

    assert snippet.lines == ["a();", "    b();", "c();"]


def test_trim_ignores_blank_lines_when_measuring():
    snippet = _make_snippet(["    a();", "", "    ", "      b();"])

    snippet.trim_leading_spaces()

    assert snippet.lines == ["a();", "", "", "  b();"]


def test_trim_is_idempotent():
    snippet = _make_snippet(["    a();", "", "        b();"])

    snippet.trim_leading_spaces()
    once = list(snippet.lines)
    snippet.trim_leading_spaces()

    assert snippet.lines == once


def test_trim_on_empty_snippet():
    snippet = _make_snippet([])

    snippet.trim_leading_spaces()

    assert snippet.lines == []


def test_source_location_and_docfx_markers():
    snippet = _make_snippet([], snippet_id="basic_usage")

    assert snippet.source_location == "ClientSnippets.cs:7"
    assert snippet.docfx_start == "// <basic_usage>"
    assert snippet.docfx_end == "// </basic_usage>"


@pytest.mark.parametrize(
    "snippet_id, expected",
    [
        ("basic_usage", True),
        ("Google.Cloud.Overview", True),
        ("Create(string)", False),
        ("with space", False),
        ("", False),
        ("trailing\n", False),
    ],
)
def test_docfx_snippet_id(snippet_id, expected):
    assert is_docfx_snippet_id(snippet_id) is expected


@pytest.mark.parametrize(
    "member_id, expected",
    [
        ("Create", True),
        ("Create()", True),
        ("Create(string,*)", True),
        ("Create(string", False),
        ("Create(string) extra", False),
        ("anything goes", True),
    ],
)
def test_valid_member_id(member_id, expected):
    assert is_valid_member_id(member_id) is expected
