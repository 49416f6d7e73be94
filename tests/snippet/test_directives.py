import pytest

from snippetgen.snippet.directives import (
    DirectiveKind,
    DirectiveMarkers,
    classify,
    content_after_marker,
)


@pytest.mark.parametrize(
    "line, kind, payload",
    [
        ("        // Snippet: Create(string,*)", DirectiveKind.START_SNIPPET, "Create(string,*)"),
        ("// Sample: basic_usage  ", DirectiveKind.START_SAMPLE, "basic_usage"),
        ("    // End snippet", DirectiveKind.END, ""),
        ("    // End sample", DirectiveKind.END, ""),
        ("// Additional: Delete(*)", DirectiveKind.ADDITIONAL_MEMBER, "Delete(*)"),
        ("// Resource: foo.xml sample_foo", DirectiveKind.RESOURCE, "foo.xml sample_foo"),
        ("var client = Client.Create();", DirectiveKind.CONTENT, ""),
        ("// Snippet:NoSpace", DirectiveKind.CONTENT, ""),
    ],
)
def test_classify_recognizes_each_directive(line, kind, payload):
    directive = classify(line)

    assert directive.kind is kind
    assert directive.payload == payload


def test_marker_may_appear_after_code():
    directive = classify("x = 1; // Snippet: DoThing")

    assert directive.kind is DirectiveKind.START_SNIPPET
    assert directive.payload == "DoThing"


def test_sample_marker_wins_over_snippet_marker():
    directive = classify("// Snippet: A // Sample: b")

    assert directive.kind is DirectiveKind.START_SAMPLE
    assert directive.payload == "b"


def test_start_is_checked_before_end():
    directive = classify("// Snippet: Foo // End snippet")

    assert directive.kind is DirectiveKind.START_SNIPPET


def test_custom_comment_prefix():
    markers = DirectiveMarkers.for_comment_prefix("#")

    assert classify("# Snippet: run", markers).kind is DirectiveKind.START_SNIPPET
    assert classify("// Snippet: run", markers).kind is DirectiveKind.CONTENT


def test_content_after_marker_requires_marker():
    with pytest.raises(ValueError):
        content_after_marker("plain line", "// Snippet: ")
