"""Recognition of snippet directive comments.

Directive format, inside any source line::

    // Snippet: Create(string,*)     start a snippet linked to a member
    // Sample: basic_usage          start a sample (docfx id, not matched)
    // Additional: Delete           link one more member (before any content)
    // End snippet                  end of snippet (or "End sample")
    // Resource: foo.xml sample_foo inline a whole file as a sample

Markers may appear anywhere in a line; the payload is whatever follows the
marker, stripped of surrounding whitespace.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DirectiveKind(Enum):
    START_SNIPPET = "start_snippet"
    START_SAMPLE = "start_sample"
    END = "end"
    ADDITIONAL_MEMBER = "additional_member"
    RESOURCE = "resource"
    CONTENT = "content"

    @property
    def is_start(self) -> bool:
        return self in (DirectiveKind.START_SNIPPET, DirectiveKind.START_SAMPLE)


@dataclass(frozen=True, slots=True)
class Directive:
    kind: DirectiveKind
    payload: str = ""


@dataclass(frozen=True, slots=True)
class DirectiveMarkers:
    """The literal marker strings for one comment syntax."""

    start_snippet: str
    start_sample: str
    end_snippet: str
    end_sample: str
    additional_member: str
    resource: str

    @classmethod
    def for_comment_prefix(cls, prefix: str = "//") -> "DirectiveMarkers":
        return cls(
            start_snippet=f"{prefix} Snippet: ",
            start_sample=f"{prefix} Sample: ",
            end_snippet=f"{prefix} End snippet",
            end_sample=f"{prefix} End sample",
            additional_member=f"{prefix} Additional: ",
            resource=f"{prefix} Resource: ",
        )


DEFAULT_MARKERS = DirectiveMarkers.for_comment_prefix("//")


def content_after_marker(line: str, marker: str) -> str:
    index = line.find(marker)
    if index == -1:
        raise ValueError(f"'{line}' doesn't contain '{marker}'")
    return line[index + len(marker):].strip()


def classify(line: str, markers: DirectiveMarkers = DEFAULT_MARKERS) -> Directive:
    """Classify a single line.

    Start markers are checked first (a sample marker wins over a snippet
    marker on the same line), then end, additional-member and resource.
    """
    if markers.start_sample in line:
        return Directive(DirectiveKind.START_SAMPLE, content_after_marker(line, markers.start_sample))
    if markers.start_snippet in line:
        return Directive(DirectiveKind.START_SNIPPET, content_after_marker(line, markers.start_snippet))
    if markers.end_sample in line or markers.end_snippet in line:
        return Directive(DirectiveKind.END)
    if markers.additional_member in line:
        return Directive(
            DirectiveKind.ADDITIONAL_MEMBER,
            content_after_marker(line, markers.additional_member),
        )
    if markers.resource in line:
        return Directive(DirectiveKind.RESOURCE, content_after_marker(line, markers.resource))
    return Directive(DirectiveKind.CONTENT)


__all__ = [
    "DEFAULT_MARKERS",
    "Directive",
    "DirectiveKind",
    "DirectiveMarkers",
    "classify",
    "content_after_marker",
]
