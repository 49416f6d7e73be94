"""Line-oriented state machine turning directive comments into snippets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from ..exception_handler import LOGGER_NAME, DiagnosticCollector
from .directives import DEFAULT_MARKERS, Directive, DirectiveKind, DirectiveMarkers, classify
from .model import Snippet, is_docfx_snippet_id, is_valid_member_id
from .resource import inline_resource


logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True, slots=True)
class Idle:
    """No snippet is being collected."""


@dataclass(frozen=True, slots=True)
class Open:
    """A snippet has started and is collecting lines."""

    snippet: Snippet


ExtractorState = Union[Idle, Open]

IDLE = Idle()


class SnippetExtractor:
    """Extracts snippets from the lines of one source file.

    Problems are recorded in the shared ``DiagnosticCollector`` and parsing
    carries on, so a single run reports every broken directive in the tree.
    Only an unreadable resource file stops extraction (it raises
    ``ResourceNotFoundError``).
    """

    def __init__(
        self,
        diagnostics: DiagnosticCollector,
        *,
        markers: DirectiveMarkers = DEFAULT_MARKERS,
    ) -> None:
        self.diagnostics = diagnostics
        self.markers = markers

    def extract(self, source_path: Path | str, lines: Iterable[str]) -> List[Snippet]:
        """Return the completed snippets of ``lines`` in source order.

        ``source_path`` is used to resolve resource directives; only its file
        name appears in diagnostics.
        """
        source_file = Path(source_path).name
        state: ExtractorState = IDLE
        snippets: List[Snippet] = []

        for line_number, line in enumerate(lines, start=1):
            location = f"{source_file}:{line_number}"
            directive = classify(line, self.markers)

            if directive.kind.is_start:
                state = self._on_start(state, directive, source_file, line_number, location)
            elif directive.kind is DirectiveKind.END:
                if isinstance(state, Open):
                    state.snippet.trim_leading_spaces()
                    snippets.append(state.snippet)
                    state = IDLE
                else:
                    self.diagnostics.add(location, "Snippet/sample end without start")
            elif directive.kind is DirectiveKind.ADDITIONAL_MEMBER:
                self._on_additional_member(state, directive.payload, location)
            elif directive.kind is DirectiveKind.RESOURCE:
                if isinstance(state, Open):
                    self.diagnostics.add(location, "Resource specified within snippet")
                else:
                    resource_snippet = self._on_resource(source_path, directive.payload, location)
                    if resource_snippet is not None:
                        snippets.append(resource_snippet)
            elif isinstance(state, Open):
                state.snippet.lines.append(line)

        if isinstance(state, Open):
            self.diagnostics.add(
                state.snippet.source_location,
                f"Snippet '{state.snippet.id}' didn't end",
            )

        logger.debug("Extracted %d snippets from %s", len(snippets), source_file)
        return snippets

    def _on_start(
        self,
        state: ExtractorState,
        directive: Directive,
        source_file: str,
        line_number: int,
        location: str,
    ) -> ExtractorState:
        if isinstance(state, Open):
            self.diagnostics.add(location, "Invalid start of nested sample/snippet")
            return state

        sample = directive.kind is DirectiveKind.START_SAMPLE
        snippet_id = directive.payload
        if sample and not is_docfx_snippet_id(snippet_id):
            self.diagnostics.add(location, f"Sample ID '{snippet_id}' is not a valid docfx snippet ID")
            return state
        if not sample and not is_valid_member_id(snippet_id):
            # The matching end directive will be reported as well.
            self.diagnostics.add(location, f"Invalid snippet ID '{snippet_id}'")
            return state

        snippet = Snippet(
            id=snippet_id,
            is_sample=sample,
            member_references=[] if sample else [snippet_id],
            source_file=source_file,
            source_start_line=line_number,
        )
        return Open(snippet)

    def _on_additional_member(self, state: ExtractorState, member_id: str, location: str) -> None:
        if not isinstance(state, Open):
            self.diagnostics.add(location, "Additional member ID not in snippet")
        elif state.snippet.lines:
            self.diagnostics.add(location, "Additional member ID part way through snippet")
        elif not is_valid_member_id(member_id):
            self.diagnostics.add(location, f"Invalid additional member ID '{member_id}'")
        else:
            state.snippet.member_references.append(member_id)

    def _on_resource(self, source_path: Path | str, payload: str, location: str) -> Snippet | None:
        file_and_id = payload.split(" ")
        if len(file_and_id) != 2:
            self.diagnostics.add(location, "Resource must specify file and snippet ID")
            return None

        relative_file, snippet_id = file_and_id
        if not is_docfx_snippet_id(snippet_id):
            self.diagnostics.add(location, f"Resource snippet ID {snippet_id} is not a valid docfx ID")
            return None

        return inline_resource(source_path, relative_file, snippet_id, location=location)


def extract_snippets(
    source_path: Path | str,
    lines: Iterable[str],
    diagnostics: DiagnosticCollector,
    *,
    markers: DirectiveMarkers = DEFAULT_MARKERS,
) -> List[Snippet]:
    """Convenience helper running a one-off ``SnippetExtractor``."""
    return SnippetExtractor(diagnostics, markers=markers).extract(source_path, lines)


__all__ = ["ExtractorState", "Idle", "Open", "SnippetExtractor", "extract_snippets"]
