"""Rendering of snippet text files and docfx overwrite markdown."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from ..snippet.model import Snippet, is_docfx_snippet_id


def render_snippet_text(snippets: Iterable[Snippet]) -> List[str]:
    """Lay out all snippets of a type, recording where each one lands.

    Snippets whose id is also a valid docfx name are wrapped in region
    markers so conceptual docs can refer to them by name.
    ``rendered_start`` and ``rendered_end`` are 1-based line numbers.
    """
    output: List[str] = []
    for snippet in snippets:
        docfx_region = is_docfx_snippet_id(snippet.id)
        output.append(f"----- Snippet {snippet.id} -----")
        if docfx_region:
            output.append(snippet.docfx_start)
        snippet.rendered_start = len(output) + 1
        output.extend(snippet.lines)
        snippet.rendered_end = len(output)
        if docfx_region:
            output.append(snippet.docfx_end)
        output.append("")
    return output


def render_snippet_markdown(
    snippet_file: str,
    snippets: Sequence[Snippet],
    *,
    language: str = "cs",
) -> List[str] | None:
    """Render overwrite stubs linking each resolved member to its snippet lines.

    Returns None when no snippet resolved to a member, in which case no
    markdown file should be written.
    """
    if not any(snippet.resolved_member_uids for snippet in snippets):
        return None

    output: List[str] = []
    for snippet in snippets:
        for uid in snippet.resolved_member_uids:
            output.extend([
                "---",
                f"uid: {uid}",
                "---",
                "",
                "Example:",
                f"[!code-{language}[]({snippet_file}#L{snippet.rendered_start}-L{snippet.rendered_end})]",
                "",
            ])
    return output


def write_lines(path: Path | str, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as file_handle:
        for line in lines:
            file_handle.write(line)
            file_handle.write("\n")


__all__ = ["render_snippet_markdown", "render_snippet_text", "write_lines"]
