from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field


DOCFX_SNIPPET_PATTERN = re.compile(r"[\w.]+")


def is_docfx_snippet_id(snippet_id: str) -> bool:
    """Return True if ``snippet_id`` can be used as a docfx code region name."""
    return DOCFX_SNIPPET_PATTERN.fullmatch(snippet_id) is not None


def is_valid_member_id(member_id: str) -> bool:
    """Member references only need balanced parameter lists at this stage.

    Whether the reference actually names a member is decided later, against
    the metadata catalog.
    """
    return not ("(" in member_id and not member_id.endswith(")"))


class Snippet(BaseModel):
    """A block of example text extracted from a snippets source file.

    ``lines`` and ``member_references`` are only changed by the extractor
    while the snippet is open. Once it has been returned, only
    ``resolved_member_uids`` (set by member matching) and the ``rendered_*``
    positions (set by the assembler) are written.
    """

    id: str
    is_sample: bool = False
    member_references: list[str] = Field(default_factory=list)
    lines: list[str] = Field(default_factory=list)
    source_file: str
    source_start_line: int
    resolved_member_uids: list[str] = Field(default_factory=list)
    rendered_start: int | None = None
    rendered_end: int | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def source_location(self) -> str:
        return f"{self.source_file}:{self.source_start_line}"

    @property
    def docfx_start(self) -> str:
        return f"// <{self.id}>"

    @property
    def docfx_end(self) -> str:
        return f"// </{self.id}>"

    def trim_leading_spaces(self) -> None:
        """De-indent all lines by the smallest indentation of the non-blank ones.

        Whitespace-only lines are emptied, so trimming twice is a no-op.
        """
        indents = [
            len(line) - len(line.lstrip(" "))
            for line in self.lines
            if line.strip()
        ]
        spaces = min(indents, default=0)
        self.lines = [line[spaces:] if line.strip() else "" for line in self.lines]


__all__ = [
    "DOCFX_SNIPPET_PATTERN",
    "Snippet",
    "is_docfx_snippet_id",
    "is_valid_member_id",
]
