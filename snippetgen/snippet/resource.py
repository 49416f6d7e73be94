from __future__ import annotations

import logging
from pathlib import Path

from ..exception_handler import LOGGER_NAME, ResourceNotFoundError
from .model import Snippet


logger = logging.getLogger(LOGGER_NAME)


def read_lines(path: Path | str) -> list[str]:
    """Read a text file as a list of lines without line terminators.

    Only ``\\r\\n``, ``\\r`` and ``\\n`` end a line; form feeds and other
    Unicode separators stay part of the line. Undecodable bytes become U+FFFD.
    """
    with open(path, "r", encoding="utf-8-sig", errors="replace", newline=None) as file_handle:
        return [line.rstrip("\n") for line in file_handle]


def inline_resource(
    source_path: Path | str,
    relative_file: str,
    snippet_id: str,
    *,
    location: str,
) -> Snippet:
    """Wrap the full content of a resource file as a sample snippet.

    ``relative_file`` is resolved against the directory of ``source_path``.
    The content is copied verbatim; directives inside it are not interpreted.
    """
    resource_path = Path(source_path).parent / relative_file
    try:
        content = read_lines(resource_path)
    except OSError as exc:
        raise ResourceNotFoundError(location, str(resource_path), str(exc)) from exc

    logger.debug("Inlined %d lines from resource %s as %s", len(content), resource_path, snippet_id)
    return Snippet(
        id=snippet_id,
        is_sample=True,
        lines=content,
        source_file=str(resource_path),
        source_start_line=1,
    )


__all__ = ["inline_resource", "read_lines"]
