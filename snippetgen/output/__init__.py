"""Output assembly for generated snippet files."""

from .assembler import render_snippet_markdown, render_snippet_text, write_lines

__all__ = ["render_snippet_markdown", "render_snippet_text", "write_lines"]
