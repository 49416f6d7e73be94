"""Snippet model and extraction from directive comments."""

from .directives import Directive, DirectiveKind, DirectiveMarkers, classify
from .extractor import SnippetExtractor, extract_snippets
from .model import Snippet, is_docfx_snippet_id, is_valid_member_id

__all__ = [
    "Directive",
    "DirectiveKind",
    "DirectiveMarkers",
    "Snippet",
    "SnippetExtractor",
    "classify",
    "extract_snippets",
    "is_docfx_snippet_id",
    "is_valid_member_id",
]
