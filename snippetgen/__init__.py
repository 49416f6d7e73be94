"""Core package for snippet documentation generation."""

from .config import GeneratorConfig
from .exception_handler import Diagnostic, DiagnosticCollector, UserError
from .metadata import MemberSignature, load_members_by_type, map_metadata_uids
from .orchestration import GenerationPipeline, GenerationResult
from .snippet import Snippet, SnippetExtractor

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "GenerationPipeline",
    "GenerationResult",
    "GeneratorConfig",
    "MemberSignature",
    "Snippet",
    "SnippetExtractor",
    "UserError",
    "load_members_by_type",
    "map_metadata_uids",
]
