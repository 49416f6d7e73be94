import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from tqdm import tqdm

from ..config import GeneratorConfig
from ..exception_handler import LOGGER_NAME, Diagnostic, DiagnosticCollector, UserError
from ..metadata.catalog import load_members_by_type
from ..metadata.matcher import map_metadata_uids
from ..metadata.model import MemberSignature
from ..output.assembler import render_snippet_markdown, render_snippet_text, write_lines
from ..snippet import DirectiveMarkers, Snippet, SnippetExtractor
from ..utils.source_loader import SourceLoader, SourceUnit


logger = logging.getLogger(LOGGER_NAME)


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    snippets_by_type: Dict[str, List[Snippet]] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    type_count: int = 0
    member_count: int = 0
    duration: float = 0.0

    @property
    def snippet_count(self) -> int:
        return sum(len(snippets) for snippets in self.snippets_by_type.values())

    @property
    def succeeded(self) -> bool:
        return not self.diagnostics


def determine_root_directory(start: Path, markers: Sequence[str]) -> Optional[Path]:
    """Walk up from ``start`` to the first directory containing every marker file."""
    directory = start.resolve()
    for candidate in (directory, *directory.parents):
        if all((candidate / marker).is_file() for marker in markers):
            return candidate
    return None


def prepare_output_directory(output_dir: Path) -> None:
    """Create the output directory, or delete the files a previous run left in it."""
    if not output_dir.is_dir():
        output_dir.mkdir(parents=True)
        return
    for path in output_dir.iterdir():
        if path.is_file():
            path.unlink()


def load_all_snippets(
    units: Sequence[SourceUnit],
    diagnostics: DiagnosticCollector,
    *,
    markers: Optional[DirectiveMarkers] = None,
    show_progress: bool = False,
) -> Dict[str, List[Snippet]]:
    """Extract snippets from every unit, grouped by type in discovery order."""
    extractor = SnippetExtractor(diagnostics, markers=markers or DirectiveMarkers.for_comment_prefix())
    snippets_by_type: Dict[str, List[Snippet]] = {}
    for unit in tqdm(units, desc="Extracting", unit="file", disable=not show_progress):
        snippets = extractor.extract(unit.path, unit.lines())
        if snippets:
            snippets_by_type.setdefault(unit.type_name, []).extend(snippets)
    return snippets_by_type


class GenerationPipeline:
    """Runs the snippet generation end to end for one repository."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.diagnostics = DiagnosticCollector()
        self.loader = SourceLoader(
            pattern=self.config.source_pattern,
            project_suffix=self.config.project_suffix,
            file_suffix=self.config.file_suffix,
        )
        self.markers = DirectiveMarkers.for_comment_prefix(self.config.comment_prefix)

    def locate_root(self) -> Path:
        if self.config.root is not None:
            root = Path(self.config.root).resolve()
            if not root.is_dir():
                raise UserError(f"Root directory {root} doesn't exist. Aborting.")
            return root

        root = determine_root_directory(Path.cwd(), self.config.root_markers)
        if root is None:
            markers = ", ".join(self.config.root_markers)
            raise UserError(
                f"Unable to determine root directory. Please run within a directory tree containing {markers}."
            )
        return root

    def run(self) -> GenerationResult:
        """Generate text and markdown files for every snippet in the repository.

        Raises:
            UserError: If the root or a required directory can't be found, or a
                resource file can't be read.
        """
        start_time = time.time()
        self.diagnostics.clear()

        root = self.locate_root()
        snippets_dir = self.config.resolve(root, self.config.snippets_dir)
        if not snippets_dir.is_dir():
            raise UserError(f"Snippets directory {snippets_dir} doesn't exist. Aborting.")
        metadata_dir = self.config.resolve(root, self.config.metadata_dir)
        if not metadata_dir.is_dir():
            raise UserError(f"Metadata directory {metadata_dir} doesn't exist. Aborting.")
        output_dir = self.config.resolve(root, self.config.output_dir)
        prepare_output_directory(output_dir)

        members_by_type = load_members_by_type(metadata_dir, self.config.metadata_pattern)
        member_count = sum(len(members) for members in members_by_type.values())
        logger.info("Loaded %d types with %d members", len(members_by_type), member_count)

        units = self.loader.load_units(snippets_dir)
        snippets_by_type = load_all_snippets(
            units,
            self.diagnostics,
            markers=self.markers,
            show_progress=self.config.show_progress,
        )
        logger.info(
            "Loaded %d snippets",
            sum(len(snippets) for snippets in snippets_by_type.values()),
        )

        self.generate(output_dir, snippets_by_type, members_by_type)

        result = GenerationResult(
            snippets_by_type=snippets_by_type,
            diagnostics=list(self.diagnostics),
            type_count=len(members_by_type),
            member_count=member_count,
            duration=time.time() - start_time,
        )
        logger.info(
            "Generation complete: %d snippets, %d problems, %.1fs elapsed",
            result.snippet_count,
            len(result.diagnostics),
            result.duration,
        )
        return result

    def generate(
        self,
        output_dir: Path,
        snippets_by_type: Mapping[str, List[Snippet]],
        members_by_type: Mapping[str, List[MemberSignature]],
    ) -> None:
        """Write ``<Type>.txt`` and, where members resolved, ``<Type>.md`` per type."""
        for type_name, snippets in snippets_by_type.items():
            snippet_file = f"{type_name}.txt"
            write_lines(output_dir / snippet_file, render_snippet_text(snippets))
            map_metadata_uids(snippets, members_by_type.get(type_name, []), self.diagnostics)
            markdown = render_snippet_markdown(snippet_file, snippets, language=self.config.language)
            if markdown is not None:
                write_lines(output_dir / f"{type_name}.md", markdown)


__all__ = [
    "GenerationPipeline",
    "GenerationResult",
    "determine_root_directory",
    "load_all_snippets",
    "prepare_output_directory",
]
