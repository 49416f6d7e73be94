import logging
from fnmatch import fnmatch
from pathlib import Path
from typing import Dict, List, NamedTuple

from ..exception_handler import LOGGER_NAME
from ..snippet.resource import read_lines


class SourceUnit(NamedTuple):
    """A snippets source file and the documented type it illustrates."""
    path: Path
    project: str
    type_name: str

    def lines(self) -> List[str]:
        return read_lines(self.path)


def trim_suffix(text: str, suffix: str) -> str:
    return text[:-len(suffix)] if suffix and text.endswith(suffix) else text


class SourceLoader:
    """Discovers snippet source files laid out as ``<Project>.Snippets/<Type>Snippets.cs``.

    Every directory directly under the snippets root is a project; every
    matching file directly inside a project is a source unit. Both levels are
    enumerated in sorted order so output is stable between runs.
    """

    logger = logging.getLogger(LOGGER_NAME)

    DEFAULT_PROJECT_SUFFIX = ".Snippets"
    DEFAULT_FILE_SUFFIX = "Snippets.cs"
    DEFAULT_PATTERN = "*.cs"

    # Directories never treated as projects
    EXCLUDE_DIRS = {
        'bin', 'obj', '.git', '.vs', '.idea', '__pycache__', 'node_modules',
    }

    def __init__(
        self,
        *,
        pattern: str | None = None,
        project_suffix: str | None = None,
        file_suffix: str | None = None,
    ):
        self.pattern = pattern or self.DEFAULT_PATTERN
        self.project_suffix = self.DEFAULT_PROJECT_SUFFIX if project_suffix is None else project_suffix
        self.file_suffix = self.DEFAULT_FILE_SUFFIX if file_suffix is None else file_suffix

    def type_name_for(self, project_dir: Path, source_file: Path) -> str:
        """Map a source file to the uid of the type its snippets document.

        ``Google.Foo.V1.Snippets/ClientSnippets.cs`` maps to ``Google.Foo.V1.Client``.
        """
        project = trim_suffix(project_dir.name, self.project_suffix)
        return f"{project}.{trim_suffix(source_file.name, self.file_suffix)}"

    def detect_projects(self, snippets_dir: Path | str) -> List[Path]:
        """Return the project directories under the snippets root.

        Raises:
            FileNotFoundError: If the snippets root doesn't exist
        """
        root = Path(snippets_dir)
        if not root.is_dir():
            raise FileNotFoundError(f"Snippets directory not found: {snippets_dir}")
        return sorted(
            path for path in root.iterdir()
            if path.is_dir() and path.name not in self.EXCLUDE_DIRS
        )

    def load_units(self, snippets_dir: Path | str) -> List[SourceUnit]:
        """Detect all source units under the snippets root, in stable order."""
        units: List[SourceUnit] = []
        for project_dir in self.detect_projects(snippets_dir):
            project = trim_suffix(project_dir.name, self.project_suffix)
            for source_file in sorted(project_dir.iterdir()):
                if not source_file.is_file() or not fnmatch(source_file.name, self.pattern):
                    continue
                units.append(SourceUnit(
                    path=source_file,
                    project=project,
                    type_name=self.type_name_for(project_dir, source_file),
                ))

        for project, count in self._count_by_project(units).items():
            self.logger.info("Project %s: %d source files", project, count)

        self.logger.info("Found %d source files under %s", len(units), snippets_dir)
        return units

    @staticmethod
    def _count_by_project(units: List[SourceUnit]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for unit in units:
            counts[unit.project] = counts.get(unit.project, 0) + 1
        return counts


__all__ = ["SourceLoader", "SourceUnit", "trim_suffix"]
