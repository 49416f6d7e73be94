import logging
from typing import Dict, Iterator, List, NamedTuple


LOGGER_NAME = "snippetgen"


class UserError(Exception):
    """A fatal problem the user has to fix before the generator can run."""


class ResourceNotFoundError(UserError):
    """A resource directive points at a file that cannot be read."""

    def __init__(self, location: str, path: str, reason: str | None = None):
        self.location = location
        self.path = path
        message = f"{location}: Unable to read resource file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class Diagnostic(NamedTuple):
    """A single problem found in the snippet sources."""
    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class DiagnosticCollector:
    """Accumulates diagnostics across a whole run.

    Nothing here raises: extraction and member matching record every problem
    they find so that one run reports everything that needs fixing.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(LOGGER_NAME)
        self.diagnostics: List[Diagnostic] = []

    def add(self, location: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(location, message)
        self.logger.debug("Diagnostic recorded: %s", diagnostic)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __bool__(self) -> bool:
        return bool(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def messages(self) -> List[str]:
        return [str(diagnostic) for diagnostic in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()

    def get_summary(self) -> Dict[str, object]:
        """Group diagnostics by the file they were reported against."""
        by_file: Dict[str, int] = {}
        for diagnostic in self.diagnostics:
            file_name = diagnostic.location.rsplit(":", 1)[0]
            by_file[file_name] = by_file.get(file_name, 0) + 1
        return {"total": len(self.diagnostics), "by_file": by_file}

    def format_report(self) -> str:
        """Format a user-friendly report listing every diagnostic."""
        if not self.diagnostics:
            return ""

        summary = self.get_summary()
        lines = self.messages()
        lines.append("")
        lines.append(f"⚠️  {summary['total']} problem(s) in {len(summary['by_file'])} file(s)")
        return "\n".join(lines)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the project logger once; later calls only adjust the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
