from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .exception_handler import LOGGER_NAME


logger = logging.getLogger(LOGGER_NAME)


@dataclass(slots=True)
class GeneratorConfig:
    """Runtime configuration for a generation run.

    Relative directories are resolved against the repository root, which is
    either ``root`` or discovered by walking up until every ``root_markers``
    file is present.
    """

    root: Path | None = None
    snippets_dir: Path = Path("snippets")
    metadata_dir: Path = Path("docs/obj/api")
    output_dir: Path = Path("docs/obj/snippets")
    root_markers: tuple[str, ...] = ("LICENSE", "GoogleApis.sln")
    project_suffix: str = ".Snippets"
    file_suffix: str = "Snippets.cs"
    source_pattern: str = "*.cs"
    metadata_pattern: str = "Google*.yml"
    language: str = "cs"
    comment_prefix: str = "//"
    log_level: str = "INFO"
    show_progress: bool = True

    def resolve(self, root: Path, path: Path) -> Path:
        return path if path.is_absolute() else root / path

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        def _path_env(name: str, default: Path) -> Path:
            raw = os.getenv(name)
            return Path(raw) if raw else default

        def _bool_env(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if not raw:
                return default
            lowered = raw.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            logger.warning("Invalid boolean for %s: %s", name, raw)
            return default

        defaults = cls()
        root = os.getenv("SNIPPETGEN_ROOT")
        markers = os.getenv("SNIPPETGEN_ROOT_MARKERS")
        return cls(
            root=Path(root) if root else None,
            snippets_dir=_path_env("SNIPPETGEN_SNIPPETS_DIR", defaults.snippets_dir),
            metadata_dir=_path_env("SNIPPETGEN_METADATA_DIR", defaults.metadata_dir),
            output_dir=_path_env("SNIPPETGEN_OUTPUT_DIR", defaults.output_dir),
            root_markers=tuple(markers.split(",")) if markers else defaults.root_markers,
            metadata_pattern=os.getenv("SNIPPETGEN_METADATA_PATTERN", defaults.metadata_pattern),
            language=os.getenv("SNIPPETGEN_LANGUAGE", defaults.language),
            comment_prefix=os.getenv("SNIPPETGEN_COMMENT_PREFIX", defaults.comment_prefix),
            log_level=os.getenv("SNIPPETGEN_LOG_LEVEL", defaults.log_level),
            show_progress=_bool_env("SNIPPETGEN_PROGRESS", defaults.show_progress),
        )


__all__ = ["GeneratorConfig"]
