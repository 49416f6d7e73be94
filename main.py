import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

from snippetgen.config import GeneratorConfig
from snippetgen.exception_handler import LOGGER_NAME, UserError, setup_logging
from snippetgen.orchestration import GenerationPipeline


logger = logging.getLogger(LOGGER_NAME)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate docfx snippet text and markdown files from snippet sources"
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Repository root (default: nearest parent containing the root marker files)",
    )
    parser.add_argument(
        "--snippets-dir",
        type=Path,
        help="Snippets source directory, relative to the root (default: snippets)",
    )
    parser.add_argument(
        "--metadata-dir",
        type=Path,
        help="docfx metadata directory, relative to the root (default: docs/obj/api)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        help="Output directory, relative to the root (default: docs/obj/snippets)",
    )
    parser.add_argument(
        "--metadata-pattern",
        help="Glob for metadata YAML files (default: Google*.yml)",
    )
    parser.add_argument(
        "--language",
        help="Language of the docfx code include (default: cs)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )
    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Overlay command line flags on the environment configuration."""
    config = GeneratorConfig.from_env()
    overrides = {
        "root": args.root,
        "snippets_dir": args.snippets_dir,
        "metadata_dir": args.metadata_dir,
        "output_dir": args.output_dir,
        "metadata_pattern": args.metadata_pattern,
        "language": args.language,
        "log_level": args.log_level,
    }
    changes = {name: value for name, value in overrides.items() if value is not None}
    if args.no_progress:
        changes["show_progress"] = False
    return dataclasses.replace(config, **changes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = build_config(args)
    setup_logging(config.log_level)

    pipeline = GenerationPipeline(config)
    try:
        result = pipeline.run()
    except UserError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n⚠️ Generation interrupted", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Fatal error during snippet generation")
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return 1

    if not result.succeeded:
        print(pipeline.diagnostics.format_report(), file=sys.stderr)
        return 1

    tqdm.write(f"✅ Generated files for {len(result.snippets_by_type)} types ({result.snippet_count} snippets)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
