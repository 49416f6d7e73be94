from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import ValidationError

from ..exception_handler import LOGGER_NAME
from .model import CodeModel, MemberSignature


logger = logging.getLogger(LOGGER_NAME)

TYPE_KINDS = ("Class", "Struct")
DEFAULT_METADATA_PATTERN = "Google*.yml"


def members_of_model(model: CodeModel) -> tuple[str, List[MemberSignature]] | None:
    """Return the declared type's uid and its direct members, if any.

    Only classes and structs are considered.
    """
    type_item = next((item for item in model.items if item.type in TYPE_KINDS), None)
    if type_item is None:
        return None
    members = [item for item in model.items if item.parent == type_item.uid]
    return type_item.uid, members


def load_metadata_file(path: Path) -> CodeModel | None:
    """Parse one metadata YAML file, or None if it isn't a ManagedReference document."""
    with open(path, "r", encoding="utf-8-sig") as file_handle:
        # docfx writes a "### YamlMime:ManagedReference" comment header, which YAML ignores.
        data = yaml.safe_load(file_handle)

    if not isinstance(data, dict):
        logger.debug("Skipping %s: not a metadata mapping", path.name)
        return None
    try:
        return CodeModel.model_validate(data)
    except ValidationError as exc:
        logger.debug("Skipping %s: %s", path.name, exc)
        return None


def load_members_by_type(
    metadata_dir: Path | str,
    pattern: str = DEFAULT_METADATA_PATTERN,
) -> Dict[str, List[MemberSignature]]:
    """Load every member from the metadata directory, grouped by parent type uid."""
    members_by_type: Dict[str, List[MemberSignature]] = {}
    for path in sorted(Path(metadata_dir).glob(pattern)):
        if not path.is_file():
            continue
        model = load_metadata_file(path)
        if model is None:
            continue
        found = members_of_model(model)
        if found is None:
            logger.debug("Skipping %s: no class or struct declared", path.name)
            continue
        type_uid, members = found
        members_by_type[type_uid] = members
    return members_by_type


__all__ = [
    "DEFAULT_METADATA_PATTERN",
    "load_members_by_type",
    "load_metadata_file",
    "members_of_model",
]
