"""Member metadata catalog and snippet member resolution."""

from .catalog import load_members_by_type
from .matcher import find_matches, is_member_match, map_metadata_uids
from .model import CodeModel, MemberSignature

__all__ = [
    "CodeModel",
    "MemberSignature",
    "find_matches",
    "is_member_match",
    "load_members_by_type",
    "map_metadata_uids",
]
