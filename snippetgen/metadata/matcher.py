"""Resolution of snippet member references against catalog members.

A reference may be:

* a bare name, e.g. ``Create``, matching every overload of ``Create``;
* a name with wildcards, e.g. ``Create(*,*)``, matching by arity;
* a name with (some) parameter types, e.g. ``Create(string,*)``.

Parameter types are compared as strings: ``*`` matches anything, ``string``
matches ``System.String``, and otherwise only the last dot-separated segment
has to agree. Generic types with more than one type argument are not handled
precisely, because their argument lists contain commas.

A reference has to match exactly one member; ambiguity is reported, never
resolved by picking one.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..exception_handler import LOGGER_NAME, DiagnosticCollector
from ..snippet.model import Snippet
from .model import MemberSignature


logger = logging.getLogger(LOGGER_NAME)

WILDCARD = "*"
STRING_ALIAS = "string"
STRING_TYPE = "System.String"


def is_parameter_match(member_parameter: str, reference_parameter: str) -> bool:
    return (
        reference_parameter == WILDCARD
        or (reference_parameter == STRING_ALIAS and member_parameter == STRING_TYPE)
        or member_parameter.split(".")[-1] == reference_parameter.split(".")[-1]
    )


def is_member_match(member_id: str, reference_id: str) -> bool:
    """Return True if the catalog ``member_id`` satisfies ``reference_id``."""
    open_paren = reference_id.find("(")
    if open_paren == -1:
        return member_id.startswith(reference_id + "(")

    if not member_id.startswith(reference_id[:open_paren + 1]):
        return False

    # Both ids end with ")", and share the name up to open_paren.
    reference_parameters = reference_id[open_paren + 1:-1]
    member_parameters = member_id[open_paren + 1:-1]

    # "Foo()" has no parameters, not a single empty one.
    if member_parameters == "":
        return reference_parameters == ""

    split_reference = reference_parameters.split(",")
    split_member = member_parameters.split(",")
    if len(split_member) != len(split_reference):
        return False
    return all(
        is_parameter_match(member_parameter, reference_parameter)
        for member_parameter, reference_parameter in zip(split_member, split_reference)
    )


def find_matches(reference_id: str, members: Iterable[MemberSignature]) -> List[MemberSignature]:
    """Return every member matching ``reference_id``, in catalog order."""
    return [member for member in members if is_member_match(member.id, reference_id)]


def map_metadata_uids(
    snippets: Iterable[Snippet],
    members: Sequence[MemberSignature],
    diagnostics: DiagnosticCollector,
) -> None:
    """Record the uid of the single matching member for every snippet reference."""
    for snippet in snippets:
        for reference_id in snippet.member_references:
            matches = find_matches(reference_id, members)
            if len(matches) > 1:
                match_ids = ", ".join(member.id for member in matches)
                diagnostics.add(
                    snippet.source_location,
                    f"Member ID '{reference_id}' matches multiple members ({match_ids}).",
                )
            elif not matches:
                diagnostics.add(
                    snippet.source_location,
                    f"Member ID '{reference_id}' matches no members.",
                )
            else:
                logger.debug("Resolved %s to %s", reference_id, matches[0].uid)
                snippet.resolved_member_uids.append(matches[0].uid)


__all__ = [
    "find_matches",
    "is_member_match",
    "is_parameter_match",
    "map_metadata_uids",
]
