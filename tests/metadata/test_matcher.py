import pytest

from snippetgen.exception_handler import DiagnosticCollector
from snippetgen.metadata import MemberSignature, find_matches, is_member_match, map_metadata_uids
from snippetgen.snippet import Snippet


def _member(member_id, uid=None):
    return MemberSignature(uid=uid or f"Google.Client.{member_id}", id=member_id, parent="Google.Client")


def _snippet(*references):
    return Snippet(
        id=references[0],
        member_references=list(references),
        source_file="ClientSnippets.cs",
        source_start_line=4,
    )


@pytest.mark.parametrize(
    "member_id, reference_id, expected",
    [
        ("Create(System.String)", "Create", True),
        ("Create()", "Create", True),
        ("CreateAsync(System.String)", "Create", False),
        ("Other(System.String)", "Create", False),
        ("Create(System.String,System.Int32)", "Create(string,int)", False),
        ("Create(System.String,System.Int32)", "Create(string,Int32)", True),
        ("Create(System.String,System.Int32)", "Create(*,*)", True),
        ("Create(System.String,System.Int32)", "Create(*)", False),
        ("Create(Google.Api.Gax.CallSettings)", "Create(CallSettings)", True),
        ("Create(Google.Api.Gax.CallSettings)", "Create(Gax.CallSettings)", True),
        ("Create(Google.Api.Gax.CallSettings)", "Create(Expiration)", False),
        ("Create()", "Create()", True),
        ("Create(System.String)", "Create()", False),
        ("Create()", "Create(*)", False),
        ("CreateAsync(System.String)", "Create(*)", False),
    ],
)
def test_is_member_match(member_id, reference_id, expected):
    assert is_member_match(member_id, reference_id) is expected


def test_bare_name_resolves_uniquely():
    members = [_member("Create(string)"), _member("Other(string)")]

    assert [m.id for m in find_matches("Create", members)] == ["Create(string)"]


def test_partial_parameters_can_be_ambiguous():
    members = [_member("Create(string,int)"), _member("Create(string,string)")]

    assert len(find_matches("Create(string,*)", members)) == 2


def test_map_metadata_uids_records_single_match():
    members = [_member("DoThing()", uid="Google.Client.DoThing")]
    snippet = _snippet("DoThing")
    diagnostics = DiagnosticCollector()

    map_metadata_uids([snippet], members, diagnostics)

    assert diagnostics.messages() == []
    assert snippet.resolved_member_uids == ["Google.Client.DoThing"]


def test_map_metadata_uids_reports_ambiguity_without_picking():
    members = [_member("Create(string,int)", uid="a"), _member("Create(string,string)", uid="b")]
    snippet = _snippet("Create(string,*)")
    diagnostics = DiagnosticCollector()

    map_metadata_uids([snippet], members, diagnostics)

    assert snippet.resolved_member_uids == []
    assert diagnostics.messages() == [
        "ClientSnippets.cs:4: Member ID 'Create(string,*)' matches multiple members "
        "(Create(string,int), Create(string,string))."
    ]


def test_map_metadata_uids_reports_no_match():
    snippet = _snippet("Missing")
    diagnostics = DiagnosticCollector()

    map_metadata_uids([snippet], [_member("Create()")], diagnostics)

    assert snippet.resolved_member_uids == []
    assert diagnostics.messages() == ["ClientSnippets.cs:4: Member ID 'Missing' matches no members."]


def test_map_metadata_uids_resolves_additional_members_in_order():
    members = [_member("Create()", uid="create"), _member("CreateAsync()", uid="create-async")]
    snippet = _snippet("Create", "CreateAsync", "Nope")
    diagnostics = DiagnosticCollector()

    map_metadata_uids([snippet], members, diagnostics)

    assert snippet.resolved_member_uids == ["create", "create-async"]
    assert len(diagnostics) == 1


def test_samples_are_not_matched():
    sample = Snippet(id="basic_usage", is_sample=True, source_file="ClientSnippets.cs", source_start_line=1)
    diagnostics = DiagnosticCollector()

    map_metadata_uids([sample], [_member("Create()")], diagnostics)

    assert not diagnostics
    assert sample.resolved_member_uids == []
