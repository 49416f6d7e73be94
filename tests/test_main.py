import pytest

import main


def _make_repo(tmp_path, source):
    (tmp_path / "LICENSE").write_text("license", encoding="utf-8")
    (tmp_path / "GoogleApis.sln").write_text("", encoding="utf-8")
    project = tmp_path / "snippets" / "Google.Foo.Snippets"
    project.mkdir(parents=True)
    (project / "BarSnippets.cs").write_text(source, encoding="utf-8")
    metadata = tmp_path / "docs" / "obj" / "api"
    metadata.mkdir(parents=True)
    (metadata / "Google.Foo.Bar.yml").write_text(
        "items:\n"
        "- uid: Google.Foo.Bar\n  id: Bar\n  type: Class\n"
        "- uid: Google.Foo.Bar.Run\n  id: Run()\n  parent: Google.Foo.Bar\n  type: Method\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("SNIPPETGEN_ROOT", "SNIPPETGEN_OUTPUT_DIR", "SNIPPETGEN_PROGRESS"):
        monkeypatch.delenv(name, raising=False)


def test_success_exit_code(tmp_path):
    root = _make_repo(tmp_path, "// Snippet: Run\nrun();\n// End snippet\n")

    assert main.main(["--root", str(root), "--no-progress"]) == 0
    assert (root / "docs" / "obj" / "snippets" / "Google.Foo.Bar.md").exists()


def test_diagnostics_exit_code_and_report(tmp_path, capsys):
    root = _make_repo(tmp_path, "// End snippet\n// Snippet: Walk\n// End snippet\n")

    assert main.main(["--root", str(root), "--no-progress"]) == 1

    err = capsys.readouterr().err
    assert "BarSnippets.cs:1: Snippet/sample end without start" in err
    assert "BarSnippets.cs:2: Member ID 'Walk' matches no members." in err


def test_user_error_exit_code(tmp_path, capsys):
    assert main.main(["--root", str(tmp_path), "--no-progress"]) == 1

    assert "Error: Snippets directory" in capsys.readouterr().err


def test_flags_override_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SNIPPETGEN_OUTPUT_DIR", "from-env")
    monkeypatch.setenv("SNIPPETGEN_PROGRESS", "true")
    args = main._build_parser().parse_args(["--output-dir", "from-flag", "--no-progress"])

    config = main.build_config(args)

    assert str(config.output_dir) == "from-flag"
    assert config.show_progress is False
