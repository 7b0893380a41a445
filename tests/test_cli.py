"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json

import pytest

from docsync.cli import _build_parser, main
from docsync.logging import configure_logging
from tests._fixtures.project_builder import ProjectBuilder


def _seed(project: ProjectBuilder) -> None:
    project.component(
        "main-account-card.tsx",
        suggested_filename="AccountCard.tsx",
        display_name="Account Card",
        example_set_name="examplesAccountCard",
    )
    project.component("landing-page.tsx")


def _run_json(capsys: pytest.CaptureFixture[str], argv: list[str]) -> tuple[int, dict]:
    status = 0
    try:
        main(argv)
    except SystemExit as exc:
        status = int(exc.code or 0)
    out = capsys.readouterr().out
    return status, json.loads(out)


def test_cli_accepts_global_options_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "--force", "-o", "JSON", "docs", "list"])
    assert args.verbose is True
    assert args.force is True
    assert args.output == "json"
    assert args.command == "docs"
    assert args.docs_command == "list"


def test_cli_accepts_global_options_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["docs", "generate", "--component", "Account Card", "--path", "app", "-v"])
    assert args.verbose is True
    assert args.force is False
    assert args.path == "app"
    assert args.component == "Account Card"
    assert args.output == "chalk"


def test_cli_check_requires_component_name() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["docs", "check"])


def test_cli_rejects_unknown_output_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--output", "xml", "docs", "list"])


def test_docs_list_json_reports_metadata_status(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    _seed(project)

    status, payload = _run_json(capsys, ["-p", str(project.root), "-o", "json", "docs", "list"])

    assert status == 0
    assert payload["logs"] == ["Account Card: Not documented"]
    assert payload["warnings"] == ["landing-page.tsx: No metadata found"]
    assert payload["errors"] == []


def test_docs_generate_then_check(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(project)
    base = ["--path", str(project.root), "--output", "json"]

    status, payload = _run_json(capsys, base + ["docs", "generate"])
    assert status == 0
    assert payload["successes"] == [
        "Documentation generated for 1 component(s); 0 already up to date."
    ]
    assert (project.docs_dir / "account-card" / "page.tsx").exists()

    status, payload = _run_json(capsys, base + ["docs", "generate"])
    assert status == 0
    assert payload["successes"] == [
        "Documentation generated for 0 component(s); 1 already up to date."
    ]

    status, payload = _run_json(capsys, base + ["docs", "list"])
    assert payload["logs"] == ["Account Card: Documented"]


def test_docs_generate_unknown_component_exits_non_zero(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    _seed(project)

    status, payload = _run_json(
        capsys,
        ["-p", str(project.root), "-o", "json", "docs", "generate", "-c", "Missing"],
    )

    assert status == 1
    assert payload["errors"] == ['Error: Component "Missing" not found.']


def test_missing_global_file_is_fatal(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    status, payload = _run_json(capsys, ["-p", str(tmp_path), "-o", "json", "docs", "list"])

    assert status == 1
    assert payload["errors"] == [
        "Error: Failed to initialize DocumentationManager: app/global.ts file not found"
    ]


def test_docs_check_missing_component_exits_non_zero(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    status, payload = _run_json(capsys, ["-p", str(project.root), "-o", "json", "docs", "check", "ghost"])

    assert status == 1
    assert payload["errors"] == ["Error: Component file not found: ghost.tsx"]


def test_verbose_generate_reports_progress(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(project)

    status, payload = _run_json(
        capsys, ["-p", str(project.root), "-o", "json", "-v", "docs", "generate"]
    )

    assert status == 0
    assert "Documentation created for Account Card" in payload["infos"]
    assert "Updated navLinks.ts with Account Card" in payload["infos"]
    assert "Metadata file updated" in payload["infos"]


def test_chalk_output_prints_lines(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(project)

    main(["-p", str(project.root), "docs", "list"])

    captured = capsys.readouterr()
    assert "Account Card: Not documented" in captured.out
    assert "landing-page.tsx: No metadata found" in captured.err


def test_components_create_and_list(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    status, payload = _run_json(
        capsys, ["-p", str(project.root), "-o", "json", "components", "create", "token-input"]
    )
    assert status == 0
    assert (project.root / "components" / "token-input.tsx").exists()

    status, payload = _run_json(capsys, ["-p", str(project.root), "-o", "json", "components", "list"])
    assert payload["logs"] == ["token-input.tsx"]


def test_log_file_receives_verbose_diagnostics(
    project: ProjectBuilder, tmp_path, capsys: pytest.CaptureFixture[str]
) -> None:
    _seed(project)
    log_file = tmp_path / "logs" / "docsync.log"

    status, _ = _run_json(
        capsys,
        ["-p", str(project.root), "-o", "json", "-v", "--log-file", str(log_file), "docs", "list"],
    )
    configure_logging()

    assert status == 0
    assert "docsync.manager: Manager entering listing" in log_file.read_text(encoding="utf-8")


def test_usage_errors_exit_with_status_two_and_no_document(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--output", "xml", "docs", "list"])

    captured = capsys.readouterr()
    assert excinfo.value.code == 2
    assert captured.out == ""
    assert "invalid choice" in captured.err
