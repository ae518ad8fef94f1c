# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : test_process_one.py
#   file_relpath : tests/replacer/test_process_one.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Tests for `HeaderReplacer.process_one`."""

from __future__ import annotations

from pathlib import Path

from headersmith.languages import Language
from headersmith.types import OutcomeKind, make_job
from tests.conftest import make_replacer, mark_pipeline, parametrize

CS_TEMPLATES: dict[str, list[str] | None] = {".cs": ["// Copyright %CurrentYear%"]}


@mark_pipeline
def test_content_job_gets_header_without_disk_write() -> None:
    """Content jobs return the new text without touching the disk."""
    outcome = make_replacer().process_one(
        make_job("Program.cs", content="using System;\n", templates=CS_TEMPLATES)
    )
    assert outcome.kind is OutcomeKind.REPLACED
    assert outcome.changed
    assert outcome.content == "// Copyright 2024\nusing System;\n"
    assert not Path("Program.cs").exists()


@mark_pipeline
def test_none_template_removes_existing_header() -> None:
    """A None template removes the existing header."""
    outcome = make_replacer().process_one(
        make_job("notes.txt", content="// old header\nbody\n", templates={".txt": None})
    )
    assert outcome.kind is OutcomeKind.REPLACED
    assert outcome.content == "body\n"


@mark_pipeline
def test_empty_header_with_nothing_to_remove() -> None:
    """An empty template on a headerless file is a valid no-op."""
    outcome = make_replacer().process_one(
        make_job("notes.txt", content="body\n", templates={".txt": ["", " "]})
    )
    assert outcome.kind is OutcomeKind.EMPTY_HEADER
    assert outcome.content is None


@mark_pipeline
def test_removal_only_without_header_is_unchanged() -> None:
    """Removal-only mode on a headerless file leaves it unchanged."""
    outcome = make_replacer().process_one(make_job("a.cs", content="class A {}\n"))
    assert outcome.kind is OutcomeKind.UNCHANGED


@mark_pipeline
def test_file_job_is_rewritten_in_place(tmp_path: Path) -> None:
    """File jobs read the file and write the result back."""
    target = tmp_path / "Program.cs"
    target.write_bytes(b"using System;\r\n")

    outcome = make_replacer().process_one(make_job(target, templates=CS_TEMPLATES))

    assert outcome.kind is OutcomeKind.REPLACED
    assert target.read_bytes() == b"// Copyright 2024\r\nusing System;\r\n"
    assert list(tmp_path.iterdir()) == [target]


@mark_pipeline
def test_dry_run_does_not_write(tmp_path: Path) -> None:
    """In dry-run mode the new content is returned but not written."""
    target = tmp_path / "Program.cs"
    target.write_text("using System;\n", encoding="utf-8")

    outcome = make_replacer(dry_run=True).process_one(make_job(target, templates=CS_TEMPLATES))

    assert outcome.kind is OutcomeKind.REPLACED
    assert outcome.content == "// Copyright 2024\nusing System;\n"
    assert target.read_text(encoding="utf-8") == "using System;\n"


@mark_pipeline
def test_language_not_found_called_by_user() -> None:
    """Interactive callers get an error outcome and the callback."""
    messages: list[str] = []
    outcome = make_replacer().process_one(
        make_job("data.unknownext", content="x\n", templates={".unknownext": ["# x"]}),
        language_not_found=messages.append,
    )
    assert outcome.kind is OutcomeKind.LANGUAGE_NOT_FOUND
    assert outcome.message is not None
    assert messages == [outcome.message]


@mark_pipeline
def test_language_not_found_not_called_by_user() -> None:
    """Non-interactive callers get a silent skip."""
    messages: list[str] = []
    outcome = make_replacer().process_one(
        make_job("data.unknownext", content="x\n"),
        called_by_user=False,
        language_not_found=messages.append,
    )
    assert outcome.kind is OutcomeKind.SKIPPED
    assert messages == []


@mark_pipeline
@parametrize("called_by_user, expected", [(True, OutcomeKind.NO_HEADER_FOUND), (False, OutcomeKind.SKIPPED)])
def test_no_template_for_extension(called_by_user: bool, expected: OutcomeKind) -> None:
    """A template map without a matching key reports NO_HEADER_FOUND or skips."""
    outcome = make_replacer().process_one(
        make_job("main.py", content="import os\n", templates=CS_TEMPLATES),
        called_by_user=called_by_user,
    )
    assert outcome.kind is expected


@mark_pipeline
def test_parse_error_outcome() -> None:
    """An unterminated block comment gives PARSE_ERROR and no content."""
    outcome = make_replacer().process_one(
        make_job("a.cs", content="/* open\nclass A {}\n", templates=CS_TEMPLATES)
    )
    assert outcome.kind is OutcomeKind.PARSE_ERROR
    assert outcome.content is None
    assert outcome.message is not None and "a.cs" in outcome.message


@mark_pipeline
def test_definition_files_are_skipped(tmp_path: Path) -> None:
    """Header-definition files are never rewritten."""
    target = tmp_path / "Project.licenseheader"
    target.write_text("extensions: .cs\n// x\n", encoding="utf-8")
    outcome = make_replacer().process_one(make_job(target, templates=CS_TEMPLATES))
    assert outcome.kind is OutcomeKind.SKIPPED
    assert target.read_text(encoding="utf-8") == "extensions: .cs\n// x\n"


@mark_pipeline
def test_invalid_input_is_miscellaneous(tmp_path: Path) -> None:
    """Bad paths, malformed templates and unreadable files map to MISCELLANEOUS."""
    replacer = make_replacer()
    assert replacer.process_one(make_job("", content="x")).kind is OutcomeKind.MISCELLANEOUS
    assert (
        replacer.process_one(make_job("a.cs", content="x", templates={".cs": "// x"})).kind  # type: ignore[dict-item]
        is OutcomeKind.MISCELLANEOUS
    )
    missing = tmp_path / "missing.cs"
    assert replacer.process_one(make_job(missing, templates=CS_TEMPLATES)).kind is (
        OutcomeKind.MISCELLANEOUS
    )


@mark_pipeline
def test_non_comment_header_declined_and_cached() -> None:
    """A declined invalid header is not applied; the answer is reused per extension."""
    questions: list[str] = []

    def _decline(message: str) -> bool:
        questions.append(message)
        return False

    replacer = make_replacer()
    job = make_job("a.cs", content="class A {}\n", templates={".cs": ["Copyright"]})

    first = replacer.process_one(job, confirm=_decline)
    second = replacer.process_one(job, confirm=_decline)

    assert first.kind is OutcomeKind.NON_COMMENT_TEXT
    assert second.kind is OutcomeKind.NON_COMMENT_TEXT
    assert len(questions) == 1
    assert "'.cs'" in questions[0]

    replacer.reset_decisions()
    accepted = replacer.process_one(job, confirm=lambda _m: True)
    assert accepted.kind is OutcomeKind.REPLACED
    assert accepted.content == "// Copyright\nclass A {}\n"


@mark_pipeline
def test_non_comment_header_proceeds_without_callback() -> None:
    """Without a confirmation callback the header is applied."""
    outcome = make_replacer().process_one(
        make_job("a.cs", content="class A {}\n", templates={".cs": ["Copyright"]})
    )
    assert outcome.kind is OutcomeKind.REPLACED


@mark_pipeline
def test_additional_tokens() -> None:
    """Job tokens are expanded after the built-ins."""
    outcome = make_replacer().process_one(
        make_job(
            "a.cs",
            content="class A {}\n",
            templates={".cs": ["// %Project% (c) %CurrentYear% %UserDisplayName%"]},
            additional_tokens=[("%Project%", "HeaderSmith")],
        )
    )
    assert outcome.content == "// HeaderSmith (c) 2024 Jane Doe\nclass A {}\n"


@mark_pipeline
def test_configured_language_is_used() -> None:
    """Languages from the configuration are registered on top of the built-ins."""
    ini = Language(name="ini", extensions=(".ini",), line_comment=";")
    outcome = make_replacer(languages=[ini]).process_one(
        make_job("setup.ini", content="[a]\n", templates={".ini": ["; (c) %CurrentYear%"]})
    )
    assert outcome.content == "; (c) 2024\n[a]\n"


@mark_pipeline
def test_keywordless_header_is_not_stacked_in_keyword_mode() -> None:
    """A written header without the configured keywords is not inserted again."""
    replacer = make_replacer(keywords=["copyright"])
    templates: dict[str, list[str] | None] = {".cs": ["// Licensed under MIT"]}

    first = replacer.process_one(make_job("A.cs", content="class A {}\n", templates=templates))
    assert first.kind is OutcomeKind.REPLACED
    assert first.content == "// Licensed under MIT\nclass A {}\n"

    second = replacer.process_one(make_job("A.cs", content=first.content, templates=templates))
    assert second.kind is OutcomeKind.UNCHANGED


@mark_pipeline
def test_xml_declaration_is_kept_first() -> None:
    """Headers go below the XML declaration of project and config files."""
    outcome = make_replacer().process_one(
        make_job(
            "App.csproj",
            content='<?xml version="1.0" encoding="utf-8"?>\n<Project/>\n',
            templates={".csproj": ["<!-- Copyright %CurrentYear% -->"]},
        )
    )
    assert outcome.kind is OutcomeKind.REPLACED
    assert outcome.content == (
        '<?xml version="1.0" encoding="utf-8"?>\n<!-- Copyright 2024 -->\n<Project/>\n'
    )
