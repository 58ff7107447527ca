"""Tests for document generation from templates."""

from pathlib import Path

import pytest

from office_toolbox.core.applications import ManifestKind
from office_toolbox.core.errors import TemplatePartMissingError, UnsupportedCombinationError
from office_toolbox.core.templates import (
    PLACEHOLDER_ID,
    PLACEHOLDER_VERSION,
    bundled_templates_dir,
    generate_template_file,
    next_available_path,
    substitute_placeholders,
)
from tests.test_utils.manifests import TEST_MANIFEST_ID, TEST_MANIFEST_VERSION
from tests.test_utils.templates import build_template, read_part

WEB_EXTENSION_PART = (
    '<we:webextension xmlns:we="http://schemas.microsoft.com/office/webextensions/webextension/2010/11">'
    f'<we:reference id="{PLACEHOLDER_ID}" version="{PLACEHOLDER_VERSION}" store="developer"/>'
    "</we:webextension>"
)


def test_next_available_path_prefers_plain_name(tmp_path: Path) -> None:
    assert next_available_path(tmp_path, "Book.xlsx") == tmp_path / "Book.xlsx"


def test_next_available_path_counts_from_zero(tmp_path: Path) -> None:
    (tmp_path / "Book.xlsx").write_bytes(b"")
    (tmp_path / "Book0.xlsx").write_bytes(b"")

    assert next_available_path(tmp_path, "Book.xlsx") == tmp_path / "Book1.xlsx"


def test_substitute_placeholders_replaces_every_occurrence() -> None:
    text = f"{PLACEHOLDER_ID} {PLACEHOLDER_VERSION} {PLACEHOLDER_ID}"

    result = substitute_placeholders(text, "ID", "9.9")

    assert result == "ID 9.9 ID"


def test_substitute_placeholders_is_literal() -> None:
    assert substitute_placeholders("1x0x0x0", "ID", "9.9") == "1x0x0x0"


def test_generate_excel_task_pane_from_bundled_template(tmp_path: Path) -> None:
    document = generate_template_file(
        "excel",
        ManifestKind.TASK_PANE,
        TEST_MANIFEST_ID,
        TEST_MANIFEST_VERSION,
        cwd=tmp_path,
        templates_dir=bundled_templates_dir(),
    )

    assert document == tmp_path / "BookWithTaskPane.xlsx"
    part = read_part(document, "xl/webextensions/webextension.xml")
    assert f'id="{TEST_MANIFEST_ID}"' in part
    assert f'version="{TEST_MANIFEST_VERSION}"' in part
    assert PLACEHOLDER_ID not in part
    assert PLACEHOLDER_VERSION not in part


@pytest.mark.parametrize(
    ("application", "kind", "part"),
    [
        ("word", ManifestKind.TASK_PANE, "word/webextensions/webextension.xml"),
        ("excel", ManifestKind.CONTENT, "xl/webextensions/webextension.xml"),
        ("powerpoint", ManifestKind.TASK_PANE, "ppt/webextensions/webextension.xml"),
        ("powerpoint", ManifestKind.CONTENT, "ppt/slides/udata/data.xml"),
    ],
)
def test_every_bundled_template_carries_its_part(
    tmp_path: Path, application: str, kind: ManifestKind, part: str
) -> None:
    document = generate_template_file(
        application,
        kind,
        TEST_MANIFEST_ID,
        TEST_MANIFEST_VERSION,
        cwd=tmp_path,
        templates_dir=bundled_templates_dir(),
    )

    text = read_part(document, part)
    assert f'id="{TEST_MANIFEST_ID}"' in text
    assert f'version="{TEST_MANIFEST_VERSION}"' in text
    assert PLACEHOLDER_ID not in text
    assert PLACEHOLDER_VERSION not in text


def test_generate_never_overwrites(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    build_template(
        templates / "DocumentWithTaskPane.docx",
        {"word/webextensions/webextension.xml": WEB_EXTENSION_PART},
    )
    existing = tmp_path / "DocumentWithTaskPane.docx"
    existing.write_bytes(b"keep me")

    document = generate_template_file(
        "word", ManifestKind.TASK_PANE, TEST_MANIFEST_ID, "2.0", cwd=tmp_path, templates_dir=templates
    )

    assert document == tmp_path / "DocumentWithTaskPane0.docx"
    assert existing.read_bytes() == b"keep me"


def test_other_parts_are_copied_unchanged(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    build_template(
        templates / "DocumentWithTaskPane.docx",
        {
            "[Content_Types].xml": f"<Types>{PLACEHOLDER_ID}</Types>",
            "word/webextensions/webextension.xml": WEB_EXTENSION_PART,
        },
    )
    out = tmp_path / "out"
    out.mkdir()

    document = generate_template_file(
        "word", ManifestKind.TASK_PANE, TEST_MANIFEST_ID, "2.0", cwd=out, templates_dir=templates
    )

    assert read_part(document, "[Content_Types].xml") == f"<Types>{PLACEHOLDER_ID}</Types>"


def test_word_content_is_unsupported(tmp_path: Path) -> None:
    with pytest.raises(UnsupportedCombinationError) as exc_info:
        generate_template_file(
            "word",
            ManifestKind.CONTENT,
            TEST_MANIFEST_ID,
            TEST_MANIFEST_VERSION,
            cwd=tmp_path,
            templates_dir=bundled_templates_dir(),
        )

    assert "ContentApp" in exc_info.value.message
    assert exc_info.value.detail == "word"
    assert list(tmp_path.iterdir()) == []


def test_missing_part_writes_nothing(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    build_template(templates / "BookWithTaskPane.xlsx", {"xl/workbook.xml": "<workbook/>"})
    out = tmp_path / "out"
    out.mkdir()

    with pytest.raises(TemplatePartMissingError):
        generate_template_file(
            "excel", ManifestKind.TASK_PANE, TEST_MANIFEST_ID, "2.0", cwd=out, templates_dir=templates
        )

    assert list(out.iterdir()) == []
