"""Tests for interactive prompts."""

from pathlib import Path
from unittest.mock import patch

import pytest

from office_toolbox.cli.prompts import (
    check_and_prompt_for_path,
    ensure_application,
    items_in_directory,
    prompt_for_command,
    prompt_for_manifest_from_directory,
    prompt_for_registered_manifest,
    strip_quotes,
)
from office_toolbox.core.context import ToolboxContext
from office_toolbox.core.registration.abc import RegistrationEntry
from tests.fakes.registry import FakeManifestRegistry


def test_strip_quotes() -> None:
    assert strip_quotes('"C:\\my addin\\manifest.xml"') == "C:\\my addin\\manifest.xml"
    assert strip_quotes("manifest.xml") == "manifest.xml"
    assert strip_quotes('"') == '"'


def test_ensure_application_accepts_known_name() -> None:
    assert ensure_application("Excel") == "excel"


def test_ensure_application_prompts_for_unknown(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("office_toolbox.cli.prompts.click.prompt", return_value=3):
        assert ensure_application("visio") == "powerpoint"

    assert "A valid application must be specified." in capsys.readouterr().err


def test_prompt_for_command_maps_selection_to_name() -> None:
    with patch("office_toolbox.cli.prompts.click.prompt", return_value=4):
        assert prompt_for_command() == "validate"


def test_items_in_directory_lists_manifests_first(tmp_path: Path) -> None:
    (tmp_path / "b.xml").write_text("")
    (tmp_path / "a.xml").write_text("")
    (tmp_path / "notes.txt").write_text("")
    (tmp_path / "sub").mkdir()

    assert items_in_directory(tmp_path) == ["a.xml", "b.xml", "..", "sub"]


def test_browse_descends_until_file_chosen(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "manifest.xml").write_text("")

    # tmp_path: [.., sub] -> choose 2; sub: [manifest.xml, ..] -> choose 1
    with patch("office_toolbox.cli.prompts.click.prompt", side_effect=[2, 1]):
        chosen = prompt_for_manifest_from_directory(tmp_path)

    assert chosen == tmp_path.resolve() / "sub" / "manifest.xml"


def test_registered_manifest_choice() -> None:
    registry = FakeManifestRegistry(
        entries=[
            RegistrationEntry(application="word", manifest_path=Path("/a.xml")),
            RegistrationEntry(application="word", manifest_path=Path("/b.xml")),
        ]
    )
    ctx = ToolboxContext.for_test(registry=registry)

    with patch("office_toolbox.cli.prompts.click.prompt", return_value=2):
        assert prompt_for_registered_manifest(ctx, "word") == Path("/b.xml")


def test_registered_manifest_choice_with_none_registered() -> None:
    ctx = ToolboxContext.for_test(registry=FakeManifestRegistry())

    with pytest.raises(SystemExit):
        prompt_for_registered_manifest(ctx, "word")


def test_check_and_prompt_returns_given_path() -> None:
    ctx = ToolboxContext.for_test()

    assert check_and_prompt_for_path(ctx, "word", "m.xml") == Path("m.xml")


def test_check_and_prompt_typed_path(capsys: pytest.CaptureFixture[str]) -> None:
    ctx = ToolboxContext.for_test()

    with patch(
        "office_toolbox.cli.prompts.click.prompt", side_effect=[2, '"/addin/manifest.xml"']
    ):
        path = check_and_prompt_for_path(ctx, "word", None)

    assert path == Path("/addin/manifest.xml")
    assert "The path must be specified for the manifest." in capsys.readouterr().err
