"""Tests for the hard-link directory registry."""

import errno
from pathlib import Path

import pytest

from office_toolbox.core.errors import (
    BackingStoreError,
    ConflictError,
    MissingArgumentError,
    NothingRemovedError,
    UnsupportedApplicationError,
)
from office_toolbox.core.registration.directory import DirectoryManifestRegistry, is_junk
from tests.test_utils.manifests import write_manifest


def _registry(tmp_path: Path) -> DirectoryManifestRegistry:
    return DirectoryManifestRegistry(sideloading_root=tmp_path / "home")


def test_add_creates_hard_link(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")

    registry.add("excel", manifest)

    linked = registry.sideloading_directory("excel") / "manifest.xml"
    assert linked.exists()
    assert linked.stat().st_ino == manifest.stat().st_ino
    assert linked.stat().st_nlink == 2


def test_add_then_list(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")

    registry.add("excel", manifest)
    entries = registry.list_manifests("excel")

    assert len(entries) == 1
    assert entries[0].application == "excel"
    assert entries[0].manifest_path == (registry.sideloading_directory("excel") / "manifest.xml").resolve()


def test_list_without_application_scans_every_directory(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")

    registry.add("word", manifest)
    registry.add("powerpoint", manifest)

    applications = [entry.application for entry in registry.list_manifests(None)]
    assert applications == ["word", "powerpoint"]


def test_list_with_missing_directory_is_empty(tmp_path: Path) -> None:
    assert _registry(tmp_path).list_manifests(None) == []


def test_add_same_file_twice_is_noop(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")

    registry.add("word", manifest)
    registry.add("word", manifest)

    assert len(registry.list_manifests("word")) == 1


def test_add_different_file_with_same_name_conflicts(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    registry.add("word", write_manifest(tmp_path / "first"))

    with pytest.raises(ConflictError) as exc_info:
        registry.add("word", write_manifest(tmp_path / "second"))

    assert exc_info.value.detail is not None
    assert exc_info.value.detail.endswith("manifest.xml")


def test_cross_device_link_is_a_store_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse_link(self: Path, target: Path) -> None:
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(Path, "hardlink_to", refuse_link)
    registry = _registry(tmp_path)

    with pytest.raises(BackingStoreError) as exc_info:
        registry.add("excel", write_manifest(tmp_path / "project"))

    assert exc_info.value.detail == str(registry.sideloading_directory("excel") / "manifest.xml")


def test_dangling_link_at_destination_is_a_store_error(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    directory = registry.sideloading_directory("word")
    directory.mkdir(parents=True)
    (directory / "manifest.xml").symlink_to(tmp_path / "gone.xml")

    with pytest.raises(BackingStoreError):
        registry.add("word", write_manifest(tmp_path / "project"))


def test_add_unsupported_application(tmp_path: Path) -> None:
    with pytest.raises(UnsupportedApplicationError):
        _registry(tmp_path).add("outlook", write_manifest(tmp_path / "project"))


def test_list_skips_junk_files(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    directory = registry.sideloading_directory("word")
    directory.mkdir(parents=True)
    (directory / ".DS_Store").write_text("")
    (directory / "Thumbs.db").write_text("")
    (directory / "real.xml").write_text("<OfficeApp/>")

    names = [entry.manifest_path.name for entry in registry.list_manifests("word")]

    assert names == ["real.xml"]


def test_remove_by_source_path_unlinks_entry_only(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")
    registry.add("excel", manifest)

    removed = registry.remove("excel", manifest)

    assert [entry.application for entry in removed] == ["excel"]
    assert registry.list_manifests("excel") == []
    assert manifest.exists()


def test_remove_by_listed_path(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    registry.add("word", write_manifest(tmp_path / "project"))
    listed = registry.list_manifests("word")[0].manifest_path

    registry.remove("word", listed)

    assert registry.list_manifests("word") == []


def test_remove_without_application_removes_from_all(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    manifest = write_manifest(tmp_path / "project")
    registry.add("word", manifest)
    registry.add("excel", manifest)

    removed = registry.remove(None, manifest)

    assert sorted(entry.application or "" for entry in removed) == ["excel", "word"]
    assert registry.list_manifests(None) == []


def test_remove_unknown_path_raises(tmp_path: Path) -> None:
    registry = _registry(tmp_path)
    registry.add("word", write_manifest(tmp_path / "project"))

    with pytest.raises(NothingRemovedError):
        registry.remove("word", tmp_path / "elsewhere.xml")


def test_remove_requires_path(tmp_path: Path) -> None:
    with pytest.raises(MissingArgumentError):
        _registry(tmp_path).remove("word", None)


@pytest.mark.parametrize(
    "name",
    [".DS_Store", "npm-debug.log", ".manifest.xml.swp", "._manifest.xml", "manifest.xml~", "Desktop.ini"],
)
def test_is_junk(name: str) -> None:
    assert is_junk(name)


@pytest.mark.parametrize("name", ["manifest.xml", "my-addin.xml", "Thumbs.xml"])
def test_is_not_junk(name: str) -> None:
    assert not is_junk(name)
