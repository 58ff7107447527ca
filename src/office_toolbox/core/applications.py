"""Static per-application sideloading profiles.

The table is built once at import time and never mutated. Iteration order of
``APPLICATION_PROFILES`` is the order applications are offered in prompts and
scanned by the directory registry.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType


class ManifestKind(Enum):
    """Add-in kinds that can be sideloaded into a document."""

    TASK_PANE = "TaskPaneApp"
    CONTENT = "ContentApp"


# Recognised only so that it can be rejected with a specific message
MAIL_APP_TYPE = "MailApp"

_SHARED_FOLDER_CATALOG_LINK = (
    "https://docs.microsoft.com/en-us/office/dev/add-ins/testing/"
    "create-a-network-shared-folder-catalog-for-task-pane-and-content-add-ins"
)


@dataclass(frozen=True)
class TemplateSpec:
    """Bundled template document and the archive member carrying placeholders."""

    template_name: str
    web_extension_path: str


@dataclass(frozen=True)
class ApplicationProfile:
    """Sideloading facts for one Office application."""

    name: str
    can_sideload: bool
    documentation_link: str
    templates: Mapping[ManifestKind, TemplateSpec]
    sideloading_subdir: str | None = None

    def sideloading_directory(self, sideloading_root: Path) -> Path | None:
        """Directory holding this application's sideloaded manifests, if any."""
        if self.sideloading_subdir is None:
            return None
        return sideloading_root / self.sideloading_subdir

    def template_for(self, kind: ManifestKind) -> TemplateSpec | None:
        return self.templates.get(kind)


def _wef_subdir(container: str) -> str:
    return f"Library/Containers/com.microsoft.{container}/Data/Documents/wef"


APPLICATION_PROFILES: Mapping[str, ApplicationProfile] = MappingProxyType(
    {
        "word": ApplicationProfile(
            name="word",
            can_sideload=True,
            documentation_link=_SHARED_FOLDER_CATALOG_LINK,
            templates=MappingProxyType(
                {
                    ManifestKind.TASK_PANE: TemplateSpec(
                        template_name="DocumentWithTaskPane.docx",
                        web_extension_path="word/webextensions/webextension.xml",
                    ),
                }
            ),
            sideloading_subdir=_wef_subdir("Word"),
        ),
        "excel": ApplicationProfile(
            name="excel",
            can_sideload=True,
            documentation_link=_SHARED_FOLDER_CATALOG_LINK,
            templates=MappingProxyType(
                {
                    ManifestKind.TASK_PANE: TemplateSpec(
                        template_name="BookWithTaskPane.xlsx",
                        web_extension_path="xl/webextensions/webextension.xml",
                    ),
                    ManifestKind.CONTENT: TemplateSpec(
                        template_name="BookWithContent.xlsx",
                        web_extension_path="xl/webextensions/webextension.xml",
                    ),
                }
            ),
            sideloading_subdir=_wef_subdir("Excel"),
        ),
        "powerpoint": ApplicationProfile(
            name="powerpoint",
            can_sideload=True,
            documentation_link=_SHARED_FOLDER_CATALOG_LINK,
            templates=MappingProxyType(
                {
                    ManifestKind.TASK_PANE: TemplateSpec(
                        template_name="PresentationWithTaskPane.pptx",
                        web_extension_path="ppt/webextensions/webextension.xml",
                    ),
                    ManifestKind.CONTENT: TemplateSpec(
                        template_name="PresentationWithContent.pptx",
                        web_extension_path="ppt/slides/udata/data.xml",
                    ),
                }
            ),
            sideloading_subdir=_wef_subdir("Powerpoint"),
        ),
        "outlook": ApplicationProfile(
            name="outlook",
            can_sideload=False,
            documentation_link=(
                "https://docs.microsoft.com/en-us/outlook/add-ins/sideload-outlook-add-ins-for-testing"
            ),
            templates=MappingProxyType({}),
        ),
        "onenote": ApplicationProfile(
            name="onenote",
            can_sideload=False,
            documentation_link=(
                "https://docs.microsoft.com/en-us/office/dev/add-ins/onenote/"
                "onenote-add-ins-getting-started"
            ),
            templates=MappingProxyType({}),
        ),
        "project": ApplicationProfile(
            name="project",
            can_sideload=False,
            documentation_link=(
                "https://docs.microsoft.com/en-us/office/dev/add-ins/project/project-add-ins"
            ),
            templates=MappingProxyType({}),
        ),
    }
)

APPLICATION_NAMES: tuple[str, ...] = tuple(APPLICATION_PROFILES)


def get_profile(application: str | None) -> ApplicationProfile | None:
    """Look up a profile by (case-insensitive) application name."""
    if application is None:
        return None
    return APPLICATION_PROFILES.get(application.lower())
