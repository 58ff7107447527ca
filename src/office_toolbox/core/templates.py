"""Generation of ready-to-open documents from the bundled templates.

Each template is an Office Open XML document (a ZIP archive) with one part that
embeds a web extension reference. That part contains the placeholder id
``00000000-0000-0000-0000-000000000000`` and version ``1.0.0.0``; generating a
document replaces both with the manifest's values. The replacement is plain
text substitution over the whole part, not an XML edit, so documents produced
here match those produced by earlier versions of the tool byte for byte in the
patched part.
"""

import logging
import zipfile
from pathlib import Path

from office_toolbox.core.applications import ManifestKind, get_profile
from office_toolbox.core.errors import TemplatePartMissingError, UnsupportedCombinationError

logger = logging.getLogger(__name__)

PLACEHOLDER_ID = "00000000-0000-0000-0000-000000000000"
PLACEHOLDER_VERSION = "1.0.0.0"


def bundled_templates_dir() -> Path:
    """Directory of template documents shipped with the package."""
    return Path(__file__).parent.parent / "data" / "templates"


def next_available_path(directory: Path, file_name: str) -> Path:
    """First of ``Name.ext``, ``Name0.ext``, ``Name1.ext``, ... that does not exist."""
    candidate = directory / file_name
    stem, suffix = candidate.stem, candidate.suffix
    counter = 0
    while candidate.exists():
        candidate = directory / f"{stem}{counter}{suffix}"
        counter += 1
    return candidate


def substitute_placeholders(part_text: str, manifest_id: str, version: str) -> str:
    """Replace every literal placeholder id and version in the text."""
    return part_text.replace(PLACEHOLDER_ID, manifest_id).replace(PLACEHOLDER_VERSION, version)


def generate_template_file(
    application: str,
    kind: ManifestKind,
    manifest_id: str,
    version: str,
    *,
    cwd: Path,
    templates_dir: Path,
) -> Path:
    """Write a new document seeded with the add-in id and version.

    Args:
        application: Application name, e.g. "excel"
        kind: Add-in kind from the manifest
        manifest_id: Add-in GUID to embed
        version: Add-in version to embed
        cwd: Directory the document is written to
        templates_dir: Directory containing the template documents

    Returns:
        Path of the generated document; never an existing file

    Raises:
        UnsupportedCombinationError: If the application has no template for kind
        TemplatePartMissingError: If the template lacks the web extension part
    """
    profile = get_profile(application)
    template = profile.template_for(kind) if profile is not None else None
    if template is None:
        raise UnsupportedCombinationError(
            f"The add-in type {kind.value} specified in the manifest is not supported for",
            application,
        )

    destination = next_available_path(cwd, template.template_name)
    source = templates_dir / template.template_name
    logger.debug("Generating %s from %s", destination, source)

    with zipfile.ZipFile(source) as template_zip:
        if template.web_extension_path not in template_zip.namelist():
            raise TemplatePartMissingError(
                f"Template {template.template_name} does not contain",
                template.web_extension_path,
            )

        part_text = template_zip.read(template.web_extension_path).decode("utf-8")
        patched = substitute_placeholders(part_text, manifest_id, version)

        with zipfile.ZipFile(destination, "w", zipfile.ZIP_DEFLATED) as output_zip:
            for info in template_zip.infolist():
                if info.filename == template.web_extension_path:
                    output_zip.writestr(info, patched.encode("utf-8"))
                else:
                    output_zip.writestr(info, template_zip.read(info))

    return destination
