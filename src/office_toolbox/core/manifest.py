"""Parsing and validation of add-in manifest descriptors.

A manifest is an XML document whose root ``OfficeApp`` element declares the
add-in kind through ``xsi:type`` and carries ``Id`` and ``Version`` children:

    <OfficeApp xmlns="http://schemas.microsoft.com/office/appforoffice/1.1"
               xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
               xsi:type="TaskPaneApp">
      <Id>3AC6F6E0-9E0F-4B4B-9B3A-000000000001</Id>
      <Version>1.2.3.4</Version>
      ...
    </OfficeApp>

Checks run in a fixed order and the first failing one is reported, so a
document missing both ``Id`` and ``Version`` always fails on the id.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from office_toolbox.core.applications import MAIL_APP_TYPE, ManifestKind
from office_toolbox.core.errors import (
    InvalidIdError,
    MalformedXmlError,
    ManifestNotFoundError,
    ManifestReadError,
    SchemaError,
    UnsupportedApplicationError,
    UnsupportedKindError,
)

logger = logging.getLogger(__name__)

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSI_TYPE = f"{{{XSI_NAMESPACE}}}type"

_GUID_PATTERN = re.compile(r"[0-9A-F]{8}-?(?:[0-9A-F]{4}-?){3}[0-9A-F]{12}", re.IGNORECASE)


@dataclass(frozen=True)
class ManifestDescriptor:
    """The parts of a manifest needed to sideload it."""

    kind: ManifestKind
    id: str
    version: str


def is_guid(text: str) -> bool:
    """Return True if text is a GUID (8-4-4-4-12 hex digits, hyphens optional)."""
    return _GUID_PATTERN.fullmatch(text) is not None


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _first_child_text(element: ET.Element, name: str) -> str | None:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return (child.text or "").strip()
    return None


def _read_manifest_bytes(manifest_path: Path) -> bytes:
    if not manifest_path.is_file():
        raise ManifestNotFoundError("The manifest could not be found", str(manifest_path))
    try:
        return manifest_path.read_bytes()
    except OSError as e:
        raise ManifestReadError("Failed to read the manifest file", str(manifest_path)) from e


def parse_manifest(manifest_path: Path) -> ManifestDescriptor:
    """Parse a manifest file into its kind, id and version.

    Args:
        manifest_path: Path to the manifest XML file

    Returns:
        ManifestDescriptor extracted from the document

    Raises:
        ManifestNotFoundError: If the path is not a file
        ManifestReadError: If the file cannot be read
        MalformedXmlError: If the file is not well-formed XML
        SchemaError: If OfficeApp, xsi:type, Id or Version is missing
        InvalidIdError: If the Id is not a GUID
        UnsupportedApplicationError: If the manifest is for an Outlook (mail) add-in
        UnsupportedKindError: If xsi:type is not TaskPaneApp or ContentApp
    """
    data = _read_manifest_bytes(manifest_path)
    return parse_manifest_bytes(data, source=str(manifest_path))


def parse_manifest_bytes(data: bytes, source: str) -> ManifestDescriptor:
    """Parse manifest content; ``source`` names the document in error details."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        logger.debug("XML parse failure: %s", e)
        raise MalformedXmlError("Failed to parse the manifest file", source) from e

    if _local_name(root.tag) != "OfficeApp":
        raise SchemaError("missing root element", source)

    manifest_type = root.get(XSI_TYPE)
    if manifest_type is None:
        raise SchemaError("missing type attribute", source)

    manifest_id = _first_child_text(root, "Id")
    if manifest_id is None:
        raise SchemaError("missing id", source)

    version = _first_child_text(root, "Version")
    if version is None:
        raise SchemaError("missing version", source)

    if not is_guid(manifest_id):
        raise InvalidIdError(f"Invalid Id {manifest_id} in manifest file", source)

    if manifest_type == MAIL_APP_TYPE:
        raise UnsupportedApplicationError(
            "The manifest specified an Outlook add-in. "
            "Outlook add-ins are not supported by this tool"
        )

    kinds = {kind.value: kind for kind in ManifestKind}
    if manifest_type not in kinds:
        raise UnsupportedKindError(
            "The manifest must have xsi:type set to ContentApp or TaskPaneApp", source
        )

    return ManifestDescriptor(kind=kinds[manifest_type], id=manifest_id, version=version)
