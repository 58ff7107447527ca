"""Error taxonomy for office-toolbox operations.

Every failure raised by the core carries a generic ``message`` and an optional
``detail`` (usually a filesystem path). The CLI error boundary shows both to the
user but only records ``message`` in diagnostics, so paths never end up in logs.
"""


class ToolboxError(Exception):
    """Base class for all expected office-toolbox failures."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")


class ManifestNotFoundError(ToolboxError):
    """The manifest path does not resolve to a file."""


class ManifestReadError(ToolboxError):
    """The manifest file exists but could not be read."""


class MalformedXmlError(ToolboxError):
    """The manifest is not well-formed XML."""


class SchemaError(ToolboxError):
    """The manifest is missing a required element or attribute.

    ``reason`` is one of "missing root element", "missing type attribute",
    "missing id" or "missing version".
    """

    def __init__(self, reason: str, detail: str | None = None) -> None:
        self.reason = reason
        super().__init__(f"Manifest schema error ({reason})", detail)


class InvalidIdError(ToolboxError):
    """The manifest Id is not a GUID."""


class UnsupportedApplicationError(ToolboxError):
    """The manifest or application cannot be handled by this tool."""


class UnsupportedKindError(ToolboxError):
    """The manifest xsi:type is neither TaskPaneApp nor ContentApp."""


class ConflictError(ToolboxError):
    """A different manifest with the same name is already registered."""


class NothingRemovedError(ToolboxError):
    """No registered manifest matched the path to remove."""


class HostNotInstalledError(ToolboxError):
    """The Office registry key is absent, so Office is not installed."""


class MissingArgumentError(ToolboxError):
    """A required argument was not supplied."""


class BackingStoreError(ToolboxError):
    """The registration store failed for a reason other than a missing host."""


class UnsupportedCombinationError(ToolboxError):
    """No template exists for the application and add-in kind."""


class TemplatePartMissingError(ToolboxError):
    """The template archive lacks the web extension part to patch."""


class ValidatorError(ToolboxError):
    """The external manifest validator could not be run."""
