"""External manifest validation.

Publishing rules for manifests are owned by the Office add-in tooling, so the
validator is run as an external command rather than reimplemented here.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from office_toolbox.core.errors import ValidatorError
from office_toolbox.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

DEFAULT_VALIDATOR_COMMAND: tuple[str, ...] = (
    "npx",
    "--yes",
    "office-addin-manifest",
    "validate",
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one manifest."""

    is_valid: bool
    output: str


class ManifestValidator(ABC):
    """Abstract interface for validating a manifest against publishing rules."""

    @abstractmethod
    def validate(self, manifest_path: Path) -> ValidationResult:
        """Validate the manifest.

        Raises:
            ValidatorError: If the validator itself could not be run
        """
        ...


class RealManifestValidator(ManifestValidator):
    """Runs the office-addin-manifest validator through npx."""

    def __init__(self, command: tuple[str, ...] = DEFAULT_VALIDATOR_COMMAND) -> None:
        self._command = command

    def validate(self, manifest_path: Path) -> ValidationResult:
        try:
            result = run_subprocess_with_context(
                [*self._command, str(manifest_path)],
                operation_context="validate the manifest",
                check=False,
            )
        except RuntimeError as e:
            raise ValidatorError(
                "The manifest validator could not be run. Make sure Node.js and npx are installed"
            ) from e

        logger.debug("Validator exited with %d", result.returncode)
        output = "\n".join(part for part in (result.stdout.strip(), result.stderr.strip()) if part)
        return ValidationResult(is_valid=result.returncode == 0, output=output)
