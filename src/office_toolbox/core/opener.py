"""Opening generated documents in their default application."""

from abc import ABC, abstractmethod
from pathlib import Path

import click


class DocumentOpener(ABC):
    """Abstract interface for handing a document to the desktop."""

    @abstractmethod
    def open(self, path: Path) -> None:
        """Open the document with the application registered for its type."""
        ...


class RealDocumentOpener(DocumentOpener):
    """Production implementation using click.launch()."""

    def open(self, path: Path) -> None:
        click.launch(str(path))
