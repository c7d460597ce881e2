"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from site_editor.document.model import Document


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Each handler converts a Document to its textual form. Handlers for
    formats that can be loaded back also implement ``loads``.
    """

    media_type: str = "text/plain; charset=utf-8"

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.json',))."""
        ...

    @abstractmethod
    def dumps(self, document: Document) -> str:
        """Render a document to text.

        Args:
            document: The Document to render

        Returns:
            The document in this handler's format
        """
        ...

    def loads(self, text: str) -> Document:
        """Parse text in this handler's format into a Document.

        Default implementation refuses; export-only formats keep it.
        """
        raise NotImplementedError(
            f"{type(self).__name__} cannot load documents"
        )

    def write(self, document: Document, path: Path) -> None:
        """Write a document to a file.

        Args:
            document: The Document to write
            path: Path to write the output file
        """
        path.write_text(self.dumps(document), encoding="utf-8")

    def read(self, path: Path) -> Document:
        """Load a document from a file.

        Args:
            path: Path to the input file

        Returns:
            The parsed Document
        """
        return self.loads(path.read_text(encoding="utf-8"))
