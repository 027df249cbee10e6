"""Persistence interfaces.

Writers receive the finished results of one document. Nothing is
written until the whole document has been processed and validated.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseDocumentWriter(ABC):
    """Persists a rewritten template body."""

    @abstractmethod
    def write(self, body: str) -> str:
        """Write the rewritten body.

        Args:
            body: Full rewritten document text.

        Returns:
            Path of the file that was written.
        """


class BaseCatalogWriter(ABC):
    """Merges extracted text into a persisted key -> text catalog."""

    @abstractmethod
    def write(self, path: str, catalog: dict[int, Any]) -> str:
        """Merge one document's catalog map into the store.

        Args:
            path: Path of the template the catalog belongs to.
            catalog: Line number -> ReplacementRecord mapping. Sentinel
                records (no key) are skipped.

        Returns:
            Path of the catalog file that was written.
        """

    @abstractmethod
    def existing_keys(self, path: str) -> dict[str, str]:
        """Return the key -> text entries already stored for a template.

        Args:
            path: Path of the template whose scope to read.

        Returns:
            Mapping of key to text, empty if the scope has no entries.
        """


class BaseTaggingWriter(ABC):
    """Records lines the user chose to leave untranslated."""

    @abstractmethod
    def write(self, path: str, line_no: int) -> None:
        """Append one tagged line.

        Args:
            path: Template path.
            line_no: 1-based line number.
        """
