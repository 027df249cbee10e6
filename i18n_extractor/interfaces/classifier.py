"""Abstract base class for template line classifiers.

A classifier knows the template grammar. It assigns every line a
structural role and checks that a whole document is well formed. The
extraction pipeline only consumes its output, so other template
languages can be supported by adding another strategy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LineRole(str, Enum):
    """Structural role of a single template line."""

    PLAIN = "plain"
    SCRIPT = "script"
    SILENT_SCRIPT = "silent_script"
    HAML_COMMENT = "haml_comment"
    TAG = "tag"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    FILTER = "filter"
    ROOT = "root"


@dataclass(frozen=True)
class LineMetadata:
    """Structural information about one line.

    Attributes:
        role: The line's role. Classifiers may hand back arbitrary values
            here; the finder rejects anything that is not a LineRole.
        value: Role-specific details. Tags carry ``name``, ``value``,
            ``parse`` and ``self_closing``; plain and script lines carry
            ``text``.
    """

    role: Any
    value: dict[str, Any] = field(default_factory=dict)


class BaseLineClassifier(ABC):
    """Abstract base class for template classification strategies.

    Example:
        ```python
        class HamlLineClassifier(BaseLineClassifier):
            def classify(self, text: str) -> dict[int, LineMetadata]:
                ...
        ```
    """

    @abstractmethod
    def classify(self, text: str) -> dict[int, LineMetadata]:
        """Classify every line of a document.

        Args:
            text: The full document text.

        Returns:
            Mapping of 1-based line number to LineMetadata, covering
            every line of the document.
        """
        ...

    @abstractmethod
    def validate(self, text: str, path: str = "") -> None:
        """Check that a document is well formed.

        Args:
            text: The full document text.
            path: Document path, used in error messages.

        Raises:
            InvalidSyntax: If the document cannot be parsed.
        """
        ...

    @property
    @abstractmethod
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""
        ...

    def supports_file(self, file_path: str) -> bool:
        """Check if this classifier handles the given file.

        Args:
            file_path: The path to the file to check.

        Returns:
            True if the file extension is supported, False otherwise.
        """
        import os

        _, ext = os.path.splitext(file_path)
        return ext.lower() in self.supported_extensions
