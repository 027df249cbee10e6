"""Abstract base classes for extractor collaborators."""

from i18n_extractor.interfaces.classifier import BaseLineClassifier, LineMetadata, LineRole
from i18n_extractor.interfaces.prompter import BasePrompter, Decision
from i18n_extractor.interfaces.writers import (
    BaseCatalogWriter,
    BaseDocumentWriter,
    BaseTaggingWriter,
)

__all__ = [
    "BaseLineClassifier",
    "LineMetadata",
    "LineRole",
    "BasePrompter",
    "Decision",
    "BaseCatalogWriter",
    "BaseDocumentWriter",
    "BaseTaggingWriter",
]
