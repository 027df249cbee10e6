"""Per-template extraction driver.

Reads one template, validates it, runs the line pipeline over it,
validates the result and only then hands body and catalog to the
writers. Nothing is written when either validation fails.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from i18n_extractor.core.exceptions import InvalidSyntax
from i18n_extractor.extraction.assembler import DocumentAssembler
from i18n_extractor.extraction.models import Line, ReplacementRecord
from i18n_extractor.extraction.normalizer import split_lines
from i18n_extractor.extraction.processor import LineProcessor
from i18n_extractor.extraction.replacer import KeyGenerator, TextReplacer
from i18n_extractor.interfaces.classifier import BaseLineClassifier
from i18n_extractor.interfaces.prompter import BasePrompter
from i18n_extractor.interfaces.writers import (
    BaseCatalogWriter,
    BaseDocumentWriter,
    BaseTaggingWriter,
)

log = structlog.get_logger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of processing one template.

    Attributes:
        path: The template path.
        body: The rewritten document text.
        catalog: Line number -> ReplacementRecord.
        proposed: Number of lines a replacement was proposed for.
        aborted_at: Line the user stopped at, or None.
        written: Paths written by the writers (empty on dry runs).
    """

    path: str
    body: str
    catalog: dict[int, ReplacementRecord]
    proposed: int = 0
    aborted_at: int | None = None
    written: list[str] = field(default_factory=list)

    @property
    def replacements(self) -> list[tuple[int, ReplacementRecord]]:
        """Applied replacements in line order."""
        return [(no, r) for no, r in self.catalog.items() if not r.is_empty]

    @property
    def aborted(self) -> bool:
        return self.aborted_at is not None


class TemplateExtractor:
    """Extracts hard-coded text from one template.

    Example:
        ```python
        factory = ComponentFactory(settings)
        result = factory.create_extractor("app/views/users/show.html.haml").run()
        ```
    """

    def __init__(
        self,
        path: str | Path,
        classifier: BaseLineClassifier,
        catalog_writer: BaseCatalogWriter,
        document_writer: BaseDocumentWriter,
        tagging_writer: BaseTaggingWriter,
        prompter: BasePrompter | None = None,
        interactive: bool = False,
        key_max_length: int = 40,
        translate_helper: str = "t",
        registry: list[Any] | None = None,
    ) -> None:
        """Read and validate the template.

        Args:
            path: Template to process.
            classifier: Classifies and validates the template grammar.
            catalog_writer: Receives the catalog map.
            document_writer: Receives the rewritten body.
            tagging_writer: Receives lines tagged to be left as-is.
            prompter: Decision source for interactive runs.
            interactive: Ask before every replacement.
            key_max_length: Maximum slug length of generated keys.
            translate_helper: Helper name used in key references.
            registry: Optional list this extractor appends itself to,
                for debugging.

        Raises:
            FileNotFoundError: If the template doesn't exist.
            InvalidSyntax: If the template is not well formed.
        """
        self.path = str(path)
        self.interactive = interactive
        self._classifier = classifier
        self._catalog_writer = catalog_writer
        self._document_writer = document_writer
        self._tagging_writer = tagging_writer
        self._prompter = prompter
        self._key_max_length = key_max_length
        self._translate_helper = translate_helper
        self._log = log.bind(path=self.path)

        template = Path(path)
        if not template.exists():
            raise FileNotFoundError(f"Template file not found: {path}")
        self.text = template.read_text(encoding="utf-8")
        self._validate(self.text, "original")

        if registry is not None:
            registry.append(self)

    def assign_replacements(self) -> ExtractionResult:
        """Run the line pipeline in memory.

        Returns:
            ExtractionResult with the rewritten body and catalog map.

        Raises:
            NotDefinedLineType: If the classifier left a line unclassified
                or returned an unknown role.
        """
        metadata = self._classifier.classify(self.text)
        lines = [
            Line(number=no, raw=raw, metadata=metadata.get(no))
            for no, raw in enumerate(split_lines(self.text), start=1)
        ]

        key_generator = KeyGenerator(
            max_length=self._key_max_length,
            existing=self._catalog_writer.existing_keys(self.path),
        )
        processor = LineProcessor(
            path=self.path,
            replacer=TextReplacer(key_generator, helper=self._translate_helper),
            tagging_writer=self._tagging_writer,
            prompter=self._prompter,
            interactive=self.interactive,
        )
        assembler = DocumentAssembler(processor, self._prompter)
        body = assembler.assemble(lines)

        result = ExtractionResult(
            path=self.path,
            body=body,
            catalog=processor.catalog,
            proposed=assembler.proposed_count,
            aborted_at=assembler.aborted_at,
        )
        self._log.info(
            "lines_processed",
            lines=len(lines),
            proposed=result.proposed,
            replaced=len(result.replacements),
            aborted_at=result.aborted_at,
        )
        return result

    def run(self, write: bool = True) -> ExtractionResult:
        """Extract, validate the rewritten template, then persist.

        Args:
            write: When False, stop after validation (dry run).

        Returns:
            The ExtractionResult, with ``written`` filled in.

        Raises:
            InvalidSyntax: If the rewritten template is not well formed.
        """
        result = self.assign_replacements()
        self._validate(result.body, "rewritten")

        if not write:
            return result

        if result.replacements:
            result.written.append(self._catalog_writer.write(self.path, result.catalog))
        result.written.append(self._document_writer.write(result.body))
        self._log.info("extraction_written", files=result.written)
        return result

    def _validate(self, text: str, stage: str) -> None:
        try:
            self._classifier.validate(text, self.path)
        except InvalidSyntax as e:
            self._log.error("validation_failed", stage=stage, reason=e.reason, line=e.line_no)
            raise
