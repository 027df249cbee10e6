"""Per-line extraction state machine.

The LineProcessor is the only owner of a document's rewritten body and
catalog map while it is being processed.
"""

import logging

from i18n_extractor.extraction.finder import find_text
from i18n_extractor.extraction.models import (
    Line,
    LineOutcome,
    LineResult,
    ReplacementRecord,
)
from i18n_extractor.extraction.normalizer import split_whitespace
from i18n_extractor.extraction.replacer import TextReplacer
from i18n_extractor.extraction.resolver import resolve_action
from i18n_extractor.interfaces.prompter import BasePrompter, Decision
from i18n_extractor.interfaces.writers import BaseTaggingWriter

logger = logging.getLogger(__name__)


class LineProcessor:
    """Runs normalize -> find -> replace -> resolve -> apply for each line.

    Attributes:
        path: Template path recorded on replacements and tags.
        interactive: Whether candidates are confirmed through the prompter.
        body: Output lines, one per processed input line.
        catalog: Line number -> ReplacementRecord, in processing order.
    """

    def __init__(
        self,
        path: str,
        replacer: TextReplacer,
        tagging_writer: BaseTaggingWriter,
        prompter: BasePrompter | None = None,
        interactive: bool = False,
    ) -> None:
        self.path = path
        self.interactive = interactive
        self._replacer = replacer
        self._tagging_writer = tagging_writer
        self._prompter = prompter
        self.body: list[str] = []
        self.catalog: dict[int, ReplacementRecord] = {}

    def process_line(self, line: Line) -> LineResult:
        """Process a single line and fold the outcome into body and catalog.

        Args:
            line: The line to process.

        Returns:
            LineResult telling whether a replacement was proposed and
            whether the rest of the document should be passed through.

        Raises:
            NotDefinedLineType: If the line's role is not recognised.
        """
        whitespace, content = split_whitespace(line.raw.rstrip("\r\n"))
        found = find_text(content, line.metadata, line.number)

        if found is not None:
            record = self._replacer.replace(content, found, whitespace, self.path)
            replacement = record.modified_line
        else:
            record = ReplacementRecord.empty()
            replacement = f"{whitespace}{content}"

        decision = resolve_action(
            found is not None,
            f"{whitespace}{content}",
            replacement,
            self.interactive,
            self._prompter,
        )
        proposed = found is not None

        match decision:
            case Decision.TAG:
                self._tagging_writer.write(self.path, line.number)
                self.body.append(f"{whitespace}{content}")
            case Decision.NEXT:
                logger.info(f"{self.path}: stopping at line {line.number}, passing the rest through")
                return LineResult(proposed=proposed, outcome=LineOutcome.ABORT)
            case Decision.REPLACE:
                self._replacer.commit(record)
                self.catalog[line.number] = record
                self.body.append(replacement)
            case Decision.NO_REPLACE:
                self.catalog[line.number] = ReplacementRecord.empty()
                self.body.append(f"{whitespace}{content}")

        return LineResult(proposed=proposed)

    def pass_through(self, line: Line) -> None:
        """Append a line unchanged, without any analysis."""
        self.body.append(line.raw.rstrip("\r\n"))
