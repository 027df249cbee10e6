"""Drives the line processor over a whole document."""

import logging
from collections.abc import Sequence

from i18n_extractor.extraction.models import Line, LineOutcome
from i18n_extractor.extraction.processor import LineProcessor
from i18n_extractor.interfaces.prompter import BasePrompter

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """Builds the rewritten body of one document.

    After the processor asks to abort, the remaining lines are copied
    verbatim; nothing past that point is matched or prompted for.
    """

    def __init__(self, processor: LineProcessor, prompter: BasePrompter | None = None) -> None:
        self._processor = processor
        self._prompter = prompter
        self.aborted_at: int | None = None
        self.proposed_count = 0

    def assemble(self, lines: Sequence[Line]) -> str:
        """Process every line and return the rewritten document.

        Args:
            lines: The document's lines, numbered from 1 in order.

        Returns:
            The body joined with newlines, with a trailing newline.
        """
        for index, line in enumerate(lines):
            result = self._processor.process_line(line)
            if result.proposed:
                self.proposed_count += 1
            if result.outcome is LineOutcome.ABORT:
                self.aborted_at = line.number
                if self._prompter is not None:
                    self._prompter.moving_to_next_file()
                for rest in lines[index:]:
                    self._processor.pass_through(rest)
                break

        logger.debug(
            f"Assembled {len(self._processor.body)} lines, "
            f"{self.proposed_count} replacements proposed"
        )
        return "\n".join(self._processor.body) + "\n"
