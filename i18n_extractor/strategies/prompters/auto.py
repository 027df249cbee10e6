"""Non-interactive prompter: accepts every proposed replacement."""

import logging

from i18n_extractor.interfaces.prompter import BasePrompter, Decision

logger = logging.getLogger(__name__)


class AutoPrompter(BasePrompter):
    """Decision source for unattended runs."""

    def ask_user(self, original: str, replacement: str) -> Decision:
        return Decision.REPLACE

    def moving_to_next_file(self) -> None:
        logger.info("Passing the rest of the file through unchanged")
