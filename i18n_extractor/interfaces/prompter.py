"""User decision interfaces.

The extractor asks a prompter what to do with every proposed
replacement when running interactively.
"""

from abc import ABC, abstractmethod
from enum import Enum


class Decision(str, Enum):
    """What to do with a line that has a candidate replacement."""

    TAG = "tag"
    NEXT = "next"
    REPLACE = "replace"
    NO_REPLACE = "no_replace"


class BasePrompter(ABC):
    """Abstract base class for decision sources."""

    @abstractmethod
    def ask_user(self, original: str, replacement: str) -> Decision:
        """Decide on a single proposed replacement.

        Blocks until a decision is available.

        Args:
            original: The line content as it is now.
            replacement: The proposed rewritten line.

        Returns:
            The decision for this line.
        """

    @abstractmethod
    def moving_to_next_file(self) -> None:
        """Announce that the rest of the file is copied through unchanged."""
