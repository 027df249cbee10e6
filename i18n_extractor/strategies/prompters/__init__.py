"""Concrete prompter implementations."""

from i18n_extractor.strategies.prompters.auto import AutoPrompter
from i18n_extractor.strategies.prompters.console import ConsolePrompter

__all__ = [
    "AutoPrompter",
    "ConsolePrompter",
]
