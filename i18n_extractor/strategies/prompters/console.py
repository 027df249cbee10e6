"""Interactive prompter backed by rich."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from i18n_extractor.interfaces.prompter import BasePrompter, Decision

logger = logging.getLogger(__name__)

CHOICES: dict[str, Decision] = {
    "y": Decision.REPLACE,
    "n": Decision.NO_REPLACE,
    "t": Decision.TAG,
    "N": Decision.NEXT,
}


class ConsolePrompter(BasePrompter):
    """Asks the user about each proposed replacement on the terminal.

    Answers: ``y`` replace, ``n`` keep the line, ``t`` keep it and record
    it in the tag file, ``N`` stop and keep the rest of the file as-is.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask_user(self, original: str, replacement: str) -> Decision:
        self._console.print()
        self._console.print(f"[bold]Original:[/bold]     [red]{escape(original.strip())}[/red]", highlight=False)
        self._console.print(f"[bold]Replace with:[/bold] [green]{escape(replacement.strip())}[/green]", highlight=False)
        answer = Prompt.ask(
            "Replace? (y)es, (n)o, (t)ag as-is, (N)ext file",
            choices=list(CHOICES),
            default="y",
            show_choices=False,
            console=self._console,
        )
        decision = CHOICES[answer]
        logger.debug(f"User chose {decision.value}")
        return decision

    def moving_to_next_file(self) -> None:
        self._console.print("[yellow]Leaving the rest of this file untouched.[/yellow]")
