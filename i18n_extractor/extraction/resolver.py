"""Decides what happens to a line with (or without) a candidate replacement."""

from i18n_extractor.interfaces.prompter import BasePrompter, Decision


def resolve_action(
    has_candidate: bool,
    original: str,
    replacement: str,
    interactive: bool,
    prompter: BasePrompter | None = None,
) -> Decision:
    """Resolve the action for one line.

    Without a candidate the prompter is never consulted. Non-interactive
    runs accept every candidate.

    Args:
        has_candidate: Whether the finder proposed a replacement.
        original: The line content as it is now.
        replacement: The proposed rewritten line.
        interactive: Ask the prompter instead of accepting automatically.
        prompter: Decision source for interactive runs.

    Returns:
        The Decision for the line.

    Raises:
        ValueError: If interactive is set but no prompter was given.
    """
    if not has_candidate:
        return Decision.NO_REPLACE
    if not interactive:
        return Decision.REPLACE
    if prompter is None:
        raise ValueError("interactive resolution requires a prompter")
    return Decision(prompter.ask_user(original, replacement))
