"""Line whitespace handling."""

import re

_LEADING_WHITESPACE = re.compile(r"([ \t]*)(.*)", re.DOTALL)


def split_whitespace(line: str) -> tuple[str, str]:
    """Split a line into its indentation and its content.

    The trailing newline must already be stripped by the caller. Joining
    the two parts back together always yields the input unchanged.

    Args:
        line: A single template line.

    Returns:
        (whitespace, content) where whitespace is the leading run of
        spaces and tabs (possibly empty).
    """
    match = _LEADING_WHITESPACE.match(line)
    return match.group(1), match.group(2)


def split_lines(text: str) -> list[str]:
    """Split a document on newlines, without a phantom line after the last one.

    Carriage returns are left on the lines; consumers strip them.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
