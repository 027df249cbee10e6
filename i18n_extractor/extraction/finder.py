"""Translatable text detection.

Each line role has its own rule. Rules live in an enum-keyed table that
is checked for completeness when the module is imported, so adding a
role without a rule fails immediately instead of on the first line of
that role.
"""

import logging
import re
from collections.abc import Callable

from i18n_extractor.core.exceptions import NotDefinedLineType
from i18n_extractor.extraction.models import TextMatch
from i18n_extractor.interfaces.classifier import LineMetadata, LineRole

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

# A quoted Ruby string literal; backslash escapes are honoured.
_STRING = r"(?P<lit>(?P<q>[\"'])(?P<body>(?:\\.|[^\\])*?)(?P=q))"

KEY_REFERENCE = re.compile(r"(?<![\w.])(?:I18n\.)?(?:t|translate)\s*\(")
INTERPOLATION = re.compile(r"#\{(?P<expr>[^{}]*)\}")
HTML_COMMENT = re.compile(r"^<!--.*-->$")
HTML_TAG = re.compile(r"<[^>]*>")
HTML_ENTITY = re.compile(r"&(?:\w+|#\d+|#x[0-9a-fA-F]+);")
ARRAY_LITERAL = re.compile(r"^\s*\[")

# Code-string rules in precedence order
LINK_HELPER = re.compile(r"\b(?:link_to_function|link_to|button_to)\s*\(?\s*" + _STRING)
FORM_SUBMIT = re.compile(r"\b[a-z_]\w*\.submit\s*\(?\s*" + _STRING)
FORM_LABEL = re.compile(r"\b[a-z_]\w*\.label\s*\(?\s*:\w+\s*,\s*" + _STRING)
WHOLE_STRING = re.compile(r"^\s*" + _STRING + r"\s*$")

CODE_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("link_helper", LINK_HELPER),
    ("form_submit", FORM_SUBMIT),
    ("form_label", FORM_LABEL),
    ("string_literal", WHOLE_STRING),
)

_UNESCAPE = re.compile(r"\\([\"'\\])")


def has_key_reference(text: str) -> bool:
    """Whether text already calls the translate helper."""
    return KEY_REFERENCE.search(text) is not None


def _is_human_text(text: str) -> bool:
    """Has letters outside interpolations, HTML tags and entities."""
    visible = HTML_ENTITY.sub("", HTML_TAG.sub("", INTERPOLATION.sub("", text)))
    return any(ch.isalpha() for ch in visible)


# =============================================================================
# Rule helpers
# =============================================================================


def _text_match(fragment: str, offset: int, role: LineRole) -> TextMatch | None:
    """Match free text (plain lines, inline tag values) starting at offset."""
    stripped = fragment.rstrip()
    text = stripped
    if text.startswith("\\"):
        text = text[1:].lstrip()
    if HTML_COMMENT.match(text) or not _is_human_text(text):
        return None
    return TextMatch(text=text, role=role, start=offset, end=offset + len(stripped), kind="text")


def _code_match(code: str, offset: int, role: LineRole) -> TextMatch | None:
    """Find a translatable string literal inside Ruby code."""
    if has_key_reference(code) or ARRAY_LITERAL.match(code):
        return None

    for rule_name, pattern in CODE_RULES:
        match = pattern.search(code)
        if match is None:
            continue
        text = _UNESCAPE.sub(r"\1", match.group("body"))
        if not _is_human_text(text):
            logger.debug(f"Rule {rule_name} matched non-text literal {text!r}")
            return None
        return TextMatch(
            text=text,
            role=role,
            start=offset + match.start("lit"),
            end=offset + match.end("lit"),
            kind="literal",
        )
    return None


def _locate(content: str, fragment: str, hint: int | None) -> int:
    """Offset of fragment within content, preferring the classifier's hint."""
    if hint is not None and content[hint:hint + len(fragment)] == fragment:
        return hint
    return content.rfind(fragment)


# =============================================================================
# Role rules
# =============================================================================


def _find_plain(content: str, metadata: LineMetadata) -> TextMatch | None:
    return _text_match(content, 0, LineRole.PLAIN)


def _find_tag(content: str, metadata: LineMetadata) -> TextMatch | None:
    value = metadata.value.get("value")
    if not value or not value.strip():
        return None

    offset = _locate(content, value, metadata.value.get("value_start"))
    if offset < 0:
        return None

    if metadata.value.get("parse"):
        return _code_match(value, offset, LineRole.TAG)
    return _text_match(value, offset, LineRole.TAG)


def _find_script(content: str, metadata: LineMetadata) -> TextMatch | None:
    code = metadata.value.get("text", "")
    if not code:
        return None
    offset = _locate(content, code, metadata.value.get("text_start"))
    if offset < 0:
        return None
    return _code_match(code, offset, LineRole.SCRIPT)


def _no_text(content: str, metadata: LineMetadata) -> TextMatch | None:
    return None


Rule = Callable[[str, LineMetadata], TextMatch | None]

RULES: dict[LineRole, Rule] = {
    LineRole.PLAIN: _find_plain,
    LineRole.SCRIPT: _find_script,
    LineRole.SILENT_SCRIPT: _no_text,
    LineRole.HAML_COMMENT: _no_text,
    LineRole.TAG: _find_tag,
    LineRole.COMMENT: _no_text,
    LineRole.DOCTYPE: _no_text,
    LineRole.FILTER: _no_text,
    LineRole.ROOT: _no_text,
}

_uncovered = set(LineRole) - set(RULES)
if _uncovered:
    raise RuntimeError(f"No finder rule for line roles: {sorted(r.value for r in _uncovered)}")


# =============================================================================
# Public API
# =============================================================================


def find_text(
    content: str,
    metadata: LineMetadata | None,
    line_no: int | None = None,
) -> TextMatch | None:
    """Find translatable text on a line.

    Args:
        content: The line without its indentation.
        metadata: Classifier output for the line.
        line_no: Line number, only used for errors and debug output.

    Returns:
        The first match by rule precedence, or None.

    Raises:
        NotDefinedLineType: If metadata is missing or its role is not a
            known LineRole.
    """
    if metadata is None:
        raise NotDefinedLineType(None, line_no)
    try:
        role = LineRole(metadata.role)
    except ValueError:
        raise NotDefinedLineType(metadata.role, line_no) from None

    result = RULES[role](content, metadata)
    logger.debug(f"Line {line_no} [{role.value}] {content!r} -> {result.text if result else None!r}")
    return result
