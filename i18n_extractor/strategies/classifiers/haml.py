"""HAML line classifier.

Assigns every line of a HAML template one of the LineRole values and
checks the structural rules a HAML parser enforces: consistent
indentation, legal nesting and balanced attribute lists.
"""

import logging
import re
from typing import Any

from i18n_extractor.core.exceptions import InvalidSyntax
from i18n_extractor.extraction.normalizer import split_lines, split_whitespace
from i18n_extractor.interfaces.classifier import BaseLineClassifier, LineMetadata, LineRole

logger = logging.getLogger(__name__)

TAG_NAME = re.compile(r"%([-:\w]+)")
CLASS_OR_ID = re.compile(r"[.#][-:\w]+")
FILTER_NAME = re.compile(r":(\w+)")
BRACKETS = {"{": "}", "(": ")", "[": "]"}
BLOCK_OPENER = re.compile(r"\bdo\s*(\|[^|]*\|)?\s*$")

# Roles whose indented children belong to the line itself
BLOCK_ROLES = (LineRole.HAML_COMMENT, LineRole.FILTER)


class _Unbalanced(Exception):
    pass


def _skip_balanced(content: str, pos: int) -> int:
    """Return the offset just past the bracket group opening at pos."""
    stack: list[str] = []
    quote: str | None = None
    i = pos
    while i < len(content):
        ch = content[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in BRACKETS:
            stack.append(BRACKETS[ch])
        elif ch in ")]}":
            if not stack or stack.pop() != ch:
                raise _Unbalanced
            if not stack:
                return i + 1
        i += 1
    raise _Unbalanced


class HamlLineClassifier(BaseLineClassifier):
    """Classifies and validates HAML templates line by line."""

    def classify(self, text: str) -> dict[int, LineMetadata]:
        """Classify every line of a HAML document.

        Lines nested under a ``-#`` comment or a ``:filter`` take the role
        of the block they belong to and are flagged ``nested``.

        Args:
            text: The full document text.

        Returns:
            Mapping of 1-based line number to LineMetadata.
        """
        result: dict[int, LineMetadata] = {}
        block_role: LineRole | None = None
        block_indent = 0

        for line_no, raw in enumerate(split_lines(text), start=1):
            whitespace, content = split_whitespace(raw.rstrip("\r"))

            if block_role is not None:
                if not content.strip() or len(whitespace) > block_indent:
                    result[line_no] = LineMetadata(block_role, {"text": content, "nested": True})
                    continue
                block_role = None

            metadata = self.classify_content(content)
            if metadata.role in BLOCK_ROLES:
                block_role = metadata.role
                block_indent = len(whitespace)
            result[line_no] = metadata

        return result

    def classify_content(self, content: str) -> LineMetadata:
        """Classify a single line with its indentation already removed."""
        if not content.strip():
            return LineMetadata(LineRole.PLAIN, {"text": ""})
        if content.startswith("!!!"):
            return LineMetadata(LineRole.DOCTYPE, {"text": content[3:].strip()})
        if content.startswith("-#"):
            return LineMetadata(LineRole.HAML_COMMENT, {"text": content[2:].strip()})
        if content.startswith("-"):
            return self._script(LineRole.SILENT_SCRIPT, content, 1)
        if content.startswith(("!=", "&=")):
            return self._script(LineRole.SCRIPT, content, 2)
        if content.startswith(("=", "~")):
            return self._script(LineRole.SCRIPT, content, 1)
        if content.startswith("/"):
            return LineMetadata(LineRole.COMMENT, {"text": content[1:].strip()})
        if TAG_NAME.match(content) or CLASS_OR_ID.match(content):
            return self._tag(content)
        if FILTER_NAME.match(content):
            return LineMetadata(LineRole.FILTER, {"name": FILTER_NAME.match(content).group(1)})
        return LineMetadata(LineRole.PLAIN, {"text": content})

    @staticmethod
    def _script(role: LineRole, content: str, marker_length: int) -> LineMetadata:
        rest = content[marker_length:]
        code = rest.strip()
        return LineMetadata(role, {"text": code, "text_start": marker_length + len(rest) - len(rest.lstrip())})

    @staticmethod
    def _tag(content: str) -> LineMetadata:
        value: dict[str, Any] = {
            "name": "div",
            "value": None,
            "parse": False,
            "self_closing": False,
        }
        pos = 0
        name_match = TAG_NAME.match(content)
        if name_match:
            value["name"] = name_match.group(1)
            pos = name_match.end()

        while shortcut := CLASS_OR_ID.match(content, pos):
            pos = shortcut.end()

        try:
            while pos < len(content) and content[pos] in BRACKETS:
                pos = _skip_balanced(content, pos)
        except _Unbalanced:
            value["error"] = "unbalanced attribute brackets"
            return LineMetadata(LineRole.TAG, value)

        while pos < len(content) and content[pos] in "<>":
            pos += 1

        if content.startswith("/", pos):
            value["self_closing"] = True
            pos += 1
        elif content.startswith(("!=", "&="), pos):
            value["parse"] = True
            pos += 2
        elif content.startswith(("=", "~"), pos):
            value["parse"] = True
            pos += 1

        value["prefix_end"] = pos
        rest = content[pos:]
        if rest.strip():
            value["value"] = rest.strip()
            value["value_start"] = pos + len(rest) - len(rest.lstrip())
        return LineMetadata(LineRole.TAG, value)

    def validate(self, text: str, path: str = "") -> None:
        """Check indentation, nesting and attribute syntax.

        Args:
            text: The full document text.
            path: Document path, used in error messages.

        Raises:
            InvalidSyntax: On the first structural error found.
        """
        metadata = self.classify(text)
        indent_unit: str | None = None
        prev_level = 0
        prev: LineMetadata | None = None

        for line_no, raw in enumerate(split_lines(text), start=1):
            whitespace, content = split_whitespace(raw.rstrip("\r"))
            line = metadata[line_no]
            if not content.strip() or line.value.get("nested"):
                continue

            if line.value.get("error"):
                raise InvalidSyntax(path, line.value["error"], line_no)

            level = 0
            if whitespace:
                if " " in whitespace and "\t" in whitespace:
                    raise InvalidSyntax(path, "indentation can't use both tabs and spaces", line_no)
                if prev is None:
                    raise InvalidSyntax(path, "indenting at the beginning of the document is illegal", line_no)
                if indent_unit is None:
                    indent_unit = whitespace
                if whitespace[0] != indent_unit[0]:
                    raise InvalidSyntax(path, "inconsistent indentation: mixed tabs and spaces", line_no)
                if len(whitespace) % len(indent_unit):
                    raise InvalidSyntax(
                        path,
                        f"inconsistent indentation: {len(whitespace)} characters used, "
                        f"expected a multiple of {len(indent_unit)}",
                        line_no,
                    )
                level = len(whitespace) // len(indent_unit)

            if level > prev_level + 1:
                raise InvalidSyntax(
                    path, f"the line was indented {level - prev_level} levels deeper than the previous line", line_no
                )
            if level == prev_level + 1 and prev is not None:
                self._check_nesting(prev, path, line_no)

            prev_level = level
            prev = line

        logger.debug(f"Validated {path or '<string>'}: {len(metadata)} lines")

    @staticmethod
    def _check_nesting(parent: LineMetadata, path: str, line_no: int) -> None:
        if parent.role is LineRole.PLAIN:
            raise InvalidSyntax(path, "illegal nesting: nesting within plain text is illegal", line_no)
        if parent.role is LineRole.DOCTYPE:
            raise InvalidSyntax(path, "illegal nesting: nesting within a header command is illegal", line_no)
        if parent.role is LineRole.TAG:
            if parent.value.get("self_closing"):
                raise InvalidSyntax(path, "illegal nesting: nesting within a self-closing tag is illegal", line_no)
            value = parent.value.get("value")
            if value and not (parent.value.get("parse") and BLOCK_OPENER.search(value)):
                raise InvalidSyntax(
                    path,
                    f"illegal nesting: content can't be both given on the same line as "
                    f"%{parent.value['name']} and nested within it",
                    line_no,
                )

    @property
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""
        return {".haml"}
