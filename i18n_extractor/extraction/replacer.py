"""Key generation and line rewriting.

Turns a TextMatch into a ReplacementRecord: picks a catalog key for the
text and rewrites the line so the text is looked up through the
translate helper instead.
"""

import hashlib
import logging
import re
import unicodedata

from i18n_extractor.extraction.finder import INTERPOLATION
from i18n_extractor.extraction.models import ReplacementRecord, TextMatch

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SIMPLE_EXPRESSION = re.compile(r"^@{0,2}[A-Za-z_][\w.]*[?!]?$")


def _digest(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def slugify(text: str, max_length: int = 40) -> str:
    """Lower-case ASCII slug of text, words joined by underscores.

    Args:
        text: Any text.
        max_length: Maximum slug length.

    Returns:
        The slug, possibly empty when text has no ASCII letters or digits.
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("_", folded.lower()).strip("_")
    return slug[:max_length].rstrip("_")


class KeyGenerator:
    """Derives catalog keys from text, unique within one catalog scope.

    Keys depend only on the text and on the keys already registered, so
    the same template and catalog always produce the same keys.

    Attributes:
        max_length: Maximum length of the slug part of a key.
    """

    def __init__(self, max_length: int = 40, existing: dict[str, str] | None = None) -> None:
        """Initialize the generator.

        Args:
            max_length: Maximum slug length.
            existing: key -> text entries already present in the scope.
        """
        self.max_length = max_length
        self._registry: dict[str, str] = dict(existing or {})

    def key_for(self, text: str) -> str:
        """Return the key text would get. Does not register it."""
        base = slugify(text, self.max_length) or f"text_{_digest(text)[:8]}"
        owner = self._registry.get(base)
        if owner is None or owner == text:
            return base
        return f"{base}_{_digest(text)[:6]}"

    def register(self, key: str, text: str) -> None:
        """Reserve key for text in this scope."""
        self._registry[key] = text

    @property
    def registry(self) -> dict[str, str]:
        return dict(self._registry)


class TextReplacer:
    """Builds replacement records for matched text.

    Example:
        ```python
        replacer = TextReplacer(KeyGenerator())
        record = replacer.replace("%p Hello", match, "  ", "show.html.haml")
        record.modified_line  # "  %p= t('.hello')"
        ```
    """

    def __init__(self, key_generator: KeyGenerator, helper: str = "t") -> None:
        self._keys = key_generator
        self._helper = helper

    @property
    def key_generator(self) -> KeyGenerator:
        return self._keys

    def replace(self, content: str, match: TextMatch, indent: str, path: str) -> ReplacementRecord:
        """Rewrite one line around a match.

        Free text becomes evaluated output (``= t('.key')``, keeping any tag
        prefix intact); a string literal in code is swapped for the key
        reference in place. Everything outside the matched span is kept.

        Args:
            content: The line without indentation.
            match: What the finder found on the line.
            indent: The line's indentation, prepended to the result.
            path: Template path stored on the record.

        Returns:
            A fully populated ReplacementRecord.
        """
        interpolates = match.kind == "text" or content[match.start:match.start + 1] == '"'
        if interpolates:
            catalog_text, arguments = self._extract_interpolations(match.text)
        else:
            catalog_text, arguments = match.text, []

        key = self._keys.key_for(catalog_text)
        reference = self.key_reference(key, arguments)

        if match.kind == "text":
            prefix = content[:match.start].rstrip()
            modified = f"{prefix}= {reference}{content[match.end:]}"
        else:
            modified = f"{content[:match.start]}{reference}{content[match.end:]}"

        logger.debug(f"{path}: {match.text!r} -> {reference}")
        return ReplacementRecord(
            key_name=key,
            replaced_text=catalog_text,
            modified_line=f"{indent}{modified}",
            path=path,
        )

    def commit(self, record: ReplacementRecord) -> None:
        """Register an accepted record's key so later lines cannot reuse it."""
        if not record.is_empty:
            self._keys.register(record.key_name, record.replaced_text)

    def key_reference(self, key: str, arguments: list[tuple[str, str]] | None = None) -> str:
        """Ruby call that looks the key up, e.g. ``t('.key', name: (name))``."""
        args = "".join(f", {name}: ({expr})" for name, expr in arguments or [])
        return f"{self._helper}('.{key}'{args})"

    @staticmethod
    def _extract_interpolations(text: str) -> tuple[str, list[tuple[str, str]]]:
        """Replace ``#{expr}`` with ``%{name}`` placeholders.

        Returns:
            The catalog text and the (name, expression) pairs to pass along.
        """
        arguments: list[tuple[str, str]] = []
        names_by_expr: dict[str, str] = {}

        def placeholder(m: re.Match) -> str:
            expr = m.group("expr").strip()
            if expr not in names_by_expr:
                name = slugify(expr.lstrip("@")) if _SIMPLE_EXPRESSION.match(expr) else ""
                taken = {n for n, _ in arguments}
                if not name or name in taken:
                    name = f"var_{len(arguments) + 1}"
                names_by_expr[expr] = name
                arguments.append((name, expr))
            return f"%{{{names_by_expr[expr]}}}"

        return INTERPOLATION.sub(placeholder, text), arguments
