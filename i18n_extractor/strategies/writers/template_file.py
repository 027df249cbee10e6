"""Writes rewritten templates back to disk."""

import logging
from pathlib import Path

from i18n_extractor.interfaces.writers import BaseDocumentWriter

logger = logging.getLogger(__name__)

DUMP_SUFFIX = ".i18n-extractor.haml"


class TemplateFileWriter(BaseDocumentWriter):
    """Persists a template body according to the output mode.

    ``overwrite`` replaces the template in place; ``dump`` leaves it alone
    and writes ``<name>.i18n-extractor.haml`` next to it.
    """

    def __init__(self, path: str, mode: str = "overwrite") -> None:
        if mode not in ("overwrite", "dump"):
            raise ValueError(f"Unknown output mode: {mode}. Valid options: 'overwrite', 'dump'")
        self.path = Path(path)
        self.mode = mode

    @property
    def output_path(self) -> Path:
        if self.mode == "overwrite":
            return self.path
        name = self.path.name
        stem = name[: -len(".haml")] if name.endswith(".haml") else name
        return self.path.with_name(stem + DUMP_SUFFIX)

    def write(self, body: str) -> str:
        """Write the body and return where it went."""
        target = self.output_path
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(body)
        logger.info(f"Template written: {target} (mode={self.mode})")
        return str(target)
