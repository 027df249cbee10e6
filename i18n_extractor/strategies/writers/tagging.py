"""Append-only list of lines the user chose to leave as-is."""

import logging
from pathlib import Path

from i18n_extractor.interfaces.writers import BaseTaggingWriter

logger = logging.getLogger(__name__)


class TaggingFileWriter(BaseTaggingWriter):
    """Appends ``path:line`` entries to a tag file."""

    def __init__(self, tag_file: Path) -> None:
        self.tag_file = Path(tag_file)

    def write(self, path: str, line_no: int) -> None:
        self.tag_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.tag_file, "a", encoding="utf-8") as f:
            f.write(f"{path}:{line_no}\n")
        logger.debug(f"Tagged {path}:{line_no} in {self.tag_file}")
