"""YAML translation catalog writer.

Merges extracted text into a Rails-style locale file. Keys are scoped by
the template's location under the views directory, matching how a lazy
``t('.key')`` lookup resolves:

    app/views/users/_form.html.haml  ->  en.users.form.<key>
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from i18n_extractor.core.exceptions import NotADirectory
from i18n_extractor.interfaces.writers import BaseCatalogWriter

logger = logging.getLogger(__name__)


class YamlCatalogWriter(BaseCatalogWriter):
    """Reads and merges ``<locale>.yml`` catalogs.

    Attributes:
        locale: Top-level namespace of the catalog.
        yaml_file: Catalog file location.
        views_dir: Root that template scopes are computed from.
    """

    def __init__(self, locale: str, yaml_file: Path, views_dir: Path) -> None:
        self.locale = locale
        self.yaml_file = Path(yaml_file)
        self.views_dir = Path(views_dir)

    def scope_for(self, path: str) -> list[str]:
        """Catalog scope segments for a template path.

        Args:
            path: Template path.

        Returns:
            Directory segments plus the template name without extensions
            and without the partial underscore.
        """
        template = Path(path)
        try:
            relative = template.resolve().relative_to(self.views_dir.resolve())
        except ValueError:
            relative = Path(template.name) if template.is_absolute() else template

        parts = [p for p in relative.parts[:-1] if p not in ("", ".", "..")]
        name = relative.name.split(".", 1)[0].lstrip("_")
        return [*parts, name] if name else parts

    def existing_keys(self, path: str) -> dict[str, str]:
        """Return the key -> text entries already stored for a template."""
        node: Any = self._load().get(self.locale, {})
        for segment in self.scope_for(path):
            if not isinstance(node, dict):
                return {}
            node = node.get(segment, {})
        if not isinstance(node, dict):
            return {}
        return {str(k): v for k, v in node.items() if isinstance(v, str)}

    def write(self, path: str, catalog: dict[int, Any]) -> str:
        """Merge a document's replacements into the catalog file.

        Args:
            path: Template the catalog belongs to.
            catalog: Line number -> ReplacementRecord mapping.

        Returns:
            The catalog file path.

        Raises:
            NotADirectory: If the catalog's parent exists but is a file.
        """
        data = self._load()
        node = data.get(self.locale)
        if not isinstance(node, dict):
            if node is not None:
                logger.warning(f"Replacing non-mapping locale entry {self.locale!r} in {self.yaml_file}")
            node = data[self.locale] = {}
        for segment in self.scope_for(path):
            child = node.get(segment)
            if not isinstance(child, dict):
                if child is not None:
                    logger.warning(f"Replacing non-mapping catalog entry {segment!r} in {self.yaml_file}")
                child = node[segment] = {}
            node = child

        added = 0
        for record in catalog.values():
            if record.key_name is None:
                continue
            node[record.key_name] = record.replaced_text
            added += 1

        parent = self.yaml_file.parent
        if parent.exists() and not parent.is_dir():
            raise NotADirectory(str(parent))
        parent.mkdir(parents=True, exist_ok=True)

        with open(self.yaml_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False, default_flow_style=False)

        logger.info(f"Catalog updated: {self.yaml_file} ({added} keys for {path})")
        return str(self.yaml_file)

    def _load(self) -> dict[str, Any]:
        if not self.yaml_file.exists():
            return {}
        with open(self.yaml_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
