"""Component Factory for strategy instantiation.

Wires classifiers, prompters and writers from Settings so the CLI (and
tests) can build a TemplateExtractor without knowing the concrete
strategy classes.
"""

import logging
from pathlib import Path
from typing import Any

from i18n_extractor.core.config import Settings, get_settings
from i18n_extractor.core.exceptions import NotADirectory
from i18n_extractor.extraction.extractor import TemplateExtractor
from i18n_extractor.interfaces.classifier import BaseLineClassifier
from i18n_extractor.interfaces.prompter import BasePrompter
from i18n_extractor.interfaces.writers import (
    BaseCatalogWriter,
    BaseDocumentWriter,
    BaseTaggingWriter,
)
from i18n_extractor.strategies.classifiers import HamlLineClassifier
from i18n_extractor.strategies.prompters import AutoPrompter, ConsolePrompter
from i18n_extractor.strategies.writers import (
    TaggingFileWriter,
    TemplateFileWriter,
    YamlCatalogWriter,
)

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating extractor components from configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings(), root="/srv/app")
        extractor = factory.create_extractor("app/views/users/show.html.haml")
        result = extractor.run()
        ```
    """

    def __init__(self, settings: Settings | None = None, root: str | Path | None = None) -> None:
        """Initialize the factory.

        Args:
            settings: Extractor settings. If None, uses global settings.
            root: Project root that relative paths in settings resolve
                against. Defaults to the working directory.

        Raises:
            NotADirectory: If root is given and is not a directory.
        """
        self._settings = settings or get_settings()
        if root is not None and not Path(root).is_dir():
            raise NotADirectory(str(root))
        self.root = Path(root) if root is not None else None
        self._classifier_cache: BaseLineClassifier | None = None
        self._prompter_cache: BasePrompter | None = None
        self._catalog_writer_cache: BaseCatalogWriter | None = None
        self._tagging_writer_cache: BaseTaggingWriter | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def resolve(self, path: str | Path) -> Path:
        """Resolve a settings path against the project root."""
        path = Path(path)
        if self.root is None or path.is_absolute():
            return path
        return self.root / path

    def get_classifier(self, classifier_type: str | None = None) -> BaseLineClassifier:
        """Get a line classifier.

        Args:
            classifier_type: Template language. Only ``haml`` is known.

        Returns:
            A BaseLineClassifier implementation instance.

        Raises:
            ValueError: If the classifier type is unknown.
        """
        if self._classifier_cache is None or classifier_type is not None:
            classifier_type = classifier_type or "haml"

            logger.debug(f"Instantiating classifier: {classifier_type}")

            match classifier_type:
                case "haml":
                    self._classifier_cache = HamlLineClassifier()
                case _:
                    raise ValueError(
                        f"Unknown classifier type: {classifier_type}. "
                        f"Valid options: 'haml'"
                    )

        return self._classifier_cache

    def get_prompter(self, interactive: bool | None = None) -> BasePrompter:
        """Get the decision source for replacements.

        Args:
            interactive: Ask on the console. If None, uses settings.

        Returns:
            ConsolePrompter for interactive runs, AutoPrompter otherwise.
        """
        if self._prompter_cache is None or interactive is not None:
            if interactive is None:
                interactive = self._settings.interactive
            logger.debug(f"Instantiating prompter (interactive={interactive})")
            self._prompter_cache = ConsolePrompter() if interactive else AutoPrompter()
        return self._prompter_cache

    def get_catalog_writer(self) -> BaseCatalogWriter:
        """Get the YAML catalog writer.

        Raises:
            NotADirectory: If the views directory exists but is a file.
        """
        if self._catalog_writer_cache is None:
            views_dir = self.resolve(self._settings.views_dir)
            if views_dir.exists() and not views_dir.is_dir():
                raise NotADirectory(str(views_dir))
            self._catalog_writer_cache = YamlCatalogWriter(
                locale=self._settings.locale,
                yaml_file=self.resolve(self._settings.catalog_path),
                views_dir=views_dir,
            )
        return self._catalog_writer_cache

    def get_tagging_writer(self) -> BaseTaggingWriter:
        if self._tagging_writer_cache is None:
            self._tagging_writer_cache = TaggingFileWriter(self.resolve(self._settings.tag_file))
        return self._tagging_writer_cache

    def get_document_writer(self, path: str | Path, mode: str | None = None) -> BaseDocumentWriter:
        """Get a writer for one template.

        Raises:
            ValueError: If the output mode is unknown.
        """
        return TemplateFileWriter(str(path), mode or self._settings.output_mode)

    def create_extractor(
        self,
        path: str | Path,
        registry: list[Any] | None = None,
        interactive: bool | None = None,
    ) -> TemplateExtractor:
        """Build a TemplateExtractor for one template.

        Args:
            path: Template path, resolved against the project root.
            registry: Optional list the extractor registers itself in.
            interactive: Override the settings' interactive flag.

        Returns:
            A TemplateExtractor that has already read and validated the file.
        """
        if interactive is None:
            interactive = self._settings.interactive
        template = self.resolve(path)
        logger.info(f"Creating extractor for {template} (interactive={interactive})")
        return TemplateExtractor(
            path=template,
            classifier=self.get_classifier(),
            catalog_writer=self.get_catalog_writer(),
            document_writer=self.get_document_writer(template),
            tagging_writer=self.get_tagging_writer(),
            prompter=self.get_prompter(interactive),
            interactive=interactive,
            key_max_length=self._settings.key_max_length,
            translate_helper=self._settings.translate_helper,
            registry=registry,
        )

    def clear_cache(self) -> None:
        """Clear all cached component instances."""
        self._classifier_cache = None
        self._prompter_cache = None
        self._catalog_writer_cache = None
        self._tagging_writer_cache = None
        logger.info("Component cache cleared")
