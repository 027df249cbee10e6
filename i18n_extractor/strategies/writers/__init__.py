"""Concrete writer implementations."""

from i18n_extractor.strategies.writers.tagging import TaggingFileWriter
from i18n_extractor.strategies.writers.template_file import TemplateFileWriter
from i18n_extractor.strategies.writers.yaml_catalog import YamlCatalogWriter

__all__ = [
    "TaggingFileWriter",
    "TemplateFileWriter",
    "YamlCatalogWriter",
]
