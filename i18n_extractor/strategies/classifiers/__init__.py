"""Concrete classifier implementations."""

from i18n_extractor.strategies.classifiers.haml import HamlLineClassifier

__all__ = [
    "HamlLineClassifier",
]
