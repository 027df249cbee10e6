"""Line-level text extraction pipeline."""

from i18n_extractor.extraction.assembler import DocumentAssembler
from i18n_extractor.extraction.extractor import ExtractionResult, TemplateExtractor
from i18n_extractor.extraction.finder import find_text
from i18n_extractor.extraction.models import (
    Line,
    LineOutcome,
    LineResult,
    ReplacementRecord,
    TextMatch,
)
from i18n_extractor.extraction.normalizer import split_lines, split_whitespace
from i18n_extractor.extraction.processor import LineProcessor
from i18n_extractor.extraction.replacer import KeyGenerator, TextReplacer
from i18n_extractor.extraction.resolver import resolve_action

__all__ = [
    "DocumentAssembler",
    "ExtractionResult",
    "TemplateExtractor",
    "find_text",
    "Line",
    "LineOutcome",
    "LineResult",
    "ReplacementRecord",
    "TextMatch",
    "split_lines",
    "split_whitespace",
    "LineProcessor",
    "KeyGenerator",
    "TextReplacer",
    "resolve_action",
]
