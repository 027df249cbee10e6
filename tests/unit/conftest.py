"""Shared fixtures for the extractor unit tests."""

import pytest

from i18n_extractor.extraction.assembler import DocumentAssembler
from i18n_extractor.extraction.models import Line
from i18n_extractor.extraction.normalizer import split_lines
from i18n_extractor.extraction.processor import LineProcessor
from i18n_extractor.extraction.replacer import KeyGenerator, TextReplacer
from i18n_extractor.interfaces.prompter import BasePrompter
from i18n_extractor.interfaces.writers import BaseTaggingWriter
from i18n_extractor.strategies.classifiers import HamlLineClassifier


class ScriptedPrompter(BasePrompter):
    """Answers with a fixed list of decisions and records what it was shown."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.asked = []
        self.moved_on = 0

    def ask_user(self, original, replacement):
        self.asked.append((original, replacement))
        return self.answers.pop(0)

    def moving_to_next_file(self):
        self.moved_on += 1


class RecordingTaggingWriter(BaseTaggingWriter):
    """Keeps tagged lines in memory."""

    def __init__(self):
        self.tagged = []

    def write(self, path, line_no):
        self.tagged.append((path, line_no))


@pytest.fixture
def classifier():
    return HamlLineClassifier()


@pytest.fixture
def tagging_writer():
    return RecordingTaggingWriter()


@pytest.fixture
def scripted_prompter():
    """Factory for prompters answering with the given decisions."""
    return ScriptedPrompter


@pytest.fixture
def make_lines(classifier):
    """Turn template text into classified Line objects."""

    def _make(text):
        metadata = classifier.classify(text)
        return [
            Line(number=no, raw=raw, metadata=metadata[no])
            for no, raw in enumerate(split_lines(text), start=1)
        ]

    return _make


@pytest.fixture
def run_pipeline(make_lines, tagging_writer):
    """Run the full line pipeline over text in memory.

    Returns (body, processor, assembler).
    """

    def _run(text, answers=None, path="users/show.html.haml", existing=None):
        prompter = ScriptedPrompter(answers) if answers is not None else None
        processor = LineProcessor(
            path=path,
            replacer=TextReplacer(KeyGenerator(existing=existing)),
            tagging_writer=tagging_writer,
            prompter=prompter,
            interactive=answers is not None,
        )
        assembler = DocumentAssembler(processor, prompter)
        body = assembler.assemble(make_lines(text))
        return body, processor, assembler

    return _run

