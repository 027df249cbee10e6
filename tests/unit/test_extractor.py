"""Unit tests for the per-template extraction driver."""

import pytest
import yaml

from i18n_extractor.core.exceptions import InvalidSyntax
from i18n_extractor.extraction.extractor import TemplateExtractor
from i18n_extractor.interfaces.prompter import Decision
from i18n_extractor.strategies.classifiers import HamlLineClassifier
from i18n_extractor.strategies.prompters import AutoPrompter
from i18n_extractor.strategies.writers import (
    TaggingFileWriter,
    TemplateFileWriter,
    YamlCatalogWriter,
)

TEMPLATE = "%div\n  %h1 Hello World\n  - x = 1\n  = link_to 'Sign up', signup_path\n"


class RejectRewrittenClassifier(HamlLineClassifier):
    """Accepts the original template but rejects any rewritten one."""

    def validate(self, text, path=""):
        if "t('." in text:
            raise InvalidSyntax(path, "rejected for testing", 1)
        super().validate(text, path)


@pytest.fixture
def project(tmp_path):
    views = tmp_path / "app" / "views"
    (views / "users").mkdir(parents=True)
    template = views / "users" / "show.html.haml"
    template.write_text(TEMPLATE, encoding="utf-8")
    return tmp_path, views, template


@pytest.fixture
def build(project):
    """Build a TemplateExtractor wired to real writers under tmp_path."""
    root, views, default_template = project

    def _build(template=None, classifier=None, prompter=None, interactive=False, mode="overwrite", registry=None):
        template = template or default_template
        return TemplateExtractor(
            path=template,
            classifier=classifier or HamlLineClassifier(),
            catalog_writer=YamlCatalogWriter("en", root / "config" / "locales" / "en.yml", views),
            document_writer=TemplateFileWriter(str(template), mode),
            tagging_writer=TaggingFileWriter(root / ".i18n-extractor-tags"),
            prompter=prompter or AutoPrompter(),
            interactive=interactive,
            registry=registry,
        )

    return _build


def _catalog(root):
    with open(root / "config" / "locales" / "en.yml", encoding="utf-8") as f:
        return yaml.safe_load(f)


class TestTemplateExtractor:
    """Test suite for TemplateExtractor."""

    # =========================================================================
    # Construction Tests
    # =========================================================================

    def test_missing_template(self, build, tmp_path):
        with pytest.raises(FileNotFoundError):
            build(template=tmp_path / "missing.html.haml")

    def test_invalid_template(self, build, project):
        _, views, _ = project
        broken = views / "users" / "broken.html.haml"
        broken.write_text("  %p Indented first line\n", encoding="utf-8")
        registry = []

        with pytest.raises(InvalidSyntax):
            build(template=broken, registry=registry)
        assert registry == []

    def test_registry(self, build):
        registry = []
        extractor = build(registry=registry)
        assert registry == [extractor]

    # =========================================================================
    # Run Tests
    # =========================================================================

    def test_run_rewrites_template_and_catalog(self, build, project):
        root, _, template = project

        result = build().run()

        assert template.read_text(encoding="utf-8") == (
            "%div\n  %h1= t('.hello_world')\n  - x = 1\n  = link_to t('.sign_up'), signup_path\n"
        )
        assert _catalog(root) == {
            "en": {"users": {"show": {"hello_world": "Hello World", "sign_up": "Sign up"}}}
        }
        assert [no for no, _ in result.replacements] == [2, 4]
        assert result.proposed == 2
        assert not result.aborted
        assert result.written == [str(root / "config" / "locales" / "en.yml"), str(template)]

    def test_dry_run_writes_nothing(self, build, project):
        root, _, template = project

        result = build().run(write=False)

        assert template.read_text(encoding="utf-8") == TEMPLATE
        assert not (root / "config").exists()
        assert result.written == []
        assert "t('.hello_world')" in result.body

    def test_dump_mode(self, build, project):
        _, views, template = project

        build(mode="dump").run()

        assert template.read_text(encoding="utf-8") == TEMPLATE
        assert "t('.hello_world')" in (views / "users" / "show.html.i18n-extractor.haml").read_text(encoding="utf-8")

    def test_no_text_skips_catalog(self, build, project):
        root, views, _ = project
        template = views / "users" / "_empty.html.haml"
        template.write_text("- x = 1\n%br/\n", encoding="utf-8")

        result = build(template=template).run()

        assert not (root / "config").exists()
        assert result.written == [str(template)]
        assert template.read_text(encoding="utf-8") == "- x = 1\n%br/\n"

    def test_second_run_is_a_no_op(self, build, project):
        root, _, template = project
        build().run()
        first_body = template.read_text(encoding="utf-8")
        first_catalog = _catalog(root)

        result = build().run()

        assert template.read_text(encoding="utf-8") == first_body
        assert _catalog(root) == first_catalog
        assert result.replacements == []

    def test_existing_catalog_keys_are_not_overwritten(self, build, project):
        root, _, _ = project
        catalog = root / "config" / "locales" / "en.yml"
        catalog.parent.mkdir(parents=True)
        catalog.write_text("en:\n  users:\n    show:\n      hello_world: Hi everyone\n", encoding="utf-8")

        build().run()

        show = _catalog(root)["en"]["users"]["show"]
        assert show["hello_world"] == "Hi everyone"
        new_keys = [k for k in show if k.startswith("hello_world_")]
        assert len(new_keys) == 1
        assert show[new_keys[0]] == "Hello World"

    def test_rewritten_template_failing_validation_writes_nothing(self, build, project):
        root, _, template = project

        with pytest.raises(InvalidSyntax):
            build(classifier=RejectRewrittenClassifier()).run()

        assert template.read_text(encoding="utf-8") == TEMPLATE
        assert not (root / "config").exists()

    # =========================================================================
    # Interactive Tests
    # =========================================================================

    def test_interactive_next_keeps_the_rest(self, build, project, scripted_prompter):
        root, _, template = project
        prompter = scripted_prompter([Decision.REPLACE, Decision.NEXT])

        result = build(prompter=prompter, interactive=True).run()

        assert template.read_text(encoding="utf-8") == (
            "%div\n  %h1= t('.hello_world')\n  - x = 1\n  = link_to 'Sign up', signup_path\n"
        )
        assert result.aborted_at == 4
        assert prompter.moved_on == 1
        assert _catalog(root)["en"]["users"]["show"] == {"hello_world": "Hello World"}

    def test_interactive_tag(self, build, project, scripted_prompter):
        root, _, template = project
        prompter = scripted_prompter([Decision.TAG, Decision.NO_REPLACE])

        result = build(prompter=prompter, interactive=True).run()

        assert template.read_text(encoding="utf-8") == TEMPLATE
        assert (root / ".i18n-extractor-tags").read_text(encoding="utf-8") == f"{template}:2\n"
        assert result.replacements == []
